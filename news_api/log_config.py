"""
Logging setup applied once from the application lifespan.

The root level comes from ``LOG_LEVEL``; SQL chatter from SQLAlchemy and
the SQLite driver is governed separately by ``LOG_LEVEL_SQL``.
"""
import logging
import sys

from news_api.config import settings

_SQL_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite")

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def _parse_level(value: str) -> int:
    level = logging.getLevelName(value.upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging() -> None:
    root = logging.getLogger()
    root.setLevel(_parse_level(settings.LOG_LEVEL))
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    sql_level = _parse_level(settings.LOG_LEVEL_SQL)
    for name in _SQL_LOGGERS:
        logging.getLogger(name).setLevel(sql_level)
