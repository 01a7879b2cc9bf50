import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from news_api import __version__
from news_api.cache import cache
from news_api.database import dispose_engine
from news_api.errors import install_exception_handlers
from news_api.log_config import setup_logging
from news_api.middleware import TimingMiddleware
from news_api.routers import api, articles, comments, topics, users
from news_api.schemas import HealthResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    setup_logging()
    try:
        await cache.connect()
    except Exception as exc:
        logger.warning("Cache unavailable, continuing without it: %s", exc)
    yield
    # Shutdown
    await cache.disconnect()
    await dispose_engine()


app = FastAPI(
    title="News API",
    description="Read/write API over topics, articles, comments and users",
    version=__version__,
    lifespan=lifespan,
)

# Middleware
app.add_middleware(TimingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

install_exception_handlers(app)

# Routers
app.include_router(api.router)
app.include_router(topics.router)
app.include_router(users.router)
app.include_router(articles.router)
app.include_router(comments.router)


@app.get("/health", response_model=HealthResponse)
async def health():
    return {"status": "healthy", "version": __version__, "cache_info": cache.stats}
