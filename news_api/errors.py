"""
Client-visible error taxonomy and the handlers that render it.

Services and validators raise ``ApiError`` subclasses; the handlers
installed by ``install_exception_handlers`` turn them into ``{"msg": ...}``
bodies.  Anything that is not an ``ApiError`` (including every
``SQLAlchemyError``) is reported as a generic 500 and only the log
carries the cause.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

ARTICLE_NOT_FOUND = "No article found with that id"
COMMENT_NOT_FOUND = "No comment found with that id"
USER_NOT_FOUND = "No user with that username"


class ApiError(Exception):
    """Base class for every error that maps to a fixed status and message."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    msg: str = "Bad request"

    def __init__(self, msg: str | None = None) -> None:
        if msg is not None:
            self.msg = msg
        super().__init__(self.msg)


class BadRequest(ApiError):
    """Malformed id, malformed ``inc_votes`` or malformed comment body."""


class InvalidBody(ApiError):
    msg = "Invalid request body"


class InvalidSortColumn(ApiError):
    msg = "Invalid sort_by - no column with that name"


class InvalidOrder(ApiError):
    msg = "Bad order request"


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    msg = "Not found"


class UnknownTopic(NotFound):
    msg = "No topic with that name"


class RouteNotFound(NotFound):
    msg = "Route not found"


class InternalError(ApiError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    msg = "Internal server error"


def error_response(exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"msg": exc.msg})


def classify(exc: Exception) -> ApiError:
    """
    Return the ``ApiError`` that should be reported for *exc*.

    Routing failures from Starlette (unknown path, or a known path with an
    unsupported method) collapse to ``RouteNotFound``; request parsing
    failures become ``BadRequest``; everything unrecognised is an
    ``InternalError``.
    """
    if isinstance(exc, ApiError):
        return exc
    if isinstance(exc, StarletteHTTPException):
        if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            return RouteNotFound()
        error = ApiError()
        error.status_code = exc.status_code
        return error
    if isinstance(exc, RequestValidationError):
        return BadRequest()
    return InternalError()


def install_exception_handlers(app: FastAPI) -> None:
    """Register the handlers that render every failure as ``{"msg": ...}``."""

    @app.exception_handler(ApiError)
    async def _handle_api_error(_request: Request, exc: ApiError) -> JSONResponse:
        return error_response(exc)

    @app.exception_handler(StarletteHTTPException)
    async def _handle_http_error(
        _request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return error_response(classify(exc))

    @app.exception_handler(RequestValidationError)
    async def _handle_validation_error(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.debug("Request validation failed: %s", exc.errors())
        return error_response(classify(exc))

    @app.exception_handler(SQLAlchemyError)
    async def _handle_storage_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.exception("Storage failure on %s %s", request.method, request.url.path)
        return error_response(InternalError())

    @app.exception_handler(Exception)
    async def _handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response(InternalError())
