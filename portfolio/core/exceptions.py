import logging
from fastapi.exceptions import RequestValidationError
from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def register_exception_handlers(app):
    """Every error leaves the API as ``{"error": ...}``."""

    # starlette's base class also covers unknown routes and wrong methods
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        log = logger.warning if exc.status_code >= 500 else logger.info
        log("HTTP exception", extra={"status_code": exc.status_code, "path": request.url.path})
        return JSONResponse({"error": exc.detail}, status_code=exc.status_code, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.info("Validation error", extra={"path": request.url.path, "errors": len(exc.errors())})
        return JSONResponse(
            {"error": "Validation error", "details": jsonable_encoder(exc.errors())},
            status_code=422,
        )

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError):
        logger.warning("Integrity error", extra={"path": request.url.path})
        return JSONResponse({"error": "Conflicting or invalid data"}, status_code=409)

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception", extra={"path": request.url.path})
        return JSONResponse({"error": "Internal server error"}, status_code=500)
