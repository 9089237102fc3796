# deptboard/core/errors.py
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from deptboard.core.logger import get_logger

logger = get_logger("errors")

INTERNAL_ERROR_MESSAGE = "Internal server error"


def internal_error_response() -> JSONResponse:
    # Details stay in the server log, clients only get the static message
    return JSONResponse(status_code=500, content={"message": INTERNAL_ERROR_MESSAGE})


def add_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
        )
        return internal_error_response()
