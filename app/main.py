import sqlite3
from contextlib import asynccontextmanager

import uvicorn
from aws_lambda_powertools import Logger
from aws_lambda_powertools.logging.logger import set_package_logger
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from app.api.api import router as api_router
from app.database import Database
from app.middlewares import CorrelationIdMiddleware, CorsMiddleware
from app.models.response import ErrorResponse
from app.settings import Settings

logger = Logger(utc=True)


def _error_response(
    status_code: int, message: str, headers: dict[str, str] | None = None
) -> JSONResponse:
    return JSONResponse(
        content=jsonable_encoder(ErrorResponse(error=message)),
        status_code=status_code,
        headers=headers,
    )


def _validation_message(error: RequestValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
        for err in error.errors()
    )


async def sqlite_error_handler(
    request: Request, error: sqlite3.Error
) -> JSONResponse:
    logger.exception(
        f"Received database error {request.method=} {request.url.path=}"
    )
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(error))


async def http_exception_handler(
    request: Request, error: HTTPException
) -> JSONResponse:
    logger.warning(f"Received http exception {error.status_code=} {error.detail=}")
    return _error_response(error.status_code, str(error.detail), error.headers)


async def request_validation_error_handler(
    request: Request, error: RequestValidationError
) -> JSONResponse:
    message = _validation_message(error)
    logger.warning(f"Received request validation error {message=}")
    return _error_response(status.HTTP_400_BAD_REQUEST, message)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()

    if settings.debug:
        set_package_logger()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database = Database(settings.database_path)
        database.initialize()
        app.state.database = database
        try:
            yield
        finally:
            database.close()

    app = FastAPI(
        debug=settings.debug,
        title=settings.app_name,
        version="1.0.0",
        lifespan=lifespan,
    )
    app.add_middleware(CorrelationIdMiddleware)
    app.add_middleware(GZipMiddleware)
    app.add_middleware(CorsMiddleware)
    app.include_router(api_router)
    app.add_exception_handler(sqlite3.Error, sqlite_error_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    return app


app = create_app()


def run():
    settings = Settings()
    logger.info(f"Server listening on port {settings.port}")
    uvicorn.run("app.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
