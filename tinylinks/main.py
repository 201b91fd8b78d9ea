from contextlib import asynccontextmanager
from typing import Optional
import logging

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from tinylinks.api import health, links, pages, redirect
from tinylinks.core.config import Settings, get_settings
from tinylinks.core.context import AppContext
from tinylinks.core.errors import LinkError
from tinylinks.core.logging_config import configure_logging

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Application '{settings.PROJECT_NAME}' starting up.")
        # A storage failure here aborts startup
        app.state.context = AppContext.build(settings)
        try:
            yield
        finally:
            logger.info("Shutting down gracefully...")
            app.state.context.close()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="URL shortener with click tracking",
        lifespan=lifespan,
    )

    app.include_router(pages.router)
    app.include_router(links.router)
    app.include_router(health.router)
    # catch-all /{code}, keep last
    app.include_router(redirect.router)

    @app.exception_handler(LinkError)
    async def link_error_handler(request: Request, exc: LinkError):
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.error(f"{request.method} {request.url.path} rejected: {exc.errors()}")
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": "Invalid request body"})

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": "Server error"})

    return app


def run():
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    uvicorn.run(create_app(settings), host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
