import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.config import settings
from storefront.exception_handlers import register_exception_handlers
from storefront.middleware.language import LanguageMiddleware
from storefront.middleware.logging import StructuredLoggingMiddleware, setup_structured_logging
from storefront.routes import health, pages, seo
from storefront.routes.page_data import i18n_router, page_data_router

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create the FastAPI application."""
    setup_structured_logging(log_level=settings.log_level, json_format=settings.log_json)

    app = FastAPI(
        title=settings.app_name,
        description="Multi-locale storefront front-end",
        debug=settings.debug,
        version=settings.app_version,
    )

    # Starlette runs middleware in reverse order of registration
    app.add_middleware(LanguageMiddleware)
    app.add_middleware(StructuredLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Fixed paths before the /{locale} catch-all
    app.include_router(health.router)
    app.include_router(seo.router)
    app.include_router(page_data_router, prefix="/api/v1/page-data")
    app.include_router(i18n_router, prefix="/api/v1/i18n")
    app.include_router(pages.router)

    if settings.debug:
        logger.info(f"Running in {settings.environment} mode")
        logging.getLogger("httpx").setLevel(logging.DEBUG)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=settings.debug)
