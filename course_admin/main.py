"""FastAPI application entrypoint for the course admin API."""

import logging

from fastapi import FastAPI

from course_admin.api.account import router as account_router
from course_admin.api.articles import router as articles_router
from course_admin.api.auth import router as auth_router
from course_admin.api.categories import router as categories_router
from course_admin.api.chapters import router as chapters_router
from course_admin.api.charts import router as charts_router
from course_admin.api.courses import router as courses_router
from course_admin.api.settings import router as settings_router
from course_admin.api.users import router as users_router
from course_admin.core.config import get_settings
from course_admin.core.errors import register_error_handlers
from course_admin.core.logging import setup_logging
from course_admin.db import models as _models  # noqa: F401

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Build the admin API with every router and the shared error handlers."""
    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info("Starting course admin API with settings=%s", settings.safe_for_logging())

    application = FastAPI(title="Course Admin")
    register_error_handlers(application)
    application.include_router(auth_router)
    application.include_router(articles_router)
    application.include_router(categories_router)
    application.include_router(courses_router)
    application.include_router(chapters_router)
    application.include_router(users_router)
    application.include_router(settings_router)
    application.include_router(charts_router)
    application.include_router(account_router)

    @application.get("/health")
    def health() -> dict[str, str]:
        """Health check stub endpoint for service readiness."""
        return {"status": "ok"}

    return application


app = create_app()
