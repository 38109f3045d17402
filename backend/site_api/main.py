"""Consulting Site API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map SiteApiError → {"error": message} with its status
    - CORS configured from settings (not hardcoded)
    - Database manager built at startup when DATABASE_URL is set, otherwise on first use
    - Served on loopback only (HOST/PORT, default 127.0.0.1:5050)
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from site_api.api.error_handlers import register_error_handlers
from site_api.api.routes import (
    admin_blog_posts, admin_case_studies, admin_dashboard, admin_inquiries,
    admin_meetings, admin_team_members, admin_testimonials, health,
    public_content, public_submissions,
)
from site_api.config import get_settings
from site_api.infrastructure import database, identity
from site_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    if settings.database_url and database.db_manager is None:
        database.init_db(settings)
    logger.info("Consulting site API started")
    yield
    if identity.identity_provider is not None:
        await identity.identity_provider.aclose()
        identity.identity_provider = None
    if database.db_manager is not None:
        await database.db_manager.dispose()
        database.db_manager = None
    logger.info("Consulting site API shutting down")


app = FastAPI(
    title="Consulting Site API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes: public first, then admin (each admin router carries require_admin)
app.include_router(health.router)
app.include_router(public_content.router)
app.include_router(public_submissions.router)
app.include_router(admin_case_studies.router)
app.include_router(admin_testimonials.router)
app.include_router(admin_team_members.router)
app.include_router(admin_blog_posts.router)
app.include_router(admin_meetings.router)
app.include_router(admin_inquiries.router)
app.include_router(admin_dashboard.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve on the configured loopback host and port."""
    uvicorn.run(
        "site_api.main:app", host=settings.host, port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
