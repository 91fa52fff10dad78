"""
FastAPI application factory and API package.

Run with:
    uvicorn hipaa_compliance.api:app --reload --port 8000

Or via main.py:
    python -m hipaa_compliance --serve
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hipaa_compliance.catalog import get_question_catalog, get_requirement_catalog
from hipaa_compliance.config import get_settings
from hipaa_compliance.engine import get_engine
from hipaa_compliance.api.routes import assessment_router, health_router
from hipaa_compliance.api.catalog_routes import catalog_router

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Application factory — create and configure the FastAPI instance."""
    settings = get_settings()

    # Load catalogs + rule set now so bad data fails at startup, not per request
    requirements = get_requirement_catalog()
    questions = get_question_catalog()
    get_engine()

    application = FastAPI(
        title="HIPAA Compliance Assessment API",
        description="Requirement mapping and compliance scoring for assessment questionnaires",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.cors_origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(health_router, tags=["Health"])
    application.include_router(catalog_router, prefix="/api/catalog", tags=["Catalog"])
    application.include_router(assessment_router, prefix="/api/assessment", tags=["Assessment"])

    logger.info(
        f"Starting {settings.app_name} API "
        f"(requirements {requirements.version}, questions {questions.version})"
    )
    return application


# Module-level instance for `uvicorn hipaa_compliance.api:app`
app = create_app()
