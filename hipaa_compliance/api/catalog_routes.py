"""
Catalog routes — read-only access to the requirement and question catalogs.

Routes:
  GET /api/catalog/requirements          → all clauses (optional ?category=)
  GET /api/catalog/requirements/{code}   → one clause (404 when unknown)
  GET /api/catalog/categories            → requirement categories, first-seen order
  GET /api/catalog/questions             → questionnaire grouped by category
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from hipaa_compliance.catalog import get_question_catalog, get_requirement_catalog
from hipaa_compliance.models.schemas import QuestionDefinition, RequirementClause

logger = logging.getLogger(__name__)

catalog_router = APIRouter()


class QuestionGroup(BaseModel):
    category: str
    questions: list[QuestionDefinition] = []


class QuestionnaireResponse(BaseModel):
    version: str
    categories: list[QuestionGroup] = []


@catalog_router.get("/requirements", response_model=list[RequirementClause])
async def list_requirements(category: Optional[str] = None):
    catalog = get_requirement_catalog()
    if category:
        return catalog.list_by_category(category)
    return list(catalog)


@catalog_router.get("/requirements/{code}", response_model=RequirementClause)
async def get_requirement(code: str):
    clause = get_requirement_catalog().lookup(code)
    if clause is None:
        raise HTTPException(status_code=404, detail=f"Requirement {code} not found")
    return clause


@catalog_router.get("/categories")
async def list_categories():
    return get_requirement_catalog().list_all_categories()


@catalog_router.get("/questions", response_model=QuestionnaireResponse)
async def list_questions():
    catalog = get_question_catalog()
    return QuestionnaireResponse(
        version=catalog.version,
        categories=[
            QuestionGroup(category=c, questions=catalog.list_questions_by_category(c))
            for c in catalog.list_categories()
        ],
    )
