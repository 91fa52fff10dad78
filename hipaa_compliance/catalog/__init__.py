"""
Catalogs — static regulatory reference data.

    from hipaa_compliance.catalog import get_requirement_catalog
    clause = get_requirement_catalog().lookup("164.308(a)(2)")
"""

from .errors import CatalogLoadError
from .requirement_catalog import RequirementCatalog
from .question_catalog import QuestionCatalog
from .loader import (
    get_question_catalog,
    get_requirement_catalog,
    load_question_catalog,
    load_requirement_catalog,
)

__all__ = [
    "CatalogLoadError",
    "RequirementCatalog",
    "QuestionCatalog",
    "get_question_catalog",
    "get_requirement_catalog",
    "load_question_catalog",
    "load_requirement_catalog",
]
