"""
Catalog Loader — reads the requirement and question catalogs from JSON and
validates them into immutable in-memory models.

Any problem (missing file, bad JSON, schema violation, duplicate code,
unknown category) raises CatalogLoadError so it surfaces at process start.

Usage:
    python -m hipaa_compliance.catalog.loader            # validate packaged catalogs
    python -m hipaa_compliance.catalog.loader --requirements path/to/requirements.json
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from hipaa_compliance.catalog.errors import CatalogLoadError
from hipaa_compliance.catalog.question_catalog import QuestionCatalog
from hipaa_compliance.catalog.requirement_catalog import RequirementCatalog
from hipaa_compliance.config import get_settings
from hipaa_compliance.models.schemas import QuestionDefinition, RequirementClause
from hipaa_compliance.utils.hashing import fingerprint

logger = logging.getLogger(__name__)

# Packaged catalog data (relative to this file)
_DATA_DIR = Path(__file__).parent / "data"
REQUIREMENTS_FILE = _DATA_DIR / "requirements.json"
QUESTIONS_FILE = _DATA_DIR / "questions.json"


def _read_json(path: Path) -> tuple[dict[str, Any], str]:
    """Return the parsed document and its raw text."""
    if not path.exists():
        raise CatalogLoadError(f"Catalog file not found: {path}")
    raw = path.read_text(encoding="utf-8")
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise CatalogLoadError(f"Invalid JSON in {path}: {e}") from e
    if not isinstance(data, dict):
        raise CatalogLoadError(f"{path}: top level must be an object")
    return data, raw


def _parse_items(path: Path, items: Any, key: str, model_cls: type) -> list:
    if not isinstance(items, list):
        raise CatalogLoadError(f"{path}: '{key}' must be a list")
    parsed = []
    for idx, item in enumerate(items):
        try:
            parsed.append(model_cls.model_validate(item))
        except ValidationError as e:
            ident = item.get("code") or item.get("id") if isinstance(item, dict) else None
            raise CatalogLoadError(f"{path}: {key}[{idx}] ({ident or '?'}) is invalid: {e}") from e
    return parsed


def load_requirement_catalog(path: str | Path | None = None) -> RequirementCatalog:
    """Load and validate a requirement catalog file."""
    path = Path(path) if path else REQUIREMENTS_FILE
    data, raw = _read_json(path)
    clauses = _parse_items(path, data.get("requirements"), "requirements", RequirementClause)
    version = fingerprint(str(data.get("version", "0")), raw)

    catalog = RequirementCatalog(clauses, version=version)
    logger.info(
        f"Loaded {len(catalog)} {data.get('framework', '')} requirements "
        f"(version {version}) from {path.name}"
    )
    return catalog


def load_question_catalog(
    path: str | Path | None = None,
    strict: Optional[bool] = None,
) -> QuestionCatalog:
    """Load and validate a question catalog file."""
    path = Path(path) if path else QUESTIONS_FILE
    if strict is None:
        strict = get_settings().strict_catalog
    data, raw = _read_json(path)

    categories = data.get("categories")
    if not isinstance(categories, list) or not categories:
        raise CatalogLoadError(f"{path}: 'categories' must be a non-empty list")
    questions = _parse_items(path, data.get("questions"), "questions", QuestionDefinition)
    version = fingerprint(str(data.get("version", "0")), raw)

    catalog = QuestionCatalog(categories, questions, version=version, strict=strict)
    logger.info(
        f"Loaded {len(catalog)} questions in {len(categories)} categories "
        f"(version {version}) from {path.name}"
    )
    return catalog


# ── Process-wide cached catalogs ─────────────────────────

@lru_cache()
def get_requirement_catalog() -> RequirementCatalog:
    """Return the configured requirement catalog (loaded once per process)."""
    return load_requirement_catalog(get_settings().requirements_catalog_path or None)


@lru_cache()
def get_question_catalog() -> QuestionCatalog:
    """Return the configured question catalog (loaded once per process)."""
    return load_question_catalog(get_settings().questions_catalog_path or None)


# ── CLI entry point ──────────────────────────────────────

if __name__ == "__main__":
    import argparse
    import sys

    logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")

    parser = argparse.ArgumentParser(description="Validate catalog data files")
    parser.add_argument("--requirements", default=None, help="Requirement catalog JSON")
    parser.add_argument("--questions", default=None, help="Question catalog JSON")
    parser.add_argument("--lenient", action="store_true", help="Drop bad questions instead of failing")
    args = parser.parse_args()

    try:
        load_requirement_catalog(args.requirements)
        load_question_catalog(args.questions, strict=not args.lenient)
    except CatalogLoadError as e:
        logger.error(str(e))
        sys.exit(1)

    print("Catalogs OK.")
