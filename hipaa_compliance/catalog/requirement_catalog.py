"""
Requirement Catalog — static, versioned set of regulatory clauses.

Pure reference data: built once from the JSON catalog and never mutated.
Lookups of unknown codes return None so callers can decide how to handle
a rule that has drifted out of sync with the catalog.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from hipaa_compliance.catalog.errors import CatalogLoadError
from hipaa_compliance.models.enums import RequirementCategory
from hipaa_compliance.models.schemas import RequirementClause


class RequirementCatalog:
    """Ordered, code-indexed collection of RequirementClause entries."""

    def __init__(self, clauses: Iterable[RequirementClause], version: str = ""):
        self._clauses: tuple[RequirementClause, ...] = tuple(clauses)
        self._by_code: dict[str, RequirementClause] = {}
        for clause in self._clauses:
            if clause.code in self._by_code:
                raise CatalogLoadError(f"Duplicate requirement code: {clause.code}")
            self._by_code[clause.code] = clause
        self.version = version

    def lookup(self, code: str) -> Optional[RequirementClause]:
        return self._by_code.get(code)

    def list_by_category(self, category: RequirementCategory | str) -> list[RequirementClause]:
        value = category.value if isinstance(category, RequirementCategory) else category
        return [c for c in self._clauses if c.category.value == value]

    def list_all_categories(self) -> list[str]:
        """Distinct categories in first-seen catalog order."""
        seen: dict[str, None] = {}
        for clause in self._clauses:
            seen.setdefault(clause.category.value, None)
        return list(seen)

    @property
    def codes(self) -> list[str]:
        return [c.code for c in self._clauses]

    def __contains__(self, code: object) -> bool:
        return code in self._by_code

    def __iter__(self) -> Iterator[RequirementClause]:
        return iter(self._clauses)

    def __len__(self) -> int:
        return len(self._clauses)

    def __repr__(self) -> str:
        return f"RequirementCatalog(version={self.version!r}, clauses={len(self)})"
