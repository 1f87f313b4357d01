from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from bas_atlas.constants import CATEGORIES_FILE, INDEX_FILE, SEARCH_INDEX_FILE


@dataclass(frozen=True)
class CategoryType:
    id: str
    name: str
    slug: str
    count: int

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "slug": self.slug, "count": self.count}


@dataclass(frozen=True)
class CategoryBrand:
    id: str
    name: str
    slug: str
    count: int
    types: tuple[CategoryType, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "slug": self.slug,
            "count": self.count,
            "types": [entry.to_dict() for entry in self.types],
        }


@dataclass(frozen=True)
class Categories:
    brands: tuple[CategoryBrand, ...]
    types: tuple[CategoryType, ...]

    def to_dict(self, version: str) -> dict[str, Any]:
        return {
            "version": version,
            "brands": [entry.to_dict() for entry in self.brands],
            "types": [entry.to_dict() for entry in self.types],
        }


@dataclass(frozen=True)
class SearchEntry:
    id: str
    kind: str
    name: str
    tokens: tuple[str, ...]
    brand: Optional[str] = None
    model_numbers: Optional[tuple[str, ...]] = None

    def to_dict(self) -> dict[str, Any]:
        entry: dict[str, Any] = {"id": self.id, "type": self.kind, "name": self.name}
        if self.brand is not None:
            entry["brand"] = self.brand
        if self.model_numbers is not None:
            entry["model_numbers"] = list(self.model_numbers)
        entry["tokens"] = list(self.tokens)
        return entry


@dataclass(frozen=True)
class Artifacts:
    """The three serialized build outputs, keyed by file name."""
    index: dict[str, Any]
    categories: dict[str, Any]
    search_index: dict[str, Any]

    def by_file(self) -> dict[str, dict[str, Any]]:
        return {
            INDEX_FILE: self.index,
            CATEGORIES_FILE: self.categories,
            SEARCH_INDEX_FILE: self.search_index,
        }
