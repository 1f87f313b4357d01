"""
Catalog entities and the normalized dataset.

Records are parsed into pydantic models that keep unknown fields, so the
full index can be written back without losing source data. Optional display
fields are resolved through the ``resolve_*`` helpers below rather than at
each call site.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


class CatalogRecord(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True, protected_namespaces=())

    id: Optional[str] = None
    name: Optional[str] = None
    slug: Optional[str] = None

    def to_record(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_unset=True)


class Brand(CatalogRecord):
    pass


class DeviceType(CatalogRecord):
    pass


class Aliases(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    common: list[str] = Field(default_factory=list)
    misspellings: list[str] = Field(default_factory=list)


class DeviceModel(CatalogRecord):
    brand: Optional[str] = None
    type: Optional[str] = None
    model_numbers: list[str] = Field(default_factory=list)
    protocols: list[str] = Field(default_factory=list)
    aliases: Optional[Aliases] = None

    @property
    def common_aliases(self) -> list[str]:
        return self.aliases.common if self.aliases else []

    @property
    def misspellings(self) -> list[str]:
        return self.aliases.misspellings if self.aliases else []


def resolve_name(entity: Optional[CatalogRecord], fallback: str = "") -> str:
    """Display name: ``name``, then ``id``, then ``fallback``."""
    if entity is None:
        return fallback
    return entity.name or entity.id or fallback


def resolve_slug(entity: Optional[CatalogRecord], fallback: str = "") -> str:
    """URL slug: ``slug``, then ``id``, then ``fallback``."""
    if entity is None:
        return fallback
    return entity.slug or entity.id or fallback


@dataclass(frozen=True)
class RawDataset:
    """Entities as loaded, before sorting and timestamp resolution."""
    brands: list[Brand]
    types: list[DeviceType]
    models: list[DeviceModel]
    version: Optional[str] = None
    last_updated: Optional[str] = None
    origin: str = "tree"


@dataclass(frozen=True)
class Dataset:
    """Canonical dataset shared by every derivation step."""
    version: str
    last_updated: str
    brands: tuple[Brand, ...]
    types: tuple[DeviceType, ...]
    models: tuple[DeviceModel, ...]
    brands_by_id: Mapping[str, Brand]
    types_by_id: Mapping[str, DeviceType]

    @property
    def total_brands(self) -> int:
        return len(self.brands)

    @property
    def total_types(self) -> int:
        return len(self.types)

    @property
    def total_models(self) -> int:
        return len(self.models)

    def to_index(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "lastUpdated": self.last_updated,
            "totalBrands": self.total_brands,
            "totalTypes": self.total_types,
            "totalModels": self.total_models,
            "brands": [brand.to_record() for brand in self.brands],
            "types": [device_type.to_record() for device_type in self.types],
            "models": [model.to_record() for model in self.models],
        }
