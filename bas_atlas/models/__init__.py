from bas_atlas.models.artifacts import (
    Artifacts,
    Categories,
    CategoryBrand,
    CategoryType,
    SearchEntry,
)
from bas_atlas.models.domain import (
    Aliases,
    Brand,
    CatalogRecord,
    Dataset,
    DeviceModel,
    DeviceType,
    RawDataset,
    resolve_name,
    resolve_slug,
)

__all__ = [
    "Aliases",
    "Artifacts",
    "Brand",
    "CatalogRecord",
    "Categories",
    "CategoryBrand",
    "CategoryType",
    "Dataset",
    "DeviceModel",
    "DeviceType",
    "RawDataset",
    "SearchEntry",
    "resolve_name",
    "resolve_slug",
]
