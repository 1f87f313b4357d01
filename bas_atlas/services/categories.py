from __future__ import annotations

from collections import Counter, defaultdict
from typing import Iterable

from bas_atlas.models import (
    Brand,
    Categories,
    CategoryBrand,
    CategoryType,
    Dataset,
    DeviceType,
    resolve_name,
    resolve_slug,
)
from bas_atlas.services.text_utils import collation_key


def build_categories(dataset: Dataset) -> Categories:
    """Roll models up per brand (with per-type counts) and per type."""
    brand_counts: Counter[str] = Counter()
    type_counts: Counter[str] = Counter()
    types_per_brand: dict[str, Counter[str]] = defaultdict(Counter)

    for model in dataset.models:
        brand_counts[model.brand] += 1
        type_counts[model.type] += 1
        types_per_brand[model.brand][model.type] += 1

    brands = [
        _brand_category(brand, brand_counts[brand.id], types_per_brand.get(brand.id, Counter()), dataset)
        for brand in dataset.brands
    ]
    types = [_type_category(device_type, type_counts[device_type.id]) for device_type in dataset.types]
    return Categories(brands=_by_name(brands), types=_by_name(types))


def _brand_category(brand: Brand, count: int, type_counts: Counter[str], dataset: Dataset) -> CategoryBrand:
    entries = [
        _type_reference(type_id, type_count, dataset)
        for type_id, type_count in type_counts.items()
    ]
    return CategoryBrand(
        id=brand.id,
        name=resolve_name(brand),
        slug=resolve_slug(brand),
        count=count,
        types=_by_name(entries),
    )


def _type_reference(type_id: str, count: int, dataset: Dataset) -> CategoryType:
    # Validation guarantees the type exists; fall back to the raw id for display only.
    device_type = dataset.types_by_id.get(type_id)
    return CategoryType(
        id=type_id,
        name=resolve_name(device_type, fallback=type_id),
        slug=resolve_slug(device_type, fallback=type_id),
        count=count,
    )


def _type_category(device_type: DeviceType, count: int) -> CategoryType:
    return CategoryType(
        id=device_type.id,
        name=resolve_name(device_type),
        slug=resolve_slug(device_type),
        count=count,
    )


def _by_name(entries: Iterable):
    return tuple(sorted(entries, key=lambda entry: (collation_key(entry.name), collation_key(entry.id))))
