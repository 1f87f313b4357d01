"""
Search index derivation.

One entry per brand, type and model. Each entry carries the deduplicated,
sorted tokens of its identifying text; model entries also pick up the names
of the brand and type they reference.
"""

from __future__ import annotations

from bas_atlas.constants import BRAND, MODEL, TYPE
from bas_atlas.models import Brand, Dataset, DeviceModel, DeviceType, SearchEntry, resolve_name
from bas_atlas.services.text_utils import collation_key, tokenize, tokenize_all, unique_sorted


def build_search_entries(dataset: Dataset) -> tuple[SearchEntry, ...]:
    entries: list[SearchEntry] = []
    entries.extend(brand_entry(brand) for brand in dataset.brands)
    entries.extend(type_entry(device_type) for device_type in dataset.types)
    entries.extend(model_entry(model, dataset) for model in dataset.models)
    # Stable sort keeps brand, type, model order for ids shared across kinds.
    return tuple(sorted(entries, key=lambda entry: collation_key(entry.id)))


def brand_entry(brand: Brand) -> SearchEntry:
    return SearchEntry(
        id=brand.id,
        kind=BRAND,
        name=resolve_name(brand),
        tokens=unique_sorted(tokenize(brand.name) + tokenize(brand.id) + tokenize(brand.slug)),
    )


def type_entry(device_type: DeviceType) -> SearchEntry:
    return SearchEntry(
        id=device_type.id,
        kind=TYPE,
        name=resolve_name(device_type),
        tokens=unique_sorted(
            tokenize(device_type.name) + tokenize(device_type.id) + tokenize(device_type.slug)
        ),
    )


def model_entry(model: DeviceModel, dataset: Dataset) -> SearchEntry:
    brand = dataset.brands_by_id.get(model.brand)
    device_type = dataset.types_by_id.get(model.type)
    tokens = (
        tokenize(model.name)
        + tokenize(model.id)
        + tokenize(model.slug)
        + tokenize_all(model.model_numbers)
        + tokenize_all(model.protocols)
        + tokenize_all(model.common_aliases)
        + tokenize_all(model.misspellings)
        + tokenize(brand.name if brand else None)
        + tokenize(device_type.name if device_type else None)
    )
    return SearchEntry(
        id=model.id,
        kind=MODEL,
        name=resolve_name(model),
        tokens=unique_sorted(tokens),
        brand=model.brand,
        model_numbers=tuple(model.model_numbers),
    )


def build_search_index(dataset: Dataset) -> dict:
    return {
        "version": dataset.version,
        "entries": [entry.to_dict() for entry in build_search_entries(dataset)],
    }
