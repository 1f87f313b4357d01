"""
Integrity checks run on the normalized dataset before any derivation.

The first violation aborts the build. Dangling model references are
always fatal.
"""

from __future__ import annotations

from typing import Iterable

from bas_atlas.constants import BRAND, MODEL, TYPE
from bas_atlas.exceptions import SchemaError
from bas_atlas.models import CatalogRecord, Dataset
from bas_atlas.services.text_utils import collation_key


def validate_dataset(dataset: Dataset) -> None:
    brand_ids = check_unique_ids(dataset.brands, BRAND)
    type_ids = check_unique_ids(dataset.types, TYPE)
    check_unique_ids(dataset.models, MODEL)

    for model in dataset.models:
        if model.brand not in brand_ids:
            raise SchemaError(
                f"Model {model.id} references missing brand: {model.brand}",
                kind=MODEL,
                entity_id=model.id,
                reference=model.brand,
            )
        if model.type not in type_ids:
            raise SchemaError(
                f"Model {model.id} references missing type: {model.type}",
                kind=MODEL,
                entity_id=model.id,
                reference=model.type,
            )

    check_sorted(dataset.brands, BRAND)
    check_sorted(dataset.types, TYPE)
    check_sorted(dataset.models, MODEL)


def check_unique_ids(records: Iterable[CatalogRecord], kind: str) -> set[str]:
    seen: set[str] = set()
    for position, record in enumerate(records):
        if not record.id:
            raise SchemaError(
                f"{kind.capitalize()} at position {position} is missing id",
                kind=kind,
            )
        if record.id in seen:
            raise SchemaError(
                f"Duplicate {kind} id: {record.id}",
                kind=kind,
                entity_id=record.id,
            )
        seen.add(record.id)
    return seen


def check_sorted(records: tuple[CatalogRecord, ...], kind: str) -> None:
    for previous, current in zip(records, records[1:]):
        if collation_key(previous.id) > collation_key(current.id):
            raise SchemaError(
                f"{kind.capitalize()} collection is not sorted by id at {current.id}",
                kind=kind,
                entity_id=current.id,
            )
