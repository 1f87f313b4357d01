from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping, Optional, TypeVar

from bas_atlas import __version__
from bas_atlas.models import CatalogRecord, Dataset, RawDataset
from bas_atlas.services.clock import ClockResolver
from bas_atlas.services.text_utils import collation_key, format_timestamp

RecordT = TypeVar("RecordT", bound=CatalogRecord)


def normalize(
    raw: RawDataset,
    clock: Optional[ClockResolver] = None,
    build_version: str = __version__,
) -> Dataset:
    """Map a raw dataset of any origin onto the canonical, sorted shape."""
    clock = clock or ClockResolver()
    brands = sort_by_id(raw.brands)
    types = sort_by_id(raw.types)
    return Dataset(
        version=raw.version or build_version,
        last_updated=format_timestamp(clock.resolve(raw.last_updated)),
        brands=brands,
        types=types,
        models=sort_by_id(raw.models),
        brands_by_id=index_by_id(brands),
        types_by_id=index_by_id(types),
    )


def sort_by_id(records: Iterable[RecordT]) -> tuple[RecordT, ...]:
    return tuple(sorted(records, key=lambda record: collation_key(record.id)))


def index_by_id(records: Iterable[RecordT]) -> Mapping[str, RecordT]:
    lookup: dict[str, RecordT] = {}
    for record in records:
        if record.id:
            lookup.setdefault(record.id, record)
    return MappingProxyType(lookup)
