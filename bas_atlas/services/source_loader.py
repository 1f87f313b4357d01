"""
Discovery and parsing of catalog source records.

A data directory holds either one canonical snapshot (``canonical/index.json``
by default) or a tree of per-entity files, each carrying a single ``brand``,
``type`` or ``model`` object. The snapshot always wins when present.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterator, Type, TypeVar

from pydantic import ValidationError as PydanticValidationError

from bas_atlas.constants import BRAND, COLLECTION_KEYS, MODEL, SOURCE_EXTENSIONS, TYPE
from bas_atlas.exceptions import ParseError, SchemaError, SourceIOError
from bas_atlas.models import Brand, CatalogRecord, DeviceModel, DeviceType, RawDataset

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=CatalogRecord)

RECORD_CLASSES: dict[str, Type[CatalogRecord]] = {
    BRAND: Brand,
    TYPE: DeviceType,
    MODEL: DeviceModel,
}


def load_sources(data_dir: Path | str, canonical_path: str = "canonical/index.json") -> RawDataset:
    root = Path(data_dir)
    snapshot = root / canonical_path
    if snapshot.is_file():
        logger.info(f"Using canonical snapshot {snapshot}")
        return load_snapshot(snapshot)
    if not root.is_dir():
        logger.warning(f"Data directory {root} does not exist, building an empty catalog")
        return RawDataset(brands=[], types=[], models=[])
    return load_tree(root, excluded=_canonical_subtree(root, canonical_path))


def load_snapshot(path: Path | str) -> RawDataset:
    snapshot = Path(path)
    data = read_json(snapshot)
    if not isinstance(data, dict):
        raise SchemaError(f"Snapshot {snapshot} must be a JSON object")
    version = data.get("version")
    return RawDataset(
        brands=_records(data, BRAND, Brand, snapshot),
        types=_records(data, TYPE, DeviceType, snapshot),
        models=_records(data, MODEL, DeviceModel, snapshot),
        version=str(version) if version is not None else None,
        last_updated=data.get("lastUpdated"),
        origin="snapshot",
    )


def load_tree(root: Path, excluded: Path | None = None) -> RawDataset:
    collected: dict[str, list[CatalogRecord]] = {BRAND: [], TYPE: [], MODEL: []}
    for path in iter_source_files(root, excluded):
        kind, record = classify(path, read_json(path))
        if kind is None:
            logger.warning(f"Skipping {path}: missing brand/type/model root key")
            continue
        collected[kind].append(record)

    logger.info(
        f"Discovered {len(collected[BRAND])} brands, {len(collected[TYPE])} types, "
        f"{len(collected[MODEL])} models under {root}"
    )
    return RawDataset(
        brands=collected[BRAND],
        types=collected[TYPE],
        models=collected[MODEL],
    )


def iter_source_files(directory: Path, excluded: Path | None = None) -> Iterator[Path]:
    """Yield source files depth-first, visiting entries in name order."""
    for entry in sorted(directory.iterdir(), key=lambda p: p.name):
        if entry.is_dir():
            if excluded is not None and entry.resolve() == excluded.resolve():
                continue
            yield from iter_source_files(entry, excluded)
        elif entry.suffix in SOURCE_EXTENSIONS:
            yield entry


def classify(path: Path, data: Any) -> tuple[str | None, CatalogRecord | None]:
    if not isinstance(data, dict):
        return None, None
    for kind, record_cls in RECORD_CLASSES.items():
        if data.get(kind) is not None:
            return kind, parse_record(record_cls, data[kind], kind, path)
    return None, None


def parse_record(record_cls: Type[RecordT], payload: Any, kind: str, path: Path) -> RecordT:
    try:
        return record_cls.model_validate(payload)
    except PydanticValidationError as e:
        raise SchemaError(f"Invalid {kind} record in {path}", kind=kind, detail=str(e)) from e


def read_json(path: Path) -> Any:
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceIOError(path, str(e)) from e
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ParseError(path, str(e)) from e


def _records(data: dict, kind: str, record_cls: Type[RecordT], path: Path) -> list[RecordT]:
    key = COLLECTION_KEYS[kind]
    items = data.get(key)
    if not isinstance(items, list):
        raise SchemaError(f"Snapshot {path} is missing the '{key}' array", kind=kind)
    return [parse_record(record_cls, item, kind, path) for item in items]


def _canonical_subtree(root: Path, canonical_path: str) -> Path | None:
    parts = Path(canonical_path).parts
    if len(parts) < 2:
        return None
    return root / parts[0]
