"""
Checks of the build output against the JSON Schemas in ``schemas/``.

The pipeline only asks the oracle one question: which errors, if any, does
value V produce under schema S. An empty list means valid.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Protocol

from jsonschema import Draft202012Validator
from jsonschema.exceptions import SchemaError as InvalidSchemaError

from bas_atlas.constants import (
    BRAND,
    CATEGORIES_FILE,
    INDEX_FILE,
    MODEL,
    SCHEMA_FILES,
    SEARCH_INDEX_FILE,
    TYPE,
)
from bas_atlas.exceptions import ExternalValidationError
from bas_atlas.models import Artifacts
from bas_atlas.services.source_loader import read_json

logger = logging.getLogger(__name__)


class SchemaOracle(Protocol):
    def check(self, schema_name: str, value: Any) -> list[str]:
        ...


class JsonSchemaOracle:
    def __init__(self, schemas_dir: Path | str):
        self.schemas_dir = Path(schemas_dir)
        self._validators: dict[str, Draft202012Validator] = {}

    def check(self, schema_name: str, value: Any) -> list[str]:
        validator = self._validator(schema_name)
        errors = sorted(validator.iter_errors(value), key=lambda e: [str(part) for part in e.path])
        return [_describe(error) for error in errors]

    def _validator(self, schema_name: str) -> Draft202012Validator:
        if schema_name not in self._validators:
            schema = _load_schema(self.schemas_dir / schema_name)
            self._validators[schema_name] = Draft202012Validator(
                schema, format_checker=Draft202012Validator.FORMAT_CHECKER
            )
        return self._validators[schema_name]


def validate_artifacts(artifacts: Artifacts, oracle: SchemaOracle) -> None:
    files = artifacts.by_file()
    for file_name in (INDEX_FILE, CATEGORIES_FILE, SEARCH_INDEX_FILE):
        ensure_valid(oracle, SCHEMA_FILES[file_name], files[file_name], file_name)
    validate_index_records(artifacts.index, oracle)


def validate_index_records(index: dict[str, Any], oracle: SchemaOracle) -> None:
    for position, brand in enumerate(index.get("brands", [])):
        ensure_valid(oracle, SCHEMA_FILES[BRAND], brand, f"brand[{position}]")
    for position, device_type in enumerate(index.get("types", [])):
        ensure_valid(oracle, SCHEMA_FILES[TYPE], device_type, f"type[{position}]")

    brand_ids = {brand.get("id") for brand in index.get("brands", [])}
    type_ids = {device_type.get("id") for device_type in index.get("types", [])}
    for position, model in enumerate(index.get("models", [])):
        label = f"model[{position}]"
        ensure_valid(oracle, SCHEMA_FILES[MODEL], model, label)
        if model.get("brand") not in brand_ids:
            raise ExternalValidationError(label, [f"brand not found: {model.get('brand')}"])
        if model.get("type") not in type_ids:
            raise ExternalValidationError(label, [f"type not found: {model.get('type')}"])


def validate_dist(dist_dir: Path | str, oracle: SchemaOracle) -> None:
    """Validate artifacts already written to ``dist_dir``."""
    target = Path(dist_dir)
    artifacts = Artifacts(
        index=read_json(target / INDEX_FILE),
        categories=read_json(target / CATEGORIES_FILE),
        search_index=read_json(target / SEARCH_INDEX_FILE),
    )
    validate_artifacts(artifacts, oracle)
    logger.info(f"Validated artifacts in {target}")


def ensure_valid(oracle: SchemaOracle, schema_name: str, value: Any, label: str) -> None:
    errors = oracle.check(schema_name, value)
    if errors:
        raise ExternalValidationError(label, errors)


def _describe(error) -> str:
    location = "/".join(str(part) for part in error.absolute_path)
    return f"{location or '<root>'}: {error.message}"


def _load_schema(path: Path) -> dict[str, Any]:
    schema = read_json(path)
    try:
        Draft202012Validator.check_schema(schema)
    except InvalidSchemaError as e:
        raise ExternalValidationError(path.name, [e.message]) from e
    return schema
