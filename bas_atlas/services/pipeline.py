"""Catalog build: load, normalize, validate, derive, write."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from bas_atlas import __version__
from bas_atlas.config import Settings
from bas_atlas.models import Artifacts, Dataset
from bas_atlas.services.artifact_writer import write_artifacts
from bas_atlas.services.categories import build_categories
from bas_atlas.services.clock import ClockResolver, GitHistory
from bas_atlas.services.integrity import validate_dataset
from bas_atlas.services.normalizer import normalize
from bas_atlas.services.schema_validation import JsonSchemaOracle, SchemaOracle, validate_artifacts
from bas_atlas.services.search_index import build_search_index
from bas_atlas.services.source_loader import load_snapshot, load_sources

logger = logging.getLogger(__name__)


@dataclass
class BuildOptions:
    data_dir: Path
    dist_dir: Path
    canonical_path: str = "canonical/index.json"
    snapshot: Optional[Path] = None
    validate_only: bool = False
    clean: bool = False
    schemas_dir: Optional[Path] = None
    build_version: str = __version__
    source_date_epoch: Optional[str] = None

    @classmethod
    def from_settings(cls, settings: Settings, **overrides) -> "BuildOptions":
        values = {
            "data_dir": Path(settings.data_dir),
            "dist_dir": Path(settings.dist_dir),
            "canonical_path": settings.canonical_path,
            "schemas_dir": Path(settings.schemas_dir),
            "build_version": settings.build_version,
            "source_date_epoch": settings.source_date_epoch,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


@dataclass
class BuildResult:
    dataset: Dataset
    artifacts: Artifacts
    written: list[Path] = field(default_factory=list)


def build_catalog(
    options: BuildOptions,
    clock: Optional[ClockResolver] = None,
    oracle: Optional[SchemaOracle] = None,
) -> BuildResult:
    source = options.snapshot or options.data_dir
    if options.snapshot:
        raw = load_snapshot(options.snapshot)
    else:
        raw = load_sources(options.data_dir, options.canonical_path)

    clock = clock or ClockResolver(override=options.source_date_epoch, history=GitHistory(source))
    dataset = normalize(raw, clock, options.build_version)
    validate_dataset(dataset)
    artifacts = derive_artifacts(dataset)

    oracle = oracle or schema_oracle(options.schemas_dir)
    if oracle is not None:
        validate_artifacts(artifacts, oracle)

    logger.info(
        f"Found {dataset.total_brands} brands, {dataset.total_types} types, {dataset.total_models} models"
    )
    if options.validate_only:
        logger.info("Validation only, no artifacts written")
        return BuildResult(dataset=dataset, artifacts=artifacts)

    written = write_artifacts(options.dist_dir, artifacts, clean=options.clean)
    return BuildResult(dataset=dataset, artifacts=artifacts, written=written)


def derive_artifacts(dataset: Dataset) -> Artifacts:
    return Artifacts(
        index=dataset.to_index(),
        categories=build_categories(dataset).to_dict(dataset.version),
        search_index=build_search_index(dataset),
    )


def schema_oracle(schemas_dir: Optional[Path]) -> Optional[JsonSchemaOracle]:
    if schemas_dir is None or not Path(schemas_dir).is_dir():
        logger.info("No schemas directory found, skipping schema validation")
        return None
    return JsonSchemaOracle(schemas_dir)
