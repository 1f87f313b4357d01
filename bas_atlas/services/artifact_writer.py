from __future__ import annotations

import json
import logging
import os
import shutil
from pathlib import Path
from typing import Any

from bas_atlas.constants import ARTIFACT_FILES
from bas_atlas.exceptions import ArtifactWriteError
from bas_atlas.models import Artifacts

logger = logging.getLogger(__name__)


def render_json(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False) + "\n"


def prepare_output_dir(dist_dir: Path, clean: bool = False) -> None:
    try:
        if clean and dist_dir.exists():
            logger.info(f"Cleaning {dist_dir}")
            shutil.rmtree(dist_dir)
        dist_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ArtifactWriteError(dist_dir, str(e)) from e


def write_artifacts(dist_dir: Path | str, artifacts: Artifacts, clean: bool = False) -> list[Path]:
    """Write index, categories and search index into ``dist_dir``, in that order."""
    target = Path(dist_dir)
    prepare_output_dir(target, clean=clean)

    contents = artifacts.by_file()
    written = []
    for file_name in ARTIFACT_FILES:
        path = target / file_name
        write_text_atomic(path, render_json(contents[file_name]))
        logger.info(f"Generated {path}")
        written.append(path)
    return written


def write_text_atomic(path: Path, text: str) -> None:
    staging = path.with_name(f".{path.name}.tmp")
    try:
        staging.write_text(text, encoding="utf-8")
        os.replace(staging, path)
    except OSError as e:
        staging.unlink(missing_ok=True)
        raise ArtifactWriteError(path, str(e)) from e
