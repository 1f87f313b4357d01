"""Shared fixtures for catalog build tests."""

import json
import sys
from pathlib import Path

import pytest


def ensure_root_on_path() -> None:
    root = Path(__file__).resolve().parent.parent
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


ensure_root_on_path()

from bas_atlas.models import Brand, DeviceModel, DeviceType, RawDataset
from bas_atlas.services.clock import ClockResolver
from bas_atlas.services.normalizer import normalize

PINNED_EPOCH = "1700000000"
PINNED_TIMESTAMP = "2023-11-14T22:13:20.000Z"


def write_json(path: Path, data) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def schemas_dir() -> Path:
    return Path(__file__).resolve().parent.parent / "schemas"


@pytest.fixture
def pinned_clock() -> ClockResolver:
    return ClockResolver(override=PINNED_EPOCH)


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    root = tmp_path / "data"
    write_json(root / "brands" / "acme.json", {"brand": {"id": "acme", "name": "Acme"}})
    write_json(root / "types" / "thermostat.json", {"type": {"id": "thermostat", "name": "Thermostat"}})
    write_json(
        root / "models" / "acme" / "acme-t1.json",
        {
            "model": {
                "id": "acme-t1",
                "name": "Acme T1",
                "brand": "acme",
                "type": "thermostat",
                "model_numbers": ["T1-100"],
            }
        },
    )
    return root


@pytest.fixture
def make_dataset():
    def _make(brands=(), types=(), models=(), version=None, last_updated=None, clock=None):
        raw = RawDataset(
            brands=[Brand.model_validate(b) for b in brands],
            types=[DeviceType.model_validate(t) for t in types],
            models=[DeviceModel.model_validate(m) for m in models],
            version=version,
            last_updated=last_updated,
        )
        return normalize(raw, clock or ClockResolver(override=PINNED_EPOCH))

    return _make
