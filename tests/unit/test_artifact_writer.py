import json

import pytest

from bas_atlas.exceptions import ArtifactWriteError
from bas_atlas.models import Artifacts
from bas_atlas.services.artifact_writer import render_json, write_artifacts


def _artifacts():
    return Artifacts(
        index={"version": "1.0.0", "brands": []},
        categories={"version": "1.0.0", "brands": [], "types": []},
        search_index={"version": "1.0.0", "entries": [{"id": "ä", "tokens": ["ä"]}]},
    )


def test_render_json_is_pretty_printed_with_single_trailing_newline():
    text = render_json({"a": [1]})

    assert text == '{\n  "a": [\n    1\n  ]\n}\n'


def test_write_artifacts_creates_nested_directory(tmp_path):
    dist = tmp_path / "out" / "dist"

    written = write_artifacts(dist, _artifacts())

    assert [p.name for p in written] == ["index.json", "categories.json", "search-index.json"]
    assert json.loads((dist / "search-index.json").read_text(encoding="utf-8"))["entries"][0]["id"] == "ä"
    assert sorted(p.name for p in dist.iterdir()) == ["categories.json", "index.json", "search-index.json"]


def test_written_files_end_with_one_newline(tmp_path):
    write_artifacts(tmp_path, _artifacts())

    content = (tmp_path / "index.json").read_text(encoding="utf-8")
    assert content.endswith("}\n") and not content.endswith("\n\n")


def test_clean_removes_stale_files(tmp_path):
    dist = tmp_path / "dist"
    dist.mkdir()
    (dist / "stale.json").write_text("{}", encoding="utf-8")

    write_artifacts(dist, _artifacts(), clean=True)

    assert not (dist / "stale.json").exists()
    assert (dist / "index.json").exists()


def test_without_clean_other_files_survive(tmp_path):
    (tmp_path / "keep.txt").write_text("x", encoding="utf-8")

    write_artifacts(tmp_path, _artifacts())

    assert (tmp_path / "keep.txt").exists()


def test_unwritable_target_raises_and_leaves_no_staging_file(tmp_path):
    (tmp_path / "index.json").mkdir()

    with pytest.raises(ArtifactWriteError) as excinfo:
        write_artifacts(tmp_path, _artifacts())

    assert excinfo.value.path == str(tmp_path / "index.json")
    assert not (tmp_path / ".index.json.tmp").exists()
    assert (tmp_path / "index.json").is_dir()
