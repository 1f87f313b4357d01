from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

from bas_atlas.constants import FALLBACK_TIMESTAMP
from bas_atlas.services.clock import ClockResolver, GitHistory

COMMIT_TIME = datetime(2022, 5, 6, tzinfo=timezone.utc)


def test_override_wins_over_everything():
    clock = ClockResolver(override="1700000000", history=lambda: COMMIT_TIME)

    resolved = clock.resolve("2024-01-01T00:00:00Z")

    assert resolved == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)


def test_override_of_zero_is_valid():
    assert ClockResolver(override="0").resolve("2024-01-01T00:00:00Z") == FALLBACK_TIMESTAMP


def test_invalid_override_falls_through_to_supplied_value(caplog):
    clock = ClockResolver(override="-5", history=lambda: COMMIT_TIME)

    resolved = clock.resolve("2024-01-01T00:00:00Z")

    assert resolved == datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert "SOURCE_DATE_EPOCH" in caplog.text


def test_history_is_used_when_no_timestamp_supplied():
    assert ClockResolver(history=lambda: COMMIT_TIME).resolve(None) == COMMIT_TIME
    assert ClockResolver(history=lambda: COMMIT_TIME).resolve("not a date") == COMMIT_TIME


def test_fallback_is_unix_epoch():
    assert ClockResolver(history=lambda: None).resolve(None) == FALLBACK_TIMESTAMP
    assert ClockResolver().resolve(None) == FALLBACK_TIMESTAMP


def test_git_history_reads_last_commit_time(tmp_path):
    mock_result = MagicMock()
    mock_result.returncode = 0
    mock_result.stdout = "1651795200\n"

    with patch("subprocess.run", return_value=mock_result) as mock_run:
        resolved = GitHistory(tmp_path)()

    call_args = mock_run.call_args[0][0]
    assert call_args[:4] == ["git", "log", "-1", "--format=%ct"]
    assert call_args[-1] == str(tmp_path)
    assert resolved == datetime(2022, 5, 6, tzinfo=timezone.utc)


def test_git_history_returns_none_on_failure(tmp_path):
    mock_result = MagicMock()
    mock_result.returncode = 128
    mock_result.stderr = "fatal: not a git repository"

    with patch("subprocess.run", return_value=mock_result):
        assert GitHistory(tmp_path)() is None

    with patch("subprocess.run", side_effect=FileNotFoundError("git")):
        assert GitHistory(tmp_path)() is None


def test_git_history_returns_none_for_untracked_path(tmp_path):
    mock_result = MagicMock()
    mock_result.returncode = 0
    mock_result.stdout = ""

    with patch("subprocess.run", return_value=mock_result):
        assert GitHistory(tmp_path)() is None
