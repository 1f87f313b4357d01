"""
Resolution of the ``lastUpdated`` timestamp.

Order: explicit epoch override, then the timestamp supplied with the data,
then the last commit touching the source tree, then the Unix epoch.
"""

from __future__ import annotations

import logging
import subprocess
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Optional

from bas_atlas.constants import FALLBACK_TIMESTAMP
from bas_atlas.services.text_utils import parse_timestamp

logger = logging.getLogger(__name__)

HistoryLookup = Callable[[], Optional[datetime]]


class GitHistory:
    """Last commit time of ``path``, read from ``git log``."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def __call__(self) -> Optional[datetime]:
        try:
            result = subprocess.run(
                ["git", "log", "-1", "--format=%ct", "--", str(self.path)],
                capture_output=True,
                text=True,
                cwd=self.path if self.path.is_dir() else self.path.parent,
            )
        except OSError as e:
            logger.debug(f"git unavailable for {self.path}: {e}")
            return None
        if result.returncode != 0:
            logger.debug(f"git log failed for {self.path}: {result.stderr.strip()}")
            return None
        return _from_epoch(result.stdout.strip())


class ClockResolver:
    def __init__(self, override: Optional[str] = None, history: Optional[HistoryLookup] = None):
        self.override = override
        self.history = history

    def resolve(self, preferred: Any = None) -> datetime:
        if self.override is not None and self.override != "":
            pinned = _from_epoch(self.override)
            if pinned is not None:
                return pinned
            logger.warning(f"Ignoring invalid SOURCE_DATE_EPOCH value {self.override!r}")

        supplied = parse_timestamp(preferred)
        if supplied is not None:
            return supplied
        if preferred:
            logger.warning(f"Ignoring unparseable lastUpdated value {preferred!r}")

        if self.history is not None:
            committed = self.history()
            if committed is not None:
                return committed

        return FALLBACK_TIMESTAMP


def _from_epoch(value: str) -> Optional[datetime]:
    text = str(value).strip()
    if not text.isdigit():
        return None
    try:
        return datetime.fromtimestamp(int(text), tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None
