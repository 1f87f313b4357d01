"""
Text helpers shared by the normalizer, aggregator and search indexer.

Covers search tokenization, a deterministic locale-style collation key used
for every ordering in the build, and ISO timestamp formatting.
"""

from __future__ import annotations

import unicodedata
from datetime import datetime, timezone
from typing import Any, Iterable, Optional


def tokenize(value: Any) -> list[str]:
    """Lower-case ``value`` and split it on whitespace runs, dropping empties."""
    if not value:
        return []
    return [token.strip() for token in str(value).lower().split() if token.strip()]


def tokenize_all(values: Optional[Iterable[Any]]) -> list[str]:
    tokens: list[str] = []
    for value in values or ():
        tokens.extend(tokenize(value))
    return tokens


def unique_sorted(tokens: Iterable[str]) -> tuple[str, ...]:
    return tuple(sorted(set(tokens)))


def collation_key(value: Optional[str]) -> tuple[str, str, str, str]:
    """Sort key approximating locale-aware comparison, independent of the host locale.

    Primary: accent- and case-insensitive text. Secondary: case-insensitive
    text with accents. Tertiary: lower case sorts before upper case. The raw
    value breaks any remaining tie.
    """
    text = unicodedata.normalize("NFC", value or "")
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()
    return (base, text.casefold(), text.swapcase(), value or "")


def format_timestamp(moment: datetime) -> str:
    """Render ``moment`` as UTC ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S") + f".{moment.microsecond // 1000:03d}Z"


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an ISO 8601 string; naive values are taken as UTC. Returns None when unparseable."""
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)
