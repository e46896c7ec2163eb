"""Label and tag matching for GCE instance discovery."""

from __future__ import annotations

from typing import Iterable, Mapping

OK_STATUS = "RUNNING"
API = "GCP"


def match_tags(wanted: Iterable[str], actual: Iterable[str]) -> bool:
    """Return whether any wanted tag is present (OR logic)."""
    present = set(actual)
    return any(tag in present for tag in wanted)


def match_labels(wanted: Mapping[str, str], actual: Mapping[str, str]) -> bool:
    """Return whether every wanted label has its value (AND logic); missing labels read as empty."""
    return all(actual.get(key, "") == value for key, value in wanted.items())