"""Filter construction and tag exclusion for EC2 instance discovery."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from .model import Criteria

OK_STATUS = "running"
API = "AWS"


@dataclass
class Filter:
    """An EC2 describe-instances filter."""

    name: str
    values: list[str] = field(default_factory=list)


def build_filters(criteria: Criteria) -> tuple[set[str], list[Filter]]:
    """Return the tag exclusions and the filters for ``criteria``.

    A tag ``!x`` excludes instances tagged ``x``; ``key:value`` filters on a
    tag key; a bare value filters on any tag value.
    """
    exclusions: set[str] = set()
    tags: dict[str, list[str]] = {}
    for tag in criteria.tags:
        if not tag:
            raise ValueError("empty tag in criteria")
        if tag.startswith("!"):
            exclusions.add(tag[1:])
            continue
        key, sep, value = tag.partition(":")
        if sep:
            tags.setdefault("tag:" + key, []).append(value)
        else:
            tags.setdefault("tag-value", []).append(key)

    filters = [Filter(name=name, values=values) for name, values in tags.items()]
    if criteria.availability_zone:
        filters.append(Filter(name="availability-zone", values=[criteria.availability_zone]))
    return exclusions, filters


def exclude(tags: Iterable[Mapping[str, Any]], exclusions: set[str]) -> bool:
    """Return whether any of the instance's tags (``Key``/``Value``) is excluded."""
    if not exclusions:
        return False
    for tag in tags:
        value = tag["Value"]
        if value in exclusions or f"{tag['Key']}:{value}" in exclusions:
            return True
    return False