"""Matcher that always returns the local host."""

from __future__ import annotations

from .model import Criteria, Instance
from .service import register

OK_STATUS = "passing"
API = "LOCAL"


def match(criteria: Criteria) -> list[Instance]:
    """Return the single local instance, whatever the criteria."""
    return [Instance(name="localhost", private_ip="127.0.0.1")]


register(API, match)