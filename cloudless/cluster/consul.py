"""Matcher that finds healthy service nodes through a Consul catalog."""

from __future__ import annotations

import json
import urllib.parse
import urllib.request
from typing import Any, Iterable, Mapping

from .model import Criteria, Instance
from .service import register

OK_STATUS = "passing"
API = "CONSUL"

_DEFAULT_ADDRESS = "127.0.0.1:8500"
_NODE_MAINT = "_node_maintenance"
_SERVICE_MAINT_PREFIX = "_service_maintenance:"
_HEALTH_WARNING = "warning"
_HEALTH_CRITICAL = "critical"
_HEALTH_MAINT = "maintenance"


def aggregated_status(checks: Iterable[Mapping[str, Any]]) -> str:
    """Combine health checks into one status; an unknown status yields ``""``."""
    passing = warning = critical = maintenance = False
    for check in checks:
        check_id = check.get("CheckID", "")
        if check_id == _NODE_MAINT or check_id.startswith(_SERVICE_MAINT_PREFIX):
            maintenance = True
            continue
        status = check.get("Status", "")
        if status == OK_STATUS:
            passing = True
        elif status == _HEALTH_WARNING:
            warning = True
        elif status == _HEALTH_CRITICAL:
            critical = True
        else:
            return ""
    if maintenance:
        return _HEALTH_MAINT
    if critical:
        return _HEALTH_CRITICAL
    if warning:
        return _HEALTH_WARNING
    return OK_STATUS


def _base_url(address: str) -> str:
    address = address or _DEFAULT_ADDRESS
    if "://" in address:
        return address.rstrip("/")
    return "http://" + address


def match(criteria: Criteria) -> list[Instance]:
    """Return the catalog nodes of ``criteria.service`` whose checks pass."""
    url = (
        _base_url(criteria.url)
        + "/v1/catalog/service/"
        + urllib.parse.quote(criteria.service, safe="")
    )
    with urllib.request.urlopen(url) as response:
        nodes = json.load(response) or []
    return [
        Instance(name=node.get("Node", ""), private_ip=node.get("Address", ""))
        for node in nodes
        if aggregated_status(node.get("Checks") or []) == OK_STATUS
    ]


register(API, match)