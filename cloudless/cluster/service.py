"""Cluster discovery with age and HTTP health filtering."""

from __future__ import annotations

import copy
import http.client
import logging
import urllib.error
import urllib.request
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timedelta, timezone
from typing import Callable

from .model import Cluster, Criteria, Discovery, HealthCheck, Instance

IP_VAR = "{IP}"

Match = Callable[[Criteria], list[Instance]]

_log = logging.getLogger(__name__)
_registry: dict[str, Match] = {}


def register(api: str, match: Match) -> None:
    """Register the matcher used for discovery requests naming ``api``."""
    _registry[api] = match


def check_ip(ip: str, health_check: HealthCheck) -> bool:
    """Return whether the health check URL for ``ip`` answers with the expected status."""
    url = health_check.url.replace(IP_VAR, ip, 1)
    timeout = health_check.timeout_ms / 1000 if health_check.timeout_ms > 0 else None
    expected = health_check.expected_status
    status: int | None = None
    error: Exception | None = None
    for _ in range(health_check.max_retries + 1):
        try:
            with urllib.request.urlopen(url, timeout=timeout) as response:
                status, error = response.status, None
        except urllib.error.HTTPError as err:
            status, error = err.code, None
            err.close()
        except (OSError, ValueError, http.client.HTTPException) as err:
            status, error = None, err
        if error is None and status == expected:
            break
    healthy = error is None and status == expected
    if not healthy:
        _log.warning("%s still bad: %s", ip, error)
    return healthy


class DiscoveryService:
    """Discovers cluster instances through registered matchers."""

    def discover(self, discovery: Discovery) -> Cluster:
        match = _registry.get(discovery.api.upper())
        if match is None:
            raise ValueError(f" invalid API: {discovery.api}")
        instances = match(discovery.criteria)
        return Cluster(
            discovery=copy.copy(discovery),
            instances=self._filter_by_health(instances, discovery.health_checks),
        )

    def _filter_by_health(
        self, instances: list[Instance], checks: list[HealthCheck]
    ) -> list[Instance]:
        for check in checks:
            min_age = check.effective_min_age()
            if min_age > timedelta(0):
                instances = self._filter_by_age(instances, min_age)
            if check.url:
                instances = self._filter_by_http(instances, check)
        return instances

    @staticmethod
    def _filter_by_age(instances: list[Instance], age: timedelta) -> list[Instance]:
        now = datetime.now(timezone.utc)
        return [inst for inst in instances if now - inst.start_time >= age]

    @staticmethod
    def _filter_by_http(instances: list[Instance], check: HealthCheck) -> list[Instance]:
        if not instances:
            return []
        with ThreadPoolExecutor(max_workers=len(instances)) as pool:
            states = list(pool.map(lambda inst: check_ip(inst.private_ip, check), instances))
        return [inst for inst, healthy in zip(instances, states) if healthy]