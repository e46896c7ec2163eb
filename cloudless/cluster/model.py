"""Data model for cluster discovery."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

# Start time of an instance whose launch time is unknown; old enough to pass any age check.
UNKNOWN_START_TIME = datetime.min.replace(tzinfo=timezone.utc)


@dataclass
class Criteria:
    """What a discovery backend should match."""

    region: str = ""
    zone: str = ""
    availability_zone: str = ""
    tags: list[str] = field(default_factory=list)
    labels: dict[str, str] = field(default_factory=dict)
    project: str = ""
    url: str = ""
    service: str = ""


@dataclass
class HealthCheck:
    """A check that discovered instances must pass to stay in the cluster.

    ``url`` may contain ``{IP}``, replaced with the instance's private IP.
    """

    url: str = ""
    timeout_ms: int = 0
    expected_status: int = 0
    max_retries: int = 0
    min_age: timedelta = timedelta(0)
    min_age_sec: int = 0

    def effective_min_age(self) -> timedelta:
        """Return the minimum age, with ``min_age_sec`` taking precedence when set."""
        if self.min_age_sec > 0:
            return timedelta(seconds=self.min_age_sec)
        return self.min_age


@dataclass
class Discovery:
    """A request to discover the instances of a named cluster."""

    api: str = ""
    cluster: str = ""
    criteria: Criteria = field(default_factory=Criteria)
    health_checks: list[HealthCheck] = field(default_factory=list)


@dataclass
class Instance:
    """A discovered compute instance; ``start_time`` is timezone-aware."""

    name: str = ""
    private_ip: str = ""
    start_time: datetime = UNKNOWN_START_TIME


@dataclass
class Cluster:
    """The outcome of a discovery: the request and the healthy instances."""

    discovery: Discovery = field(default_factory=Discovery)
    instances: list[Instance] = field(default_factory=list)