"""Request and response types for load balancer queries."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class NodeCountRequest:
    region: str = ""
    load_balancer_names: list[str] = field(default_factory=list)


@dataclass
class NodeCountResponse:
    region: str = ""
    count: int = 0


class NodeCountResponses(list):
    """A list of node count responses."""

    def node_count(self) -> int:
        """Return the total node count over all responses."""
        return sum(item.count for item in self)


@dataclass
class IPListRequest:
    region: str = ""
    load_balancer_names: list[str] = field(default_factory=list)


@dataclass
class IPListResponse:
    region: str = ""
    load_balancer_name: str = ""
    ip_list: list[str] = field(default_factory=list)