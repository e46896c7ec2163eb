"""Message bus resources: topics, subscriptions and queues."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any

RESOURCE_TYPE_TOPIC = "topic"
RESOURCE_TYPE_SUBSCRIPTION = "subscription"
RESOURCE_TYPE_QUEUE = "queue"

RESOURCE_TYPES = (RESOURCE_TYPE_TOPIC, RESOURCE_TYPE_QUEUE, RESOURCE_TYPE_SUBSCRIPTION)


@dataclass
class Credentials:
    """Location of a secret holding the credentials for a resource."""

    url: str = ""
    key: str = ""


@dataclass
class Resource:
    """A message bus destination or source."""

    id: str = ""
    name: str = ""
    region: str = ""
    vendor: str = ""
    url: str = ""
    credentials: Credentials | None = None
    type: str = ""
    client: Any = field(default=None, compare=False, repr=False)
    lock: threading.Lock = field(
        default_factory=threading.Lock, compare=False, repr=False
    )

    def init(self) -> None:
        """Derive the name from the URL when no name is set."""
        if self.url and not self.name:
            self.name = self.url
            index = self.url.rfind("/")
            if index == -1:
                index = self.url.rfind(":")
            if index != -1:
                self.name = self.url[index + 1:]


def decode_resource(encoded: str) -> Resource:
    """Decode ``id|name|vendor|type|url[|region|secretURL|secretKey]``.

    Fields may be separated with ``|`` or, when no ``|`` is present, ``;``.
    """
    separator = "|" if "|" in encoded else ";"
    parts = encoded.split(separator)
    if len(parts) < 5:
        raise ValueError(
            f"failed to decode mbus resource: invalid format: {encoded}, "
            "expected:id|name|vendor|resourceType|uri[|region|secretURL|secretKey]"
        )
    resource_id, name, vendor, resource_type, url, *rest = parts
    if resource_type not in RESOURCE_TYPES:
        raise ValueError(
            f"invalid resource: type: {resource_type}, expected:{list(RESOURCE_TYPES)}"
        )
    resource = Resource(
        id=resource_id, name=name, vendor=vendor, type=resource_type, url=url
    )
    if rest:
        resource.region = rest[0]
    if len(rest) > 1:
        resource.credentials = Credentials(url=rest[1])
        if len(rest) > 2:
            resource.credentials.key = rest[2]
    return resource