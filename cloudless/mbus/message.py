"""Messages, confirmations and the listener interface."""

from __future__ import annotations

import abc
import base64
import json
from dataclasses import dataclass, field
from typing import Any

from .acknowledgement import Acknowledgement
from .resource import Credentials, Resource

_RESOURCE_FIELDS = (
    ("ID", "id"),
    ("Name", "name"),
    ("Region", "region"),
    ("Vendor", "vendor"),
    ("URL", "url"),
    ("Type", "type"),
)


def _json_default(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    raise TypeError(f"object of type {type(value).__name__} is not JSON serializable")


def _resource_to_dict(resource: Resource) -> dict[str, Any]:
    out = {key: getattr(resource, attr) for key, attr in _RESOURCE_FIELDS if getattr(resource, attr)}
    if resource.credentials is not None:
        out["Credentials"] = {"URL": resource.credentials.url, "Key": resource.credentials.key}
    return out


def _resource_from_dict(data: dict[str, Any]) -> Resource:
    resource = Resource(**{attr: data.get(key, "") for key, attr in _RESOURCE_FIELDS})
    creds = data.get("Credentials")
    if creds:
        resource.credentials = Credentials(url=creds.get("URL", ""), key=creds.get("Key", ""))
    return resource


@dataclass
class Message:
    """A message published to or received from a bus."""

    id: str = ""
    resource: Resource | None = None
    trace_id: str = ""
    attributes: dict[str, Any] = field(default_factory=dict)
    subject: str = ""
    data: Any = None

    def payload(self) -> bytes | None:
        """Return the message body as bytes, or None when there is no data."""
        data = self.data
        if data is None:
            return None
        if isinstance(data, bool):
            return json.dumps(data).encode()
        if isinstance(data, int):
            return str(data).encode()
        if isinstance(data, float):
            return f"{data:.32f}".encode()
        if isinstance(data, str):
            return data.encode()
        if isinstance(data, (bytes, bytearray)):
            return bytes(data)
        return json.dumps(data, separators=(",", ":"), default=_json_default).encode()

    def add_attribute(self, name: str, value: Any) -> None:
        self.attributes[name] = value

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready form of the message."""
        data = self.data
        if isinstance(data, (bytes, bytearray)):
            data = _json_default(data)
        return {
            "ID": self.id,
            "Resource": _resource_to_dict(self.resource) if self.resource else None,
            "TraceID": self.trace_id,
            "Attributes": dict(self.attributes) or None,
            "Subject": self.subject,
            "Data": data,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Message:
        """Build a message from its JSON-ready form."""
        resource = data.get("Resource")
        return cls(
            id=data.get("ID") or "",
            resource=_resource_from_dict(resource) if resource else None,
            trace_id=data.get("TraceID") or "",
            attributes=dict(data.get("Attributes") or {}),
            subject=data.get("Subject") or "",
            data=data.get("Data"),
        )


@dataclass
class Confirmation:
    """Confirmation that a message was accepted by the bus."""

    message_id: str = ""

    def __str__(self) -> str:
        return self.message_id


class Messenger(abc.ABC):
    """Receives messages delivered by a notifier."""

    @abc.abstractmethod
    def on_message(self, message: Message, ack: Acknowledgement) -> None:
        """Handle a message; raise to reject it."""