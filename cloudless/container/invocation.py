"""Function invocation helpers: URI parsing and error payloads."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

_FUNCTION_FRAGMENT = "/functions/"


def uri_info(uri: str) -> tuple[str, str]:
    """Return ``(function name, method)`` from a ``.../functions/<name>/<method>`` URI.

    Returns ``("", "")`` when the URI has no functions fragment.
    """
    index = uri.find(_FUNCTION_FRAGMENT)
    if index == -1:
        return "", ""
    fragment = uri[index + len(_FUNCTION_FRAGMENT):]
    name, sep, method = fragment.partition("/")
    if not sep:
        raise ValueError(f"missing method in URI: {uri}")
    return name, method


@dataclass
class FunctionError:
    """An error reported by an invoked function."""

    message: str = ""
    type: str = ""
    stack_trace: list[str | None] = field(default_factory=list)
    cause: FunctionError | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready form, omitting empty optional fields."""
        out: dict[str, Any] = {}
        if self.type:
            out["errorType"] = self.type
        out["errorMessage"] = self.message
        if self.stack_trace:
            out["stackTrace"] = list(self.stack_trace)
        if self.cause is not None:
            out["cause"] = self.cause.to_dict()
        return out

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FunctionError:
        """Build an error from its JSON-ready form."""
        cause = data.get("cause")
        return cls(
            message=data.get("errorMessage") or "",
            type=data.get("errorType") or "",
            stack_trace=list(data.get("stackTrace") or []),
            cause=cls.from_dict(cause) if cause else None,
        )