"""Acknowledgement of a delivered message."""

from __future__ import annotations

from dataclasses import dataclass, field


class AcknowledgementError(Exception):
    """Raised when a message is acknowledged more than once."""


@dataclass
class Acknowledgement:
    """Records whether a message was acknowledged or rejected, exactly once."""

    error: Exception | None = None
    _state: bool | None = field(default=None, init=False, repr=False)

    def _settle(self, state: bool) -> None:
        if self._state is not None:
            raise AcknowledgementError("already acknowledged")
        self._state = state

    def ack(self) -> None:
        """Mark the message as successfully processed."""
        self._settle(True)

    def nack(self) -> None:
        """Mark the message as rejected."""
        self._settle(False)

    def is_ack(self) -> bool:
        return self._state is True

    def is_nack(self) -> bool:
        return self._state is False