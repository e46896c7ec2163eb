"""Notifier interface and its options."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import Callable

from .message import Messenger
from .resource import Resource


@dataclass
class NotifierOptions:
    """Options controlling how a notifier delivers messages."""

    max_pending: int = 0
    resource: Resource | None = None


NotifierOption = Callable[[NotifierOptions], None]


def new_notifier_options(*options: NotifierOption) -> NotifierOptions:
    """Build notifier options by applying each option in order."""
    result = NotifierOptions()
    for option in options:
        option(result)
    return result


def with_max_messages(value: int) -> NotifierOption:
    """Limit the number of messages processed at the same time."""

    def apply(options: NotifierOptions) -> None:
        options.max_pending = value

    return apply


def with_resource(value: Resource) -> NotifierOption:
    """Set the resource to observe."""

    def apply(options: NotifierOptions) -> None:
        options.resource = value

    return apply


class Notifier(abc.ABC):
    """Delivers incoming messages to a messenger."""

    @abc.abstractmethod
    def notify(self, messenger: Messenger, *options: NotifierOption) -> None:
        """Deliver messages to ``messenger`` until stopped."""