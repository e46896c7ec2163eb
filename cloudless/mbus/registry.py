"""Registry of message bus services and notifiers by vendor."""

from __future__ import annotations

import abc
import threading

from .message import Confirmation, Message
from .notifier import Notifier
from .resource import Resource


class Service(abc.ABC):
    """Pushes messages to a bus resource."""

    @abc.abstractmethod
    def push(self, dest: Resource, message: Message) -> Confirmation:
        """Send ``message`` to ``dest`` and return its confirmation."""


class Registry:
    """Thread-safe mapping of vendor names to services and notifiers."""

    def __init__(self) -> None:
        self._services: dict[str, Service] = {}
        self._notifiers: dict[str, Notifier] = {}
        self._lock = threading.Lock()

    def register(self, vendor: str, service: Service) -> None:
        with self._lock:
            self._services[vendor] = service

    def lookup(self, vendor: str) -> Service | None:
        with self._lock:
            return self._services.get(vendor)

    def register_notifier(self, vendor: str, notifier: Notifier) -> None:
        with self._lock:
            self._notifiers[vendor] = notifier

    def lookup_notifier(self, vendor: str) -> Notifier | None:
        with self._lock:
            return self._notifiers.get(vendor)


_registry = Registry()


def register(vendor: str, service: Service) -> None:
    """Register a vendor service in the shared registry."""
    _registry.register(vendor, service)


def lookup(vendor: str) -> Service | None:
    """Return the vendor service from the shared registry, if any."""
    return _registry.lookup(vendor)


def register_notifier(vendor: str, notifier: Notifier) -> None:
    """Register a vendor notifier in the shared registry."""
    _registry.register_notifier(vendor, notifier)


def lookup_notifier(vendor: str) -> Notifier | None:
    """Return the vendor notifier from the shared registry, if any."""
    return _registry.lookup_notifier(vendor)