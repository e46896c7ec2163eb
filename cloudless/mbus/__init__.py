"""Message bus: resources, messages, services, notifiers and their registry."""

__all__ = [
    "acknowledgement",
    "fs",
    "mem",
    "message",
    "notifier",
    "registry",
    "resource",
]