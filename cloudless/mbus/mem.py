"""In-memory message bus backed by per-resource queues."""

from __future__ import annotations

import queue
import threading
import uuid

from .message import Confirmation, Message
from .registry import Service, register
from .resource import RESOURCE_TYPE_QUEUE, Resource

_QUEUE_CAPACITY = 10000


class Queues:
    """Named in-memory queues, created on first use."""

    def __init__(self) -> None:
        self._queues: dict[str, queue.Queue[Message]] = {}
        self._lock = threading.Lock()

    def queue(self, resource: Resource) -> queue.Queue[Message]:
        """Return the queue for the resource's name, creating it if needed."""
        with self._lock:
            found = self._queues.get(resource.name)
            if found is None:
                found = queue.Queue(maxsize=_QUEUE_CAPACITY)
                self._queues[resource.name] = found
            return found


_queues = Queues()


def singleton() -> Queues:
    """Return the process-wide set of in-memory queues."""
    return _queues


class MemoryService(Service):
    """Pushes messages onto in-memory queues."""

    def push(self, dest: Resource, message: Message) -> Confirmation:
        if dest.type != RESOURCE_TYPE_QUEUE:
            raise ValueError(f"unsupported resource type: {dest.type}")
        try:
            singleton().queue(dest).put_nowait(message)
        except queue.Full:
            raise RuntimeError(f"failed to send message: {message}") from None
        message.id = str(uuid.uuid4())
        return Confirmation(message_id=message.id)


register("mem", MemoryService())