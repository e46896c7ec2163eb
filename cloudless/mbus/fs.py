"""File-system message bus: each message is a JSON file in a directory."""

from __future__ import annotations

import json
import os
import threading
import time
import uuid
from collections import Counter
from contextlib import suppress
from pathlib import Path

from .acknowledgement import Acknowledgement, AcknowledgementError
from .message import Confirmation, Message, Messenger
from .notifier import Notifier, NotifierOption, new_notifier_options
from .registry import Service, register, register_notifier
from .resource import RESOURCE_TYPE_QUEUE, Resource

_MESSAGE_SUFFIX = ".msg"
_MAX_NACKS = 3
_IDLE_DELAY = 0.3
_POLL_DELAY = 0.1


def _local_path(url: str) -> Path:
    if url.startswith("file://"):
        url = url[len("file://"):]
    return Path(url).expanduser()


class FileService(Service):
    """Writes queued messages as files under the resource URL."""

    def push(self, dest: Resource, message: Message) -> Confirmation:
        if dest.type != RESOURCE_TYPE_QUEUE:
            raise ValueError(f"unsupported resource type: {dest.type}")
        if not message.id:
            message.id = str(uuid.uuid4())
        encoded = json.dumps(message.to_dict()).encode()
        target = _local_path(dest.url) / (message.id + _MESSAGE_SUFFIX)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(encoded)
        with suppress(OSError):
            os.chmod(target, 0o644)
        return Confirmation(message_id=message.id)


class _Pending:
    """Thread-safe set of files currently being handled."""

    def __init__(self) -> None:
        self._paths: set[str] = set()
        self._lock = threading.Lock()

    def add(self, path: str) -> None:
        with self._lock:
            self._paths.add(path)

    def remove(self, path: str) -> None:
        with self._lock:
            self._paths.discard(path)

    def __contains__(self, path: object) -> bool:
        with self._lock:
            return path in self._paths


class FileNotifier(Notifier):
    """Polls a directory and delivers each message file to a messenger.

    Acknowledged files are deleted; a file rejected more than three times
    is moved into a ``nack`` subdirectory.
    """

    def __init__(self) -> None:
        self._stopped = threading.Event()
        self._nacks: Counter[str] = Counter()
        self._nack_lock = threading.Lock()

    def is_closed(self) -> bool:
        return self._stopped.is_set()

    def stop(self) -> None:
        self._stopped.set()

    def observe(self, messenger: Messenger, *options: NotifierOption) -> None:
        """Deliver messages until the notifier is stopped."""
        opts = new_notifier_options(*options)
        url = opts.resource.url if opts.resource is not None else ""
        if not url:
            raise ValueError("URL was empty")
        directory = _local_path(url)
        pending = _Pending()
        limiter = (
            threading.BoundedSemaphore(opts.max_pending) if opts.max_pending > 0 else None
        )
        if self.is_closed():
            raise RuntimeError("notifier is closed")

        while not self.is_closed():
            try:
                entries = list(os.scandir(directory))
            except OSError:
                entries = []
            if not entries:
                time.sleep(_IDLE_DELAY)
                continue
            files = [Path(entry.path) for entry in entries if not entry.is_dir()]
            if not files:
                time.sleep(_POLL_DELAY)
                continue
            for path in files:
                key = str(path)
                if key in pending:
                    continue
                pending.add(key)
                if limiter is not None:
                    limiter.acquire()
                threading.Thread(
                    target=self._process,
                    args=(path, messenger, limiter, pending),
                    daemon=True,
                ).start()
            time.sleep(_POLL_DELAY)

    def notify(self, messenger: Messenger, *options: NotifierOption) -> None:
        self.observe(messenger, *options)

    def _process(
        self,
        path: Path,
        messenger: Messenger,
        limiter: threading.BoundedSemaphore | None,
        pending: _Pending,
    ) -> None:
        ack = Acknowledgement()
        try:
            try:
                decoded = json.loads(path.read_bytes())
                if not isinstance(decoded, dict):
                    raise ValueError("message file does not hold an object")
                message = Message.from_dict(decoded)
            except (OSError, ValueError) as err:
                ack.error = err
                ack.nack()
                return
            try:
                messenger.on_message(message, ack)
                if not (ack.is_ack() or ack.is_nack()):
                    ack.ack()
            except Exception:
                with suppress(AcknowledgementError):
                    ack.nack()
        finally:
            if limiter is not None:
                limiter.release()
            if ack.is_nack():
                self._handle_nack(path, pending)
            elif ack.is_ack():
                self._handle_ack(path, pending)

    def _handle_ack(self, path: Path, pending: _Pending) -> None:
        with suppress(OSError):
            path.unlink()
        pending.remove(str(path))

    def _handle_nack(self, path: Path, pending: _Pending) -> None:
        key = str(path)
        with self._nack_lock:
            self._nacks[key] += 1
            count = self._nacks[key]
        if count > _MAX_NACKS:
            target = path.parent / "nack" / path.name
            with suppress(OSError):
                target.parent.mkdir(parents=True, exist_ok=True)
                os.replace(path, target)
            pending.remove(key)


register("fs", FileService())
register_notifier("fs", FileNotifier())