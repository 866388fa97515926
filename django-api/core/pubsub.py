"""Snapshot publish/subscribe channels.

A channel is bound to one topic (``"events"``, ``"news"``...) and a snapshot
provider. Subscribers always receive the whole current collection: once,
synchronously, when they subscribe, and again after every publish.
"""

import logging
import threading
from collections.abc import Callable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Subscriber = Callable[[list[T]], None]
Unsubscribe = Callable[[], None]


class SnapshotChannel(Generic[T]):
    """Fan-out of full collection snapshots to registered callbacks."""

    def __init__(self, topic: str, snapshot: Callable[[], list[T]]) -> None:
        self.topic = topic
        self._snapshot = snapshot
        self._subscribers: list[Subscriber] = []
        self._lock = threading.RLock()

    def subscribe(self, callback: Subscriber) -> Unsubscribe:
        """Replay the current snapshot to ``callback`` and register it.

        Returns a closure that removes this exact callback. Calling it more
        than once is harmless. A publish from another thread waits until the
        replay has been delivered, so no snapshot falls between the two.
        """
        with self._lock:
            callback(self._snapshot())
            self._subscribers.append(callback)
            logger.debug("subscribed to %s (%d listeners)", self.topic, len(self._subscribers))

        def unsubscribe() -> None:
            with self._lock:
                for index, registered in enumerate(self._subscribers):
                    if registered is callback:
                        del self._subscribers[index]
                        break

        return unsubscribe

    def publish(self) -> None:
        """Send the current snapshot to every subscriber in registration order."""
        with self._lock:
            subscribers = list(self._subscribers)
            if not subscribers:
                return
            snapshot = self._snapshot()
        for callback in subscribers:
            callback(list(snapshot))

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)
