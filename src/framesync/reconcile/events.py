"""
Regeneration events.

The generation pipeline owns a RegenerationEvents instance and emits:

- ``artifact_about_to_be_replaced`` with the Path of an artifact that is
  about to be deleted or overwritten
- ``artifact_regenerated`` with the newly generated root (or None)

Subscribing returns a Subscription handle; the subscriber disposes it to
stop receiving events. Subscribing the same handler twice registers it twice.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from types import TracebackType
from typing import Generic, TypeVar

from framesync.core.ir import RuntimeObject
from framesync.reconcile.session import RegenerationSession

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Subscription:
    """Owned handle for one or more event registrations."""

    def __init__(self, on_dispose: Callable[[], None]) -> None:
        self._on_dispose: Callable[[], None] | None = on_dispose

    @property
    def active(self) -> bool:
        return self._on_dispose is not None

    def dispose(self) -> None:
        """Remove the registration. Further calls do nothing."""
        if self._on_dispose is None:
            return
        on_dispose, self._on_dispose = self._on_dispose, None
        on_dispose()

    @classmethod
    def combine(cls, *subscriptions: Subscription) -> Subscription:
        """One handle disposing all of ``subscriptions``."""

        def dispose_all() -> None:
            for subscription in subscriptions:
                subscription.dispose()

        return cls(dispose_all)

    def __enter__(self) -> Subscription:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.dispose()


class EventChannel(Generic[T]):
    """Synchronous event channel. Handlers run in subscription order."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._handlers: list[tuple[object, Callable[[T], object]]] = []

    def __len__(self) -> int:
        return len(self._handlers)

    def subscribe(self, handler: Callable[[T], object]) -> Subscription:
        token = object()
        self._handlers.append((token, handler))
        logger.debug("Subscribed %r to %s", handler, self.name)

        def remove() -> None:
            self._handlers = [(t, h) for t, h in self._handlers if t is not token]
            logger.debug("Unsubscribed %r from %s", handler, self.name)

        return Subscription(remove)

    def emit(self, payload: T) -> None:
        """Deliver ``payload`` to every handler. Handler errors propagate."""
        for _, handler in list(self._handlers):
            handler(payload)


@dataclass
class RegenerationEvents:
    """The two events the generation pipeline emits per artifact."""

    artifact_about_to_be_replaced: EventChannel[Path] = field(
        default_factory=lambda: EventChannel("artifact-about-to-be-replaced")
    )
    artifact_regenerated: EventChannel[RuntimeObject | None] = field(
        default_factory=lambda: EventChannel("artifact-regenerated")
    )


def connect_tracker(events: RegenerationEvents, session: RegenerationSession) -> Subscription:
    """
    Wire ``session`` to the pipeline's events.

    Returns:
        A handle that disconnects both handlers when disposed
    """
    return Subscription.combine(
        events.artifact_about_to_be_replaced.subscribe(session.before_regeneration),
        events.artifact_regenerated.subscribe(session.after_regeneration),
    )


__all__ = ["EventChannel", "RegenerationEvents", "Subscription", "connect_tracker"]
