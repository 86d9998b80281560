"""Process-wide event bus for callers that don't own an emitter."""
from __future__ import annotations

from collections.abc import Hashable
from typing import Any

from .core import Handler, MicroEvent

bus = MicroEvent()


def on(event: Hashable, callback: Handler) -> None:
    """Register *callback* to be called when *event* is emitted."""
    bus.on(event, callback)


def off(event: Hashable, callback: Handler) -> None:
    bus.off(event, callback)


def trigger(event: Hashable, *args: Any, **kwargs: Any) -> None:
    """Emit *event*, calling all subscribed callbacks."""
    bus.trigger(event, *args, **kwargs)


def listeners(event: Hashable) -> list[Handler]:
    return bus.listeners(event)


def clear() -> None:
    """Drop every registration on the shared bus."""
    bus.clear()


__all__ = ["bus", "on", "off", "trigger", "listeners", "clear"]
