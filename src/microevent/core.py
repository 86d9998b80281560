"""Observer mixin giving any object ``on``/``off``/``trigger``."""
from __future__ import annotations

import logging
from collections.abc import Callable, Hashable
from types import MethodType
from typing import Any, Protocol, runtime_checkable

from .errors import MixinError

logger = logging.getLogger("microevent")

Handler = Callable[..., Any]

# Names copied onto mixin targets.
MIXIN_METHODS: tuple[str, ...] = ("on", "off", "trigger")


@runtime_checkable
class Emittable(Protocol):
    """Protocol for objects carrying the emitter methods."""

    def on(self, event: Hashable, handler: Handler) -> None:
        """Subscribe *handler* to *event*."""

    def off(self, event: Hashable, handler: Handler) -> None:
        """Unsubscribe *handler* from *event*."""

    def trigger(self, event: Hashable, *args: Any, **kwargs: Any) -> None:
        """Call every handler subscribed to *event*."""


def _same_handler(a: Handler, b: Handler) -> bool:
    if a is b:
        return True
    # ``obj.method`` builds a new bound method on each access
    if isinstance(a, MethodType) and isinstance(b, MethodType):
        return a.__self__ is b.__self__ and a.__func__ is b.__func__
    return False


def _instances_hold_registry(cls: type) -> bool:
    for klass in cls.__mro__:
        if klass is object:
            continue
        slots = klass.__dict__.get("__slots__")
        if slots is None:
            return True
        if isinstance(slots, str):
            slots = (slots,)
        if "__dict__" in slots or "_events" in slots:
            return True
    return False


class MicroEvent:
    """Per-instance registry of event handlers.

    Use it as a base class, hold one as an attribute, or graft its methods
    onto an existing class or object with :func:`mixin`. The registry lives
    in the ``_events`` attribute of whichever object the methods are bound
    to and is created on first use.
    """

    def _registry(self) -> dict[Hashable, list[Handler]]:
        events = getattr(self, "_events", None)
        if events is None:
            events = {}
            # bypasses frozen dataclasses and custom __setattr__
            object.__setattr__(self, "_events", events)
        return events

    def _handlers(self, event: Hashable) -> list[Handler]:
        events = getattr(self, "_events", None)
        if not events:
            return []
        return events.get(event) or []

    def clear(self) -> None:
        """Drop every registration on this emitter."""
        events = getattr(self, "_events", None)
        if events:
            events.clear()

    def on(self, event: Hashable, handler: Handler) -> None:
        """Register *handler* to be called when *event* is triggered.

        Subscribing the same handler twice registers it twice.
        """
        MicroEvent._registry(self).setdefault(event, []).append(handler)
        logger.debug("on %r -> %r", event, handler)

    def off(self, event: Hashable, handler: Handler) -> None:
        """Remove the first registration of *handler* for *event*.

        Unknown events and handlers that were never registered are ignored.
        """
        handlers = MicroEvent._handlers(self, event)
        if not handlers:
            return
        for index, registered in enumerate(handlers):
            if _same_handler(registered, handler):
                del handlers[index]
                logger.debug("off %r -> %r", event, handler)
                return

    def trigger(self, event: Hashable, *args: Any, **kwargs: Any) -> None:
        """Call the handlers registered for *event* with the given arguments.

        The handler list is copied first; handlers may call :meth:`on` or
        :meth:`off` and only later triggers see the change. An exception from
        a handler propagates and the remaining handlers are not called.
        """
        handlers = MicroEvent._handlers(self, event)
        if not handlers:
            return
        logger.debug("trigger %r to %d handler(s)", event, len(handlers))
        for handler in list(handlers):
            handler(*args, **kwargs)

    def listeners(self, event: Hashable) -> list[Handler]:
        """Return a copy of the handlers registered for *event*."""
        return list(MicroEvent._handlers(self, event))

    @staticmethod
    def mixin(target: Any) -> None:
        """Give *target* the ``on``, ``off`` and ``trigger`` methods.

        A class receives the plain functions so that every instance shares
        them; any other object receives them bound to itself. Existing
        attributes with the same names are overwritten.
        """
        is_class = isinstance(target, type)
        if is_class and not _instances_hold_registry(target):
            raise MixinError(
                f"instances of {target!r} cannot hold an event registry; "
                "add '__dict__' or '_events' to __slots__"
            )
        for name in MIXIN_METHODS:
            fn = MicroEvent.__dict__[name]
            value = fn if is_class else MethodType(fn, target)
            try:
                setattr(target, name, value)
            except (AttributeError, TypeError) as exc:
                raise MixinError(
                    f"cannot add {name!r} to {target!r}: {exc}"
                ) from exc
        logger.debug(
            "mixin applied to %s %r", "class" if is_class else "object", target
        )


mixin = MicroEvent.mixin

__all__ = ["Emittable", "Handler", "MicroEvent", "MIXIN_METHODS", "mixin"]
