from __future__ import annotations

from collections.abc import Callable
from typing import Any


class Spy:
    """Callable recording how often and with what it was called.

    An optional *fn* runs first with the same arguments.
    """

    def __init__(self, fn: Callable[..., Any] | None = None) -> None:
        self.fn = fn
        self.calls: list[tuple[tuple[Any, ...], dict[str, Any]]] = []

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        if self.fn is not None:
            self.fn(*args, **kwargs)
        self.calls.append((args, kwargs))

    @property
    def called(self) -> int:
        return len(self.calls)

    @property
    def last_args(self) -> tuple[Any, ...]:
        return self.calls[-1][0]
