"""Tiny synchronous event emitter mixin."""
from __future__ import annotations

from .config import configure_logging
from .core import Emittable, MicroEvent, mixin
from .errors import MicroEventError, MixinError

configure_logging()

__all__ = [
    "Emittable",
    "MicroEvent",
    "MicroEventError",
    "MixinError",
    "configure_logging",
    "mixin",
]
__version__ = "1.0.1"
