from __future__ import annotations

import logging
import os
from collections.abc import Mapping

logger = logging.getLogger("microevent")

DEBUG_ENV_VAR = "MICROEVENT_DEBUG"
_TRUTHY = {"1", "true", "yes", "on"}


def debug_enabled(environ: Mapping[str, str] | None = None) -> bool:
    """Return ``True`` when :data:`DEBUG_ENV_VAR` holds a truthy value."""
    env = os.environ if environ is None else environ
    return env.get(DEBUG_ENV_VAR, "").strip().lower() in _TRUTHY


def configure_logging(force: bool = False) -> logging.Logger:
    """Attach a stderr handler to the ``microevent`` logger.

    Without *force* this only happens when debugging is switched on through
    the environment and the logger has no handlers of its own yet.
    """
    if (force or debug_enabled()) and not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s:%(message)s"))
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
    return logger
