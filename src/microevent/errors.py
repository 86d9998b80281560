class MicroEventError(Exception):
    """Base class for microevent errors."""


class MixinError(MicroEventError, TypeError):
    """Raised when a mixin target refuses the emitter methods."""
