"""Domain errors."""


class InvalidStateError(RuntimeError):
    """Raised when an action violates the display state preconditions."""


__all__ = ["InvalidStateError"]
