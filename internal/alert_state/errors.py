"""Module-specific errors for alert_state domain."""


class ErrInvalidTransition(Exception):
    """Raised when an action is not allowed from the alert's current status."""
    pass


class ErrUnknownAction(Exception):
    """Raised when the action name is not recognized."""
    pass


class ErrStateMergeFailed(Exception):
    """Raised by strict merges when persisted state cannot be read."""
    pass


__all__ = [
    "ErrInvalidTransition",
    "ErrUnknownAction",
    "ErrStateMergeFailed",
]
