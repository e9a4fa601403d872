"""Module-specific errors for signal_detection domain."""


class ErrInvalidThreshold(Exception):
    """Raised when a threshold override is unknown or not numeric."""

    pass


__all__ = ["ErrInvalidThreshold"]
