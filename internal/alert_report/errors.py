"""Module-specific errors for alert_report domain."""


class ErrAlertNotFound(Exception):
    """Raised when the requested alert is not in the current evaluation."""
    pass


class ErrInvalidQuery(Exception):
    """Raised when a report query carries an unknown timeframe or bad dates."""
    pass


__all__ = [
    "ErrAlertNotFound",
    "ErrInvalidQuery",
]
