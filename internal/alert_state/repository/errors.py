"""Domain repository errors for alert_state."""


class RepositoryError(Exception):
    """Base exception for repository operations."""
    pass


class ErrFailedToGet(RepositoryError):
    """Raised when reading state fails."""
    pass


class ErrFailedToUpsert(RepositoryError):
    """Raised when writing state or the action log fails."""
    pass


class ErrInvalidData(RepositoryError):
    """Raised when input data is invalid."""
    pass


__all__ = [
    "RepositoryError",
    "ErrFailedToGet",
    "ErrFailedToUpsert",
    "ErrInvalidData",
]
