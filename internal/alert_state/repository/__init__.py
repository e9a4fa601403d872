"""Alert State Repository.

Exports:
- IAlertStateRepository: Repository interface
- Options: All option structs
- Errors: Domain repository errors
- New: Factory function
"""

from .interface import IAlertStateRepository
from .new import New
from .option import (
    GetManyOptions,
    UpsertOptions,
    AppendActionOptions,
    ListActionsOptions,
)
from .errors import (
    RepositoryError,
    ErrFailedToGet,
    ErrFailedToUpsert,
    ErrInvalidData,
)
from .memory import AlertStateMemoryRepository

__all__ = [
    "IAlertStateRepository",
    "New",
    "GetManyOptions",
    "UpsertOptions",
    "AppendActionOptions",
    "ListActionsOptions",
    "RepositoryError",
    "ErrFailedToGet",
    "ErrFailedToUpsert",
    "ErrInvalidData",
    "AlertStateMemoryRepository",
]
