from domain.exceptions.query_exceptions import (
    DomainException,
    InconsistentResultError,
    InvalidArgumentError,
    StorageFailureError,
)

__all__ = [
    "DomainException",
    "InconsistentResultError",
    "InvalidArgumentError",
    "StorageFailureError",
]
