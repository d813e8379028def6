from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain-layer exceptions.

    Carries HTTP-mapping metadata so a presentation layer can produce
    RFC 9457 Problem Details without knowing exception internals.
    """

    def __init__(
        self,
        detail: str = "",
        *,
        title: str = "Domain Error",
        status_code: int = 400,
        error_type: str = "about:blank",
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.title = title
        self.status_code = status_code
        self.error_type = error_type


class InvalidArgumentError(DomainException):
    def __init__(self, argument: str = "", reason: str = "") -> None:
        self.argument = argument
        self.reason = reason
        super().__init__(
            detail=f"Invalid argument '{argument}': {reason}",
            title="Invalid Argument",
            status_code=400,
            error_type="https://api.member-query.example/problems/invalid-argument",
        )


class InconsistentResultError(DomainException):
    def __init__(self, limit: int = 0, actual: int = 0) -> None:
        self.limit = limit
        self.actual = actual
        super().__init__(
            detail=f"Content fetch returned {actual} records for a limit of {limit}",
            title="Inconsistent Result",
            status_code=500,
            error_type="https://api.member-query.example/problems/inconsistent-result",
        )


class StorageFailureError(DomainException):
    def __init__(self, operation: str = "", reason: str = "") -> None:
        self.operation = operation
        self.reason = reason
        super().__init__(
            detail=f"Storage operation '{operation}' failed: {reason}",
            title="Storage Failure",
            status_code=503,
            error_type="https://api.member-query.example/problems/storage-failure",
        )
