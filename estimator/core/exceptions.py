"""Errors surfaced to callers of the Jira client.

Schema mismatches in server data are not here: they are recovered locally by
substituting defaults (see estimator.schemas.jira.ValidationResult).
"""


class MissingFieldError(Exception):
    """Raised when a required field is absent from an otherwise successful response."""

    def __init__(self, operation: str, field: str) -> None:
        self.operation = operation
        self.field = field
        self.message = f"{operation}: missing {field}."
        super().__init__(self.message)


class RemoteFetchError(Exception):
    """Raised when Jira cannot be reached or returns an error (auth, not found, server error)."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.cause = cause
        super().__init__(message)


class InvalidQueryError(Exception):
    """Raised when search input is empty or malformed; no request is sent."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class JiraNotConfiguredError(Exception):
    """Raised when the client is built from settings that lack the Jira URL or token."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
