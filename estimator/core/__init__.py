"""Core client configuration and errors."""

from estimator.core.config import Settings, get_settings
from estimator.core.exceptions import (
    InvalidQueryError,
    JiraNotConfiguredError,
    MissingFieldError,
    RemoteFetchError,
)

__all__ = [
    "InvalidQueryError",
    "JiraNotConfiguredError",
    "MissingFieldError",
    "RemoteFetchError",
    "Settings",
    "get_settings",
]
