"""Pydantic schemas and presentation tables for Jira domain values."""

from estimator.schemas.issue import IssueRow
from estimator.schemas.jira import (
    DEFAULT_PROJECT_KEY,
    PRIORITY_CANCEL,
    PRIORITY_CLEAR,
    SIZE_CANCEL,
    SIZE_CLEAR,
    SIZE_VALUES,
    CustomFieldValues,
    IssueStatus,
    IssueType,
    Priority,
    PriorityWithControls,
    Size,
    SizeWithControls,
    TranslationTable,
    ValidationResult,
    default_issue_statuses,
    default_issue_types,
    default_priorities,
    default_sizes,
    is_issue_id,
    validate_issue_id,
    validate_issue_status,
    validate_issue_type,
    validate_many,
    validate_priority,
    validate_size,
)

__all__ = [
    "DEFAULT_PROJECT_KEY",
    "PRIORITY_CANCEL",
    "PRIORITY_CLEAR",
    "SIZE_CANCEL",
    "SIZE_CLEAR",
    "SIZE_VALUES",
    "CustomFieldValues",
    "IssueRow",
    "IssueStatus",
    "IssueType",
    "Priority",
    "PriorityWithControls",
    "Size",
    "SizeWithControls",
    "TranslationTable",
    "ValidationResult",
    "default_issue_statuses",
    "default_issue_types",
    "default_priorities",
    "default_sizes",
    "is_issue_id",
    "validate_issue_id",
    "validate_issue_status",
    "validate_issue_type",
    "validate_many",
    "validate_priority",
    "validate_size",
]
