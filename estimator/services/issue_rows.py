"""Flatten raw search hits into display rows with validated domain fields."""

from typing import Any

from estimator.schemas.display import (
    present_issue_status,
    present_issue_type,
    present_priority,
    present_size,
)
from estimator.schemas.issue import IssueRow
from estimator.schemas.jira import (
    validate_issue_status,
    validate_issue_type,
    validate_priority,
    validate_size,
)

MISSING_LABEL = "-"


def _as_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def to_issue_row(
    raw_issue: Any,
    story_points_field: str,
    priority_field: str,
) -> IssueRow:
    """
    Build an IssueRow from one element of a search response's `issues` array.

    Type, status, priority and story points are validated; any that do not
    match their schema (including empty fields) become None.
    """
    raw_issue = _as_dict(raw_issue)
    fields = _as_dict(raw_issue.get("fields"))
    assignee = _as_dict(fields.get("assignee"))
    summary = fields.get("summary")
    assignee_name = assignee.get("displayName") or assignee.get("name")
    return IssueRow(
        key=str(raw_issue.get("key") or raw_issue.get("id") or ""),
        summary=summary if isinstance(summary, str) else "",
        assignee=assignee_name if isinstance(assignee_name, str) else None,
        issue_type=validate_issue_type(fields.get("issuetype")).value,
        status=validate_issue_status(fields.get("status")).value,
        priority=validate_priority(fields.get(priority_field)).value,
        size=validate_size(fields.get(story_points_field)).value,
    )


def present_issue_row(row: IssueRow) -> str:
    """One terminal line: type symbol, key, status, priority, size, assignee, summary."""
    parts = [
        present_issue_type(row.issue_type) if row.issue_type else MISSING_LABEL,
        row.key,
        present_issue_status(row.status) if row.status else MISSING_LABEL,
        present_priority(row.priority) if row.priority else MISSING_LABEL,
        present_size(row.size) if row.size is not None else MISSING_LABEL,
        row.assignee or MISSING_LABEL,
        row.summary,
    ]
    return " | ".join(parts)
