"""Pydantic schema for one search hit flattened for display."""

from pydantic import BaseModel, ConfigDict, Field

from estimator.schemas.jira import IssueStatus, IssueType, Priority


class IssueRow(BaseModel):
    """Search hit with domain fields validated; a field that does not validate is None."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Issue key (e.g. RHEL-35732).")
    summary: str = Field(default="", description="Issue summary.")
    assignee: str | None = Field(default=None, description="Assignee display name.")
    issue_type: IssueType | None = Field(default=None, description="Validated issue type.")
    status: IssueStatus | None = Field(default=None, description="Validated status.")
    priority: Priority | None = Field(default=None, description="Validated priority.")
    size: int | None = Field(default=None, description="Validated story points.")
