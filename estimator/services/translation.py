"""Translate Jira responses into domain values, falling back to the default tables on schema mismatch."""

import logging

from estimator.schemas.jira import (
    CustomFieldValues,
    IssueStatus,
    TranslationTable,
    default_issue_statuses,
    default_issue_types,
    default_priorities,
    validate_many,
)
from estimator.services.jira_api import JiraAPI

logger = logging.getLogger(__name__)


class TranslationService:
    """
    Validates server data for one issue against the domain schemas.

    Transport errors (RemoteFetchError) propagate; data that does not match a
    schema never does.
    """

    def __init__(self, api: JiraAPI, story_points_field: str, priority_field: str) -> None:
        self.api = api
        self.story_points_field = story_points_field
        self.priority_field = priority_field

    async def fetch_issue_transitions(self, issue_id: str) -> list[IssueStatus]:
        """Statuses the issue may move to next; the full default table if the response does not validate."""
        body = await self.api.get_transitions(issue_id)
        raw = body.get("transitions") if isinstance(body, dict) else None
        result = validate_many(raw, IssueStatus)
        if result.ok:
            return result.value
        logger.debug(
            "Transitions for %s did not validate; using default statuses: %s",
            issue_id,
            result.error,
        )
        return default_issue_statuses()

    async def build_translation_context(self, issue_id: str) -> TranslationTable:
        # Only statuses are fetched live; Jira offers no per-issue priority/type list here.
        return TranslationTable(
            priority=default_priorities(),
            status=await self.fetch_issue_transitions(issue_id),
            type=default_issue_types(),
        )

    async def lookup_custom_fields(self, issue_id: str) -> CustomFieldValues:
        """Raw edit metadata for the story-points and priority fields; not validated."""
        body = await self.api.get_edit_meta(issue_id)
        fields = body.get("fields") if isinstance(body, dict) else None
        if not isinstance(fields, dict):
            fields = {}
        values = CustomFieldValues(
            story_points=fields.get(self.story_points_field),
            priority=fields.get(self.priority_field),
        )
        logger.debug(
            "Edit metadata for %s: %s=%r, %s=%r",
            issue_id,
            self.story_points_field,
            values.story_points,
            self.priority_field,
            values.priority,
        )
        return values
