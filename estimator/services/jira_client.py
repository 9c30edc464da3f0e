"""Jira client facade: one authenticated session, typed operations, and issue links."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

import httpx

from estimator.core.exceptions import JiraNotConfiguredError, MissingFieldError
from estimator.schemas.jira import (
    DEFAULT_PROJECT_KEY,
    SIZE_VALUES,
    CustomFieldValues,
    IssueStatus,
    Priority,
    TranslationTable,
    validate_size,
)
from estimator.services.jira_api import JiraAPI
from estimator.services.query import build_filter_by_attributes, build_filter_by_ids
from estimator.services.translation import TranslationService

if TYPE_CHECKING:
    from estimator.core.config import Settings

logger = logging.getLogger(__name__)

DEFAULT_STORY_POINTS_FIELD = "customfield_12310243"
DEFAULT_PRIORITY_FIELD = "priority"

# Fields requested for every search hit, before the two configurable fields.
BASE_SEARCH_FIELDS = ("id", "issuetype", "status", "summary", "assignee")


class JiraClient:
    """
    Owns one httpx.AsyncClient with a bearer token for a Jira instance.

    Use as an async context manager (or call aclose()). Query strings and
    translation tables are returned from each call, never kept on the instance,
    so one client can serve several workflows in turn.
    """

    def __init__(
        self,
        instance: str,
        api_token: str,
        *,
        project_key: str = DEFAULT_PROJECT_KEY,
        story_points_field: str = DEFAULT_STORY_POINTS_FIELD,
        priority_field: str = DEFAULT_PRIORITY_FIELD,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.instance = instance.strip().rstrip("/")
        self.project_key = project_key
        self.story_points_field = story_points_field
        self.priority_field = priority_field
        self._http = httpx.AsyncClient(
            base_url=self.instance,
            headers={
                "Authorization": f"Bearer {api_token}",
                "Accept": "application/json",
            },
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )
        self.api = JiraAPI(self._http)
        self.translations = TranslationService(self.api, story_points_field, priority_field)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> JiraClient:
        """Build a client from Settings; raises JiraNotConfiguredError if URL or token is missing."""
        if not settings.JIRA_BASE_URL:
            raise JiraNotConfiguredError("Jira is not configured; set JIRA_BASE_URL.")
        token = settings.JIRA_API_TOKEN.get_secret_value() if settings.JIRA_API_TOKEN else ""
        if not token.strip():
            raise JiraNotConfiguredError("Jira is not configured; set JIRA_API_TOKEN.")
        return cls(
            settings.JIRA_BASE_URL,
            token.strip(),
            project_key=settings.JIRA_PROJECT_KEY,
            story_points_field=settings.JIRA_STORY_POINTS_FIELD,
            priority_field=settings.JIRA_PRIORITY_FIELD,
            timeout=settings.JIRA_REQUEST_TIMEOUT_SEC,
            transport=transport,
        )

    async def __aenter__(self) -> JiraClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    @property
    def search_fields(self) -> list[str]:
        return [*BASE_SEARCH_FIELDS, self.story_points_field, self.priority_field]

    async def get_service_version(self) -> str:
        body = await self.api.get_server_info()
        version = body.get("version") if isinstance(body, dict) else None
        if not isinstance(version, str) or not version:
            raise MissingFieldError("JiraClient.get_service_version()", "version")
        return version

    async def _search(self, jql: str, operation: str) -> list[dict[str, Any]]:
        body = await self.api.search(jql, self.search_fields)
        issues = body.get("issues") if isinstance(body, dict) else None
        # An empty list is a valid "nothing found"; only an absent array is an error.
        if not isinstance(issues, list):
            raise MissingFieldError(operation, "issues")
        logger.info("Jira search returned %s issue(s)", len(issues), extra={"jql": jql})
        return issues

    async def search_issues_by_id(self, ids: Sequence[str]) -> list[dict[str, Any]]:
        """Raw issues for the given keys. Raises InvalidQueryError before any request if ids are bad."""
        jql = build_filter_by_ids(ids, self.project_key)
        return await self._search(jql, "JiraClient.search_issues_by_id()")

    async def search_issues_by_filter(
        self,
        component: str | None = None,
        assignee: str | None = None,
        developer: str | None = None,
    ) -> list[dict[str, Any]]:
        """Raw open issues lacking story points or priority, narrowed by the given attributes."""
        jql = build_filter_by_attributes(component, assignee, developer, self.project_key)
        return await self._search(jql, "JiraClient.search_issues_by_filter()")

    async def update_estimate(self, issue_id: str, priority: Priority, size: int) -> None:
        """
        Write priority and story points in one edit call.

        Control values (clear/cancel sentinels) are rejected with ValueError
        before any request; Jira errors propagate as RemoteFetchError.
        """
        if not isinstance(priority, Priority):
            raise ValueError(f"priority must be a Priority, got {priority!r}")
        checked = validate_size(size)
        if not checked.ok:
            raise ValueError(f"size must be one of {list(SIZE_VALUES)}, got {size!r}")
        size = checked.value
        fields = {
            self.story_points_field: size,
            self.priority_field: {"name": priority.name},
        }
        await self.api.edit_issue(issue_id, fields)
        logger.info(
            "Estimate updated",
            extra={"issue": issue_id, "priority": priority.name, "story_points": size},
        )

    def issue_url(self, issue_id: str) -> str:
        return f"{self.instance}/browse/{issue_id}"

    async def fetch_issue_transitions(self, issue_id: str) -> list[IssueStatus]:
        return await self.translations.fetch_issue_transitions(issue_id)

    async def build_translation_context(self, issue_id: str) -> TranslationTable:
        return await self.translations.build_translation_context(issue_id)

    async def lookup_custom_fields(self, issue_id: str) -> CustomFieldValues:
        return await self.translations.lookup_custom_fields(issue_id)
