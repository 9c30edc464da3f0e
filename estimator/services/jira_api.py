"""Jira REST v2 calls used by the estimator. Returns decoded JSON; raises RemoteFetchError on failure."""

import json
import logging
import time
from typing import Any
from urllib.parse import quote

import httpx

from estimator.core.exceptions import RemoteFetchError

logger = logging.getLogger(__name__)

API_PREFIX = "/rest/api/2"


def _issue_path(issue: str, suffix: str = "") -> str:
    return f"/issue/{quote(issue, safe='')}{suffix}"


def _error_detail(resp: httpx.Response) -> str:
    try:
        body = resp.json()
        err_messages = body.get("errorMessages", [])
        errors = body.get("errors", {})
        if isinstance(err_messages, str):
            err_messages = [err_messages]
        if isinstance(err_messages, list) and err_messages:
            return "; ".join(str(m) for m in err_messages)[:500]
        return json.dumps(errors)[:500]
    except (ValueError, AttributeError, TypeError):
        return resp.text[:500] if resp.text else "Unknown error"


def _raise_for_status(resp: httpx.Response, operation: str) -> None:
    if resp.status_code == 401:
        raise RemoteFetchError(
            f"{operation}: Jira authentication failed (invalid or expired access token).", 401
        )
    if resp.status_code == 404:
        raise RemoteFetchError(f"{operation}: Jira issue or resource not found.", 404)
    if resp.status_code >= 400:
        raise RemoteFetchError(
            f"{operation}: Jira returned {resp.status_code}: {_error_detail(resp)}",
            resp.status_code,
        )


class JiraAPI:
    """Thin wrapper over an authenticated httpx.AsyncClient whose base_url is the Jira instance."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self.client = client

    async def _request(
        self,
        operation: str,
        method: str,
        path: str,
        payload: dict[str, Any] | None = None,
    ) -> Any:
        start = time.perf_counter()
        try:
            resp = await self.client.request(method, f"{API_PREFIX}{path}", json=payload)
        except httpx.ConnectError as e:
            logger.info(
                "Jira request failed",
                extra={"operation": operation, "latency_seconds": time.perf_counter() - start},
            )
            raise RemoteFetchError(
                f"{operation}: Jira is unreachable. Check JIRA_BASE_URL.", cause=e
            ) from e
        except httpx.TimeoutException as e:
            logger.info(
                "Jira request failed",
                extra={"operation": operation, "latency_seconds": time.perf_counter() - start},
            )
            raise RemoteFetchError(
                f"{operation}: Jira request timed out. Try increasing JIRA_REQUEST_TIMEOUT_SEC.",
                cause=e,
            ) from e
        except httpx.HTTPError as e:
            logger.info(
                "Jira request failed",
                extra={"operation": operation, "latency_seconds": time.perf_counter() - start},
            )
            raise RemoteFetchError(f"{operation}: Jira request failed.", cause=e) from e

        logger.info(
            "Jira request completed",
            extra={
                "operation": operation,
                "status_code": resp.status_code,
                "latency_seconds": time.perf_counter() - start,
            },
        )
        _raise_for_status(resp, operation)

        if resp.status_code == 204 or not resp.content:
            return None
        try:
            return resp.json()
        except json.JSONDecodeError as e:
            raise RemoteFetchError(
                f"{operation}: Jira response body is not valid JSON.",
                resp.status_code,
                cause=e,
            ) from e

    async def get_server_info(self) -> Any:
        return await self._request("serverInfo", "GET", "/serverInfo")

    async def get_transitions(self, issue: str) -> Any:
        return await self._request("getTransitions", "GET", _issue_path(issue, "/transitions"))

    async def get_edit_meta(self, issue: str) -> Any:
        return await self._request("getEditIssueMeta", "GET", _issue_path(issue, "/editmeta"))

    async def search(self, jql: str, fields: list[str]) -> Any:
        return await self._request("search", "POST", "/search", {"jql": jql, "fields": fields})

    async def edit_issue(self, issue: str, fields: dict[str, Any]) -> Any:
        return await self._request("editIssue", "PUT", _issue_path(issue), {"fields": fields})
