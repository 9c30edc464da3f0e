"""Unit tests for estimator.report: CLI wiring with a mocked Jira."""

import contextlib
import io
import json
import unittest
from unittest.mock import patch

import httpx

from estimator.core.config import Settings
from estimator.services.jira_client import JiraClient
from estimator.report import main

INSTANCE = "https://jira.example.com"


def _settings() -> Settings:
    return Settings(
        _env_file=None,
        JIRA_BASE_URL=INSTANCE,
        JIRA_API_TOKEN="token",
        LOG_LEVEL="WARNING",
    )


def _search_client(requests: list[httpx.Request], body: dict) -> JiraClient:
    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json=body)

    return JiraClient(INSTANCE, "token", transport=httpx.MockTransport(handler))


class TestReportMain(unittest.TestCase):
    """main() searches, prints one line plus link per issue, and maps errors to exit code 1."""

    def _main(self, argv: list[str], client: JiraClient) -> tuple[int, str]:
        out = io.StringIO()
        with (
            patch("estimator.report.get_settings", return_value=_settings()),
            patch.object(JiraClient, "from_settings", return_value=client),
            contextlib.redirect_stdout(out),
        ):
            code = main(argv)
        return code, out.getvalue()

    def test_filter_search_prints_rows(self) -> None:
        requests: list[httpx.Request] = []
        body = {
            "issues": [
                {
                    "key": "RHEL-35732",
                    "fields": {
                        "issuetype": {"id": "17", "name": "Story"},
                        "status": {"id": "111", "name": "In Progress"},
                        "summary": "Estimate me",
                        "assignee": None,
                        "priority": None,
                        "customfield_12310243": None,
                    },
                }
            ]
        }
        code, output = self._main(["--component", "network", "--no-color"], _search_client(requests, body))
        self.assertEqual(code, 0)
        self.assertIn("RHEL-35732 | In Progress | - | - | - | Estimate me", output)
        self.assertIn(f"{INSTANCE}/browse/RHEL-35732", output)
        jql = json.loads(requests[0].content)["jql"]
        self.assertIn("AND component = network", jql)

    def test_ids_search(self) -> None:
        requests: list[httpx.Request] = []
        code, output = self._main(["RHEL-1", "RHEL-2"], _search_client(requests, {"issues": []}))
        self.assertEqual(code, 0)
        self.assertIn("No matching issues.", output)
        self.assertEqual(json.loads(requests[0].content)["jql"], "issue in (RHEL-1,RHEL-2) ORDER BY id DESC")

    def test_invalid_id_exits_1_without_request(self) -> None:
        requests: list[httpx.Request] = []
        code, _ = self._main(["rhel-1"], _search_client(requests, {"issues": []}))
        self.assertEqual(code, 1)
        self.assertEqual(requests, [])

    def test_missing_issues_exits_1(self) -> None:
        requests: list[httpx.Request] = []
        code, _ = self._main([], _search_client(requests, {"total": 0}))
        self.assertEqual(code, 1)

    def test_hit_without_key_prints_placeholder_link(self) -> None:
        requests: list[httpx.Request] = []
        body = {"issues": [{"fields": {"summary": "No key"}}]}
        code, output = self._main(["--no-color"], _search_client(requests, body))
        self.assertEqual(code, 0)
        self.assertIn("No key\n    -\n", output)
        self.assertNotIn("/browse/", output)


class TestReportSettings(unittest.TestCase):
    """Invalid settings are reported and exit 1 instead of raising."""

    def test_invalid_base_url_exits_1(self) -> None:
        def bad_settings() -> Settings:
            return Settings(_env_file=None, JIRA_BASE_URL="ftp://issues.example.com")

        out = io.StringIO()
        with (
            patch("estimator.report.get_settings", side_effect=bad_settings),
            patch.object(JiraClient, "from_settings") as from_settings,
            contextlib.redirect_stdout(out),
        ):
            code = main([])
        self.assertEqual(code, 1)
        from_settings.assert_not_called()
        self.assertEqual(out.getvalue(), "")
