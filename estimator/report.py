"""
CLI entrypoint: list open issues that still need story points or a priority. Run from project root:

  python -m estimator.report [--component C] [--assignee A] [--developer D]
  python -m estimator.report RHEL-35732 RHEL-35733

Reads JIRA_BASE_URL and JIRA_API_TOKEN (and the other settings) from env or .env.
"""

import argparse
import asyncio
import logging
import sys

from dotenv import load_dotenv
from pydantic import ValidationError

from estimator.core.config import Settings, get_settings
from estimator.core.exceptions import (
    InvalidQueryError,
    JiraNotConfiguredError,
    MissingFieldError,
    RemoteFetchError,
)
from estimator.schemas.display import set_color_enabled
from estimator.services.issue_rows import MISSING_LABEL, present_issue_row, to_issue_row
from estimator.services.jira_client import JiraClient

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="List Jira issues missing story points or priority."
    )
    parser.add_argument(
        "issues", nargs="*", help="Issue keys (e.g. RHEL-35732); filters are ignored when given"
    )
    parser.add_argument("--component", help="Only issues in this component")
    parser.add_argument("--assignee", help="Only issues assigned to this user")
    parser.add_argument("--developer", help="Only issues with this developer")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    return parser


async def run_report(args: argparse.Namespace, settings: Settings) -> list[str]:
    """Search Jira and return one presented line (plus link) per issue."""
    async with JiraClient.from_settings(settings) as client:
        if args.issues:
            issues = await client.search_issues_by_id(args.issues)
        else:
            issues = await client.search_issues_by_filter(
                args.component, args.assignee, args.developer
            )
        lines = []
        for raw in issues:
            row = to_issue_row(raw, client.story_points_field, client.priority_field)
            link = client.issue_url(row.key) if row.key else MISSING_LABEL
            lines.append(f"{present_issue_row(row)}\n    {link}")
        return lines


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    try:
        settings = get_settings()
    except ValidationError as e:
        logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s %(message)s")
        logger.error("Invalid settings: %s", e)
        return 1

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )
    set_color_enabled(settings.color_enabled and not args.no_color and sys.stdout.isatty())

    try:
        lines = asyncio.run(run_report(args, settings))
    except (JiraNotConfiguredError, InvalidQueryError, MissingFieldError, RemoteFetchError) as e:
        logger.error("Report failed: %s", e.message)
        return 1

    if not lines:
        print("No matching issues.")
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
