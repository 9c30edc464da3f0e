"""Build JQL for the searches the estimator runs. Pure string construction; no network."""

import re
from collections.abc import Sequence

from estimator.core.exceptions import InvalidQueryError
from estimator.schemas.jira import DEFAULT_PROJECT_KEY, is_issue_id

ORDER_BY = "ORDER BY id DESC"

# Open tickets still missing an estimate or a priority.
BASE_FILTER_TEMPLATE = (
    'project = {project_key} AND ("Story Points" is EMPTY OR priority is EMPTY)'
    " AND status != Closed"
)

# Components are written unquoted, so only bare words are allowed.
_BARE_WORD = re.compile(r"^[A-Za-z0-9_.\-]+$")


def base_filter(project_key: str = DEFAULT_PROJECT_KEY) -> str:
    return BASE_FILTER_TEMPLATE.format(project_key=project_key)


def quote_value(value: str) -> str:
    """Quote a JQL string literal, escaping backslashes and double quotes."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def build_filter_by_ids(
    ids: Sequence[str],
    project_key: str = DEFAULT_PROJECT_KEY,
) -> str:
    """
    Return `issue in (A,B,...) ORDER BY id DESC` for the given issue keys, order preserved.

    Raises InvalidQueryError when ids is empty or any id is not a PROJECT-<number> key.
    """
    if isinstance(ids, str):
        raise InvalidQueryError("Issue ids must be a sequence of keys, not a single string.")
    keys = list(ids)
    if not keys:
        raise InvalidQueryError("At least one issue id is required.")
    invalid = [k for k in keys if not is_issue_id(k, project_key)]
    if invalid:
        raise InvalidQueryError(
            f"Invalid issue id(s) {', '.join(repr(k) for k in invalid)}; "
            f"expected {project_key}-<number>."
        )
    return f"issue in ({','.join(keys)}) {ORDER_BY}"


def build_filter_by_attributes(
    component: str | None = None,
    assignee: str | None = None,
    developer: str | None = None,
    project_key: str = DEFAULT_PROJECT_KEY,
) -> str:
    """
    Return the base filter narrowed by any of component, assignee and developer.

    Absent or blank attributes add nothing. Component is unquoted; assignee and
    developer are quoted string literals.
    """
    clauses = [base_filter(project_key)]

    component = (component or "").strip()
    if component:
        if not _BARE_WORD.match(component):
            raise InvalidQueryError(
                f"Invalid component {component!r}; use letters, digits, '.', '_' or '-'."
            )
        clauses.append(f"AND component = {component}")

    assignee = (assignee or "").strip()
    if assignee:
        clauses.append(f"AND assignee = {quote_value(assignee)}")

    developer = (developer or "").strip()
    if developer:
        clauses.append(f"AND developer = {quote_value(developer)}")

    clauses.append(ORDER_BY)
    return " ".join(clauses)
