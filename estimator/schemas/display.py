"""Terminal labels for domain values.

Each domain type has exactly one dispatch table. Rows list the ids they match
explicitly, so one style can cover several ids (New and Planning are both
cyan). Ids with no row fall through to the server name, unstyled.
"""

from estimator.schemas.jira import IssueStatus, IssueType, Priority

# ANSI SGR codes
RESET = "\033[0m"
BOLD = "\033[1m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
CYAN = "\033[36m"

Style = tuple[str, ...]

# (matching values, style)
SIZE_STYLES: tuple[tuple[frozenset[int], Style], ...] = (
    (frozenset({1, 2}), (GREEN,)),
    (frozenset({3}), (YELLOW,)),
    (frozenset({5}), (YELLOW, BOLD)),
    (frozenset({8}), (RED,)),
    (frozenset({13}), (RED, BOLD)),
)

PRIORITY_STYLES: tuple[tuple[frozenset[int], Style], ...] = (
    (frozenset({1}), (RED, BOLD)),  # Blocker
    (frozenset({2}), (RED,)),  # Critical
    (frozenset({3}), (YELLOW,)),  # Major
    (frozenset({4}), (CYAN,)),  # Minor
)

ISSUE_STATUS_STYLES: tuple[tuple[frozenset[int], Style], ...] = (
    (frozenset({11, 81}), (CYAN,)),  # New, Planning
    (frozenset({111}), (BLUE,)),  # In Progress
    (frozenset({41, 101}), (GREEN,)),  # Integration, Release Pending
)

ISSUE_TYPE_SYMBOLS: dict[int, str] = {
    1: "\U0001f41b",  # Bug
    3: "☑️",  # Task
    16: "⚡",  # Epic
    17: "\U0001f381",  # Story
}

_color_enabled = True


def set_color_enabled(enabled: bool) -> None:
    """Turn ANSI styling on or off for every label (e.g. when output is not a terminal)."""
    global _color_enabled
    _color_enabled = enabled


def is_color_enabled() -> bool:
    return _color_enabled


def style(text: str, codes: Style) -> str:
    if not codes or not _color_enabled:
        return text
    return f"{''.join(codes)}{text}{RESET}"


def _match(table: tuple[tuple[frozenset[int], Style], ...], key: int) -> Style:
    for values, codes in table:
        if key in values:
            return codes
    return ()


def present_size(value: int) -> str:
    return style(str(value), _match(SIZE_STYLES, value))


def present_priority(value: Priority) -> str:
    return style(value.name, _match(PRIORITY_STYLES, value.id))


def present_issue_type(value: IssueType) -> str:
    return ISSUE_TYPE_SYMBOLS.get(value.id, value.name)


def present_issue_status(value: IssueStatus) -> str:
    return style(value.name, _match(ISSUE_STATUS_STYLES, value.id))
