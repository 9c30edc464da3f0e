"""Pydantic schemas for Jira domain values: story-point size, priority, issue type and issue status.

Jira returns loosely-typed JSON. Each domain type has a closed set of ids (or
values, for Size); anything outside the set is rejected. Validators return a
ValidationResult instead of raising so callers can fall back to the default
tables uniformly.
"""

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Annotated, Any, ClassVar, Generic, Literal, TypeVar, Union

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    Strict,
    StringConstraints,
    TypeAdapter,
    ValidationError,
    field_validator,
    model_validator,
)

T = TypeVar("T")

DEFAULT_PROJECT_KEY = "RHEL"

# =============================================================================
# Validation result
# =============================================================================


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    """Outcome of validating raw server data: either a value or the pydantic error."""

    value: T | None = None
    error: ValidationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _run(adapter: TypeAdapter, raw: Any) -> ValidationResult:
    try:
        return ValidationResult(value=adapter.validate_python(raw))
    except ValidationError as e:
        return ValidationResult(error=e)


# =============================================================================
# Story Points (Size)
# =============================================================================

# Fibonacci-like story-point scale, in display order.
SIZE_VALUES: tuple[int, ...] = (1, 2, 3, 5, 8, 13)

# UI-only controls; never written to Jira.
SIZE_CLEAR: Literal[0] = 0
SIZE_CANCEL: Literal[-1] = -1
SIZE_CONTROLS: tuple[int, ...] = (SIZE_CLEAR, SIZE_CANCEL)


def _integral_number(value: Any) -> Any:
    """JSON does not distinguish 3 from 3.0; Jira number fields come back as floats."""
    if isinstance(value, bool):
        raise ValueError("size must be a number, not a boolean")
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _check_size(value: int) -> int:
    if value not in SIZE_VALUES:
        raise ValueError(f"size must be one of {list(SIZE_VALUES)}, got {value!r}")
    return value


def _check_size_with_controls(value: int) -> int:
    if value not in SIZE_VALUES and value not in SIZE_CONTROLS:
        raise ValueError(
            f"size must be one of {list(SIZE_VALUES) + list(SIZE_CONTROLS)}, got {value!r}"
        )
    return value


Size = Annotated[int, Strict(), BeforeValidator(_integral_number), AfterValidator(_check_size)]
SizeWithControls = Annotated[
    int, Strict(), BeforeValidator(_integral_number), AfterValidator(_check_size_with_controls)
]

_SIZE_ADAPTER: TypeAdapter[int] = TypeAdapter(Size)
_SIZE_WITH_CONTROLS_ADAPTER: TypeAdapter[int] = TypeAdapter(SizeWithControls)


def validate_size(raw: Any) -> ValidationResult[int]:
    """Validate a story-point value; strings, booleans and off-scale numbers fail."""
    return _run(_SIZE_ADAPTER, raw)


def validate_size_with_controls(raw: Any) -> ValidationResult[int]:
    return _run(_SIZE_WITH_CONTROLS_ADAPTER, raw)


def is_size_control(value: Any) -> bool:
    return not isinstance(value, bool) and value in SIZE_CONTROLS


def default_sizes() -> list[int]:
    return list(SIZE_VALUES)


# =============================================================================
# Records with a closed id set (Priority, IssueType, IssueStatus)
# =============================================================================


class JiraEnumEntry(BaseModel):
    """A Jira `{id, name}` record whose id must belong to the subclass's NAMES table.

    The id is the discriminant and is validated; the name is display text taken
    from the server as-is.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    # id -> canonical name, in display order.
    NAMES: ClassVar[dict[int, str]] = {}

    id: Annotated[int, Strict()]
    name: str

    @field_validator("id", mode="before")
    @classmethod
    def coerce_jira_id(cls, v: Any) -> Any:
        # Jira REST returns ids as strings ("11").
        if isinstance(v, bool):
            raise ValueError("id must be an integer, not a boolean")
        if isinstance(v, str) and v.isascii() and v.isdigit():
            return int(v)
        return v

    @model_validator(mode="after")
    def check_known_id(self) -> "JiraEnumEntry":
        known = type(self).NAMES
        if self.id not in known:
            raise ValueError(
                f"{type(self).__name__} id must be one of {list(known)}, got {self.id!r}"
            )
        return self

    @classmethod
    def defaults(cls) -> list["JiraEnumEntry"]:
        """Canonical table in declaration order (not sorted by id)."""
        return [cls(id=id_, name=name) for id_, name in cls.NAMES.items()]


class Priority(JiraEnumEntry):
    NAMES: ClassVar[dict[int, str]] = {
        1: "Blocker",
        2: "Critical",
        3: "Major",
        10200: "Normal",
        4: "Minor",
        # 10300 (Undefined) is deliberately not accepted.
    }


class IssueType(JiraEnumEntry):
    NAMES: ClassVar[dict[int, str]] = {
        1: "Bug",
        3: "Task",
        16: "Epic",
        17: "Story",
    }


class IssueStatus(JiraEnumEntry):
    # Open-ticket lifecycle only; Closed (61) is not a valid status here.
    NAMES: ClassVar[dict[int, str]] = {
        11: "New",
        81: "Planning",
        111: "In Progress",
        41: "Integration",
        101: "Release Pending",
    }


# UI-only priority controls; never written to Jira.
PRIORITY_CLEAR: Literal["0"] = "0"
PRIORITY_CANCEL: Literal["-1"] = "-1"
PRIORITY_CONTROLS: tuple[str, ...] = (PRIORITY_CLEAR, PRIORITY_CANCEL)

PriorityWithControls = Union[Priority, Literal["0", "-1"]]

_PRIORITY_ADAPTER: TypeAdapter[Priority] = TypeAdapter(Priority)
_PRIORITY_WITH_CONTROLS_ADAPTER: TypeAdapter[Any] = TypeAdapter(PriorityWithControls)
_ISSUE_TYPE_ADAPTER: TypeAdapter[IssueType] = TypeAdapter(IssueType)
_ISSUE_STATUS_ADAPTER: TypeAdapter[IssueStatus] = TypeAdapter(IssueStatus)


def validate_priority(raw: Any) -> ValidationResult[Priority]:
    return _run(_PRIORITY_ADAPTER, raw)


def validate_priority_with_controls(raw: Any) -> ValidationResult[Any]:
    return _run(_PRIORITY_WITH_CONTROLS_ADAPTER, raw)


def is_priority_control(value: Any) -> bool:
    return isinstance(value, str) and value in PRIORITY_CONTROLS


def validate_issue_type(raw: Any) -> ValidationResult[IssueType]:
    return _run(_ISSUE_TYPE_ADAPTER, raw)


def validate_issue_status(raw: Any) -> ValidationResult[IssueStatus]:
    return _run(_ISSUE_STATUS_ADAPTER, raw)


@lru_cache(maxsize=None)
def _list_adapter(schema: type[JiraEnumEntry]) -> TypeAdapter:
    return TypeAdapter(Annotated[list[schema], Field(min_length=1)])


def validate_many(raw: Any, schema: type[JiraEnumEntry]) -> ValidationResult[list]:
    """Validate a non-empty list of records as a whole; one bad element fails the list."""
    return _run(_list_adapter(schema), raw)


def default_priorities() -> list[Priority]:
    return Priority.defaults()


def default_issue_types() -> list[IssueType]:
    return IssueType.defaults()


def default_issue_statuses() -> list[IssueStatus]:
    return IssueStatus.defaults()


# =============================================================================
# Issue ID
# =============================================================================


@lru_cache(maxsize=None)
def _issue_id_adapter(project_key: str) -> TypeAdapter[str]:
    pattern = rf"^{re.escape(project_key)}-[0-9]+$"
    return TypeAdapter(Annotated[str, StringConstraints(strict=True, pattern=pattern)])


def validate_issue_id(raw: Any, project_key: str = DEFAULT_PROJECT_KEY) -> ValidationResult[str]:
    """Issue keys look like RHEL-35732: exact project key, hyphen, digits."""
    return _run(_issue_id_adapter(project_key), raw)


def is_issue_id(raw: Any, project_key: str = DEFAULT_PROJECT_KEY) -> bool:
    return validate_issue_id(raw, project_key).ok


# =============================================================================
# Per-issue bundles
# =============================================================================


class TranslationTable(BaseModel):
    """Values currently relevant for one issue; built per workflow, never persisted."""

    model_config = ConfigDict(frozen=True)

    priority: list[Priority] = Field(..., description="Selectable priorities.")
    status: list[IssueStatus] = Field(..., description="Statuses the issue may move to.")
    type: list[IssueType] = Field(..., description="Selectable issue types.")


class CustomFieldValues(BaseModel):
    """Raw edit-metadata entries for the configured story-points and priority fields."""

    model_config = ConfigDict(frozen=True)

    story_points: Any = Field(default=None, description="Edit metadata for the story-points field.")
    priority: Any = Field(default=None, description="Edit metadata for the priority field.")
