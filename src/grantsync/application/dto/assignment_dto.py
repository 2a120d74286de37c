"""Assignment DTOs - validation of declared assignment input."""

from typing import Any

import pydantic
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

from grantsync.domain.entities import Assignment
from grantsync.domain.exceptions import ValidationError
from grantsync.domain.value_objects import ObjectKind


class AssignmentInput(BaseModel):
    """One declared rule as received from the caller."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    priority: int
    tokens: list[str] = Field(
        min_length=1,
        validation_alias=AliasChoices("tokens", "roles", "permissions"),
    )
    users: list[str] = Field(default_factory=list)
    groups: list[str] = Field(default_factory=list)

    def to_domain(self) -> Assignment:
        return Assignment(
            priority=self.priority,
            tokens=tuple(self.tokens),
            users=tuple(self.users),
            groups=tuple(self.groups),
        )


class AssignmentSetInput(BaseModel):
    """Full list of declared rules for one object."""

    assignments: list[AssignmentInput] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_priorities(self) -> "AssignmentSetInput":
        seen: set[int] = set()
        for assignment in self.assignments:
            if assignment.priority in seen:
                raise ValueError(f"duplicate assignment priority {assignment.priority}")
            seen.add(assignment.priority)
        return self


def _describe(error: pydantic.ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(p) for p in item["loc"])
        parts.append(f"{location}: {item['msg']}" if location else item["msg"])
    return "; ".join(parts)


def parse_assignments(
    raw: list[dict[str, Any]] | None,
    object_kind: ObjectKind,
) -> list[Assignment]:
    """Validate raw assignment dicts and convert them to domain Assignments.

    Raises ValidationError on malformed input, duplicate priorities or tokens
    outside the object kind's vocabulary.
    """
    try:
        parsed = AssignmentSetInput.model_validate({"assignments": raw or []})
    except pydantic.ValidationError as e:
        raise ValidationError(_describe(e)) from e

    allowed = object_kind.allowed_tokens
    if allowed is not None:
        unknown = sorted(
            {t for a in parsed.assignments for t in a.tokens if t not in allowed}
        )
        if unknown:
            raise ValidationError(
                f"Unknown {object_kind} permissions: {', '.join(unknown)}"
            )

    return [a.to_domain() for a in parsed.assignments]
