"""Computed assignment - what an actor holds after reconciliation."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ComputedAssignment:
    """Tokens in effect for one actor. Tokens are kept sorted."""

    name: str
    tokens: tuple[str, ...]

    @classmethod
    def of(cls, name: str, tokens: Iterable[str]) -> "ComputedAssignment":
        return cls(name=name, tokens=tuple(sorted(set(tokens))))

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "tokens": list(self.tokens)}


@dataclass
class AssignmentResult:
    """Durable output of a pass: computed users and groups, sorted by name."""

    computed_users: list[ComputedAssignment] = field(default_factory=list)
    computed_groups: list[ComputedAssignment] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "computed_users": [c.to_dict() for c in self.computed_users],
            "computed_groups": [c.to_dict() for c in self.computed_groups],
        }
