"""Assignment entities - declared rules and their resolved order."""

from dataclasses import dataclass, field

from grantsync.domain.value_objects import ActorKind


@dataclass(frozen=True)
class Assignment:
    """One declared rule: users and groups that should hold tokens, keyed by priority."""

    priority: int
    tokens: tuple[str, ...]
    users: tuple[str, ...] = ()
    groups: tuple[str, ...] = ()


@dataclass
class AssignmentOrder:
    """Resolved actor -> token mapping.

    ``user_names`` and ``group_names`` keep resolution order and may repeat a
    name; ``users`` and ``groups`` hold only the final write for each actor.
    """

    users: dict[str, frozenset[str]] = field(default_factory=dict)
    user_names: list[str] = field(default_factory=list)
    groups: dict[str, frozenset[str]] = field(default_factory=dict)
    group_names: list[str] = field(default_factory=list)
    tokens: frozenset[str] = frozenset()

    def mapping(self, kind: ActorKind) -> dict[str, frozenset[str]]:
        """Actor -> tokens mapping for the given kind."""
        return self.users if kind is ActorKind.USER else self.groups

    def names(self, kind: ActorKind) -> list[str]:
        """Ordered names for the given kind, possibly with repeats."""
        return self.user_names if kind is ActorKind.USER else self.group_names

    def unique_names(self, kind: ActorKind) -> list[str]:
        """Ordered names for the given kind, first occurrence only."""
        return list(dict.fromkeys(self.names(kind)))

    def sorted_tokens(self) -> list[str]:
        return sorted(self.tokens)

    def is_empty(self) -> bool:
        return not self.users and not self.groups
