"""Observed permissions - snapshot of what the remote system currently grants."""

from dataclasses import dataclass, field

from grantsync.domain.entities.actor import Actor
from grantsync.domain.value_objects import ActorKind


@dataclass(frozen=True)
class ObservedGrant:
    """Tokens an actor currently holds on the remote object."""

    actor: Actor
    tokens: frozenset[str]

    @property
    def name(self) -> str:
        return self.actor.name


@dataclass
class ObservedPermissions:
    """Currently granted users and groups with their token sets."""

    users: list[ObservedGrant] = field(default_factory=list)
    groups: list[ObservedGrant] = field(default_factory=list)

    def grants(self, kind: ActorKind) -> list[ObservedGrant]:
        return self.users if kind is ActorKind.USER else self.groups
