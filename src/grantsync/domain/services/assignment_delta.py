"""Delta between an in-state and a planned assignment order."""

from dataclasses import dataclass

from grantsync.domain.entities import AssignmentOrder
from grantsync.domain.value_objects import ActorKind


@dataclass(frozen=True)
class AssignmentDelta:
    """Partition of one actor kind into unchanged, to-update and to-remove names."""

    kind: ActorKind
    unchanged: tuple[str, ...] = ()
    to_update: tuple[str, ...] = ()
    to_remove: tuple[str, ...] = ()

    def is_empty(self) -> bool:
        """True when the planned order needs no remote call for this kind."""
        return not self.to_update and not self.to_remove

    def needs_call(self, name: str, force_update: bool = False) -> bool:
        return name in self.to_update or (force_update and name in self.unchanged)


def removed_names(
    previous: AssignmentOrder, planned: AssignmentOrder, kind: ActorKind
) -> list[str]:
    """Names declared in ``previous`` but no longer in ``planned``, in previous order."""
    planned_names = set(planned.names(kind))
    return [n for n in previous.unique_names(kind) if n not in planned_names]


def compute_delta(
    previous: AssignmentOrder, planned: AssignmentOrder, kind: ActorKind
) -> AssignmentDelta:
    """Compare token sets per actor, ignoring order."""
    removing = removed_names(previous, planned, kind)
    previous_tokens = previous.mapping(kind)
    planned_tokens = planned.mapping(kind)

    unchanged: list[str] = []
    to_update: list[str] = []
    for name in planned.unique_names(kind):
        if previous_tokens.get(name, frozenset()) == planned_tokens[name]:
            unchanged.append(name)
        else:
            to_update.append(name)

    return AssignmentDelta(
        kind=kind,
        unchanged=tuple(unchanged),
        to_update=tuple(to_update),
        to_remove=tuple(removing),
    )
