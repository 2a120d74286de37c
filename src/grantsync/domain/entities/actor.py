"""Actor entity - a resolved user or group identity."""

from dataclasses import dataclass

from grantsync.domain.value_objects import ActorKind


@dataclass(frozen=True)
class Actor:
    """User or group found in the directory.

    ``name`` is the name assignments refer to; ``actor_id`` is the remote
    identifier (account id for users, group id for groups).
    """

    kind: ActorKind
    name: str
    actor_id: str
