"""Domain value objects."""

from grantsync.domain.value_objects.actor_kind import ActorKind
from grantsync.domain.value_objects.object_kind import SPACE_PERMISSION_KEYS, ObjectKind

__all__ = [
    "ActorKind",
    "ObjectKind",
    "SPACE_PERMISSION_KEYS",
]
