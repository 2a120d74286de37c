"""Actor kinds that can hold tokens."""

from enum import StrEnum


class ActorKind(StrEnum):
    """Identity kinds referenced by assignments."""

    USER = "user"
    GROUP = "group"
