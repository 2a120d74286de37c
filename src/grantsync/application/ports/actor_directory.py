"""Actor directory port - resolves declared names to identities."""

from typing import Protocol

from grantsync.domain.entities import Actor


class ActorDirectory(Protocol):
    """Port for user and group lookup.

    ``find_*`` return None for unknown names and raise LookupFailure when the
    lookup itself fails. ``register_*`` are best-effort warm-up hints.
    """

    def find_user(self, name: str) -> Actor | None: ...

    def find_group(self, name: str) -> Actor | None: ...

    def register_usernames(self, *names: str) -> None: ...

    def register_group_names(self, *names: str) -> None: ...
