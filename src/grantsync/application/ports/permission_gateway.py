"""Permission gateway port - reads and writes tokens on one remote object."""

from collections.abc import Iterable
from typing import Protocol

from grantsync.domain.entities import Actor, ObservedPermissions


class PermissionGrantor(Protocol):
    """Capability used by the reconciler to set an actor's tokens.

    Both calls set the complete token set for the actor; an empty set revokes
    everything. Setting the same tokens twice is a no-op at the remote side.
    Failures raise GatewayError.
    """

    def grant_user(self, actor: Actor, tokens: frozenset[str]) -> None: ...

    def grant_group(self, actor: Actor, tokens: frozenset[str]) -> None: ...


class PermissionGateway(PermissionGrantor, Protocol):
    """Object-specific service for reading and applying permissions."""

    def read_permissions(self, tokens: Iterable[str] | None = None) -> ObservedPermissions:
        """Read current grants, optionally scoped to ``tokens``. Raises LookupFailure."""
        ...


class PermissionGatewayFactory(Protocol):
    """Factory for gateways bound to one remote object (project or space key)."""

    def __call__(self, object_key: str) -> PermissionGateway: ...
