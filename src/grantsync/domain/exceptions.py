"""Domain exceptions."""

from collections.abc import Iterable

from grantsync.domain.value_objects import ActorKind


class GrantSyncError(Exception):
    """Base exception for grantsync."""

    pass


class ValidationError(GrantSyncError):
    """Validation failed for input data."""

    pass


class GatewayError(GrantSyncError):
    """A remote permission or directory call failed."""

    pass


class LookupFailure(GrantSyncError):
    """Directory or gateway read failed; fatal to the current pass."""

    pass


class NotFound(LookupFailure):
    """Requested remote object (project or space) was not found."""

    pass


class ReconciliationError(GrantSyncError):
    """A mutating call failed for one actor during a reconciliation pass."""

    title = "Failed to reconcile permissions"

    def __init__(self, actor_kind: ActorKind, name: str, tokens: Iterable[str]) -> None:
        self.actor_kind = actor_kind
        self.name = name
        self.tokens = tuple(sorted(tokens))
        super().__init__(f"{self.title}: {actor_kind} {name!r} -> {list(self.tokens)}")


class GrantFailure(ReconciliationError):
    """Applying planned tokens to an actor failed."""

    title = "Failed to update permissions"


class RevokeFailure(ReconciliationError):
    """Clearing tokens of a removed actor failed."""

    title = "Failed to remove permissions"


class FailedToUpdateUserPermissions(GrantFailure):
    title = "Failed to update user permissions"


class FailedToUpdateGroupPermissions(GrantFailure):
    title = "Failed to update group permissions"


class FailedToRemoveUserPermissions(RevokeFailure):
    title = "Failed to remove user permissions"


class FailedToRemoveGroupPermissions(RevokeFailure):
    title = "Failed to remove group permissions"


def grant_failure(actor_kind: ActorKind, name: str, tokens: Iterable[str]) -> GrantFailure:
    """Build the kind-specific grant failure."""
    if actor_kind is ActorKind.USER:
        return FailedToUpdateUserPermissions(actor_kind, name, tokens)
    return FailedToUpdateGroupPermissions(actor_kind, name, tokens)


def revoke_failure(actor_kind: ActorKind, name: str) -> RevokeFailure:
    """Build the kind-specific revoke failure."""
    if actor_kind is ActorKind.USER:
        return FailedToRemoveUserPermissions(actor_kind, name, ())
    return FailedToRemoveGroupPermissions(actor_kind, name, ())
