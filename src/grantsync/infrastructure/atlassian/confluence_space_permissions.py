"""Confluence space permission gateway - tokens are <operation>_<target> keys."""

import logging
from collections.abc import Iterable
from typing import Any

from grantsync.domain.entities import Actor, ObservedGrant, ObservedPermissions
from grantsync.domain.exceptions import GatewayError, LookupFailure, NotFound
from grantsync.domain.value_objects import SPACE_PERMISSION_KEYS, ActorKind
from grantsync.infrastructure.atlassian.actor_directory import AtlassianActorDirectory
from grantsync.infrastructure.atlassian.client import AtlassianAPIError, AtlassianClient

logger = logging.getLogger(__name__)


def permission_key(operation: dict[str, Any]) -> str:
    """``{"operation": "create", "targetType": "page"}`` -> ``"create_page"``."""
    return f"{operation['operation']}_{operation['targetType']}"


def split_permission_key(token: str) -> tuple[str, str]:
    """``"restrict_content_space"`` -> ``("restrict_content", "space")``."""
    operation, _, target = token.rpartition("_")
    return operation, target


class ConfluenceSpacePermissionGateway:
    """Reads and sets space permissions for one Confluence space.

    Users are keyed by account id, groups by group name.
    """

    def __init__(
        self,
        client: AtlassianClient,
        directory: AtlassianActorDirectory,
        space_key: str,
    ) -> None:
        self._client = client
        self._directory = directory
        self._space_key = space_key
        # (kind, subject) -> token -> permission id
        self._granted: dict[tuple[ActorKind, str], dict[str, int]] | None = None
        # permission ids listed under more than one subject
        self._shared_ids: set[int] = set()

    def read_permissions(self, tokens: Iterable[str] | None = None) -> ObservedPermissions:
        self._load()
        scope = None if tokens is None else set(tokens)

        observed = ObservedPermissions()
        for (kind, subject), granted in sorted(self._current().items()):
            held = frozenset(t for t in granted if scope is None or t in scope)
            if not held:
                continue
            observed.grants(kind).append(
                ObservedGrant(actor=self._observed_actor(kind, subject), tokens=held)
            )
        return observed

    def grant_user(self, actor: Actor, tokens: frozenset[str]) -> None:
        self._set_permissions(ActorKind.USER, actor.actor_id, tokens)

    def grant_group(self, actor: Actor, tokens: frozenset[str]) -> None:
        self._set_permissions(ActorKind.GROUP, actor.name, tokens)

    def _set_permissions(self, kind: ActorKind, subject: str, tokens: frozenset[str]) -> None:
        unknown = sorted(tokens - SPACE_PERMISSION_KEYS)
        if unknown:
            raise GatewayError(f"Unknown space permissions: {', '.join(unknown)}")

        granted = self._current().setdefault((kind, subject), {})
        base = f"/wiki/rest/api/space/{self._space_key}/permission"
        revoking = sorted(granted.keys() - tokens)
        shared = [t for t in revoking if granted[t] in self._shared_ids]
        if shared:
            raise GatewayError(
                f"Space permissions shared with other subjects, not revoking from "
                f"{kind} {subject}: {', '.join(shared)}"
            )

        for token in sorted(tokens.difference(granted)):
            operation, target = split_permission_key(token)
            created = self._client.post(
                base,
                {
                    "subject": {"type": str(kind), "identifier": subject},
                    "operation": {"key": operation, "target": target},
                },
            )
            granted[token] = (created or {}).get("id", 0)
            logger.debug("Granted %s to %s %s", token, kind, subject)

        for token in revoking:
            self._client.delete(f"{base}/{granted[token]}")
            del granted[token]
            logger.debug("Revoked %s from %s %s", token, kind, subject)

    def _current(self) -> dict[tuple[ActorKind, str], dict[str, int]]:
        if self._granted is None:
            self._load()
        return self._granted

    def _load(self) -> None:
        try:
            space = self._client.get(
                f"/wiki/rest/api/space/{self._space_key}",
                params={"expand": "permissions"},
            )
        except AtlassianAPIError as e:
            if e.not_found:
                raise NotFound(f"Space {self._space_key} not found") from e
            raise LookupFailure(f"Failed to read space permissions: {e}") from e

        granted: dict[tuple[ActorKind, str], dict[str, int]] = {}
        holders: dict[int, set[tuple[ActorKind, str]]] = {}
        for permission in (space or {}).get("permissions", []):
            subjects = permission.get("subjects") or {}
            token = permission_key(permission["operation"])
            keys = [
                (ActorKind.USER, user["accountId"])
                for user in (subjects.get("user") or {}).get("results", [])
            ] + [
                (ActorKind.GROUP, group["name"])
                for group in (subjects.get("group") or {}).get("results", [])
            ]
            for key in keys:
                granted.setdefault(key, {})[token] = permission["id"]
            holders.setdefault(permission["id"], set()).update(keys)
        self._granted = granted
        self._shared_ids = {pid for pid, keys in holders.items() if len(keys) > 1}

    def _observed_actor(self, kind: ActorKind, subject: str) -> Actor:
        if kind is ActorKind.USER:
            return Actor(
                kind=kind,
                name=self._directory.name_for_account(subject) or subject,
                actor_id=subject,
            )
        return Actor(kind=kind, name=subject, actor_id=subject)
