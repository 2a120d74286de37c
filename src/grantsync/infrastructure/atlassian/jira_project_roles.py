"""Jira project role gateway - tokens are project role names."""

import logging
from collections.abc import Iterable

from grantsync.domain.entities import Actor, ObservedGrant, ObservedPermissions
from grantsync.domain.exceptions import GatewayError, LookupFailure, NotFound
from grantsync.domain.value_objects import ActorKind
from grantsync.infrastructure.atlassian.actor_directory import AtlassianActorDirectory
from grantsync.infrastructure.atlassian.client import AtlassianAPIError, AtlassianClient

logger = logging.getLogger(__name__)


class JiraProjectRoleGateway:
    """Reads and sets project role membership for one Jira project.

    Role membership is cached after the first read of each role and kept in
    sync with every successful add/remove call.
    """

    def __init__(
        self,
        client: AtlassianClient,
        directory: AtlassianActorDirectory,
        project_key: str,
    ) -> None:
        self._client = client
        self._directory = directory
        self._project_key = project_key
        self._role_ids: dict[str, str] | None = None
        # role name -> actor kind -> actor ids
        self._members: dict[str, dict[ActorKind, set[str]]] = {}
        self._group_names: dict[str, str] = {}

    @property
    def _base(self) -> str:
        return f"/rest/api/3/project/{self._project_key}/role"

    def read_permissions(self, tokens: Iterable[str] | None = None) -> ObservedPermissions:
        role_ids = self._roles()
        roles = sorted(role_ids) if tokens is None else sorted(set(tokens).intersection(role_ids))
        for role in roles:
            self._load_role(role)

        held: dict[ActorKind, dict[str, set[str]]] = {ActorKind.USER: {}, ActorKind.GROUP: {}}
        for role in roles:
            for kind, actor_ids in self._members[role].items():
                for actor_id in actor_ids:
                    held[kind].setdefault(actor_id, set()).add(role)

        return ObservedPermissions(
            users=[
                ObservedGrant(actor=self._observed_actor(ActorKind.USER, a), tokens=frozenset(r))
                for a, r in sorted(held[ActorKind.USER].items())
            ],
            groups=[
                ObservedGrant(actor=self._observed_actor(ActorKind.GROUP, a), tokens=frozenset(r))
                for a, r in sorted(held[ActorKind.GROUP].items())
            ],
        )

    def grant_user(self, actor: Actor, tokens: frozenset[str]) -> None:
        self._set_roles(ActorKind.USER, actor.actor_id, tokens)

    def grant_group(self, actor: Actor, tokens: frozenset[str]) -> None:
        self._group_names.setdefault(actor.actor_id, actor.name)
        self._set_roles(ActorKind.GROUP, actor.actor_id, tokens)

    def _set_roles(self, kind: ActorKind, actor_id: str, tokens: frozenset[str]) -> None:
        role_ids = self._roles()
        unknown = sorted(tokens.difference(role_ids))
        if unknown:
            raise GatewayError(
                f"Unknown roles in project {self._project_key}: {', '.join(unknown)}"
            )

        param = "user" if kind is ActorKind.USER else "groupId"
        for role, role_id in sorted(role_ids.items()):
            members = self._members_of(role)[kind]
            if role in tokens and actor_id not in members:
                self._client.post(f"{self._base}/{role_id}", {param: [actor_id]})
                members.add(actor_id)
                logger.debug("Added %s %s to role %s", kind, actor_id, role)
            elif role not in tokens and actor_id in members:
                self._client.delete(f"{self._base}/{role_id}", params={param: actor_id})
                members.discard(actor_id)
                logger.debug("Removed %s %s from role %s", kind, actor_id, role)

    def _roles(self) -> dict[str, str]:
        if self._role_ids is None:
            try:
                found = self._client.get(self._base)
            except AtlassianAPIError as e:
                if e.not_found:
                    raise NotFound(f"Project {self._project_key} not found") from e
                raise LookupFailure(f"Failed to read project roles: {e}") from e
            # {"Administrators": "https://.../project/KEY/role/10002", ...}
            self._role_ids = {
                name: url.rstrip("/").rsplit("/", 1)[-1] for name, url in (found or {}).items()
            }
        return self._role_ids

    def _members_of(self, role: str) -> dict[ActorKind, set[str]]:
        if role not in self._members:
            self._load_role(role)
        return self._members[role]

    def _load_role(self, role: str) -> None:
        role_id = self._roles()[role]
        try:
            found = self._client.get(f"{self._base}/{role_id}")
        except AtlassianAPIError as e:
            raise LookupFailure(f"Failed to read project role {role!r}: {e}") from e

        members: dict[ActorKind, set[str]] = {ActorKind.USER: set(), ActorKind.GROUP: set()}
        for actor in (found or {}).get("actors", []):
            if actor.get("actorUser"):
                members[ActorKind.USER].add(actor["actorUser"]["accountId"])
            elif actor.get("actorGroup"):
                group = actor["actorGroup"]
                group_id = group.get("groupId") or group["name"]
                members[ActorKind.GROUP].add(group_id)
                self._group_names[group_id] = group.get("name") or actor.get("displayName", group_id)
        self._members[role] = members

    def _observed_actor(self, kind: ActorKind, actor_id: str) -> Actor:
        if kind is ActorKind.USER:
            name = self._directory.name_for_account(actor_id) or actor_id
        else:
            name = self._group_names.get(actor_id, actor_id)
        return Actor(kind=kind, name=name, actor_id=actor_id)
