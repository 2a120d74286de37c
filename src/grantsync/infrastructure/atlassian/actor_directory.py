"""Actor directory backed by the Atlassian user and group APIs."""

import logging
import time

from grantsync.domain.entities import Actor
from grantsync.domain.exceptions import LookupFailure
from grantsync.domain.value_objects import ActorKind
from grantsync.infrastructure.atlassian.client import AtlassianAPIError, AtlassianClient

logger = logging.getLogger(__name__)


class AtlassianActorDirectory:
    """Resolves declared names to Atlassian accounts and groups, with caching.

    Users match on account id, email or display name; groups match on name.
    Hits and misses are cached for ``cache_ttl`` seconds.
    """

    def __init__(self, client: AtlassianClient, cache_ttl: float = 300.0) -> None:
        self._client = client
        self._cache_ttl = cache_ttl
        # name -> (expires at, actor or None)
        self._users: dict[str, tuple[float, Actor | None]] = {}
        self._groups: dict[str, tuple[float, Actor | None]] = {}
        self._names_by_account: dict[str, str] = {}

    def find_user(self, name: str) -> Actor | None:
        return self._cached(self._users, name, self._lookup_user)

    def find_group(self, name: str) -> Actor | None:
        return self._cached(self._groups, name, self._lookup_group)

    def register_usernames(self, *names: str) -> None:
        for name in names:
            try:
                self.find_user(name)
            except LookupFailure as e:
                logger.warning("Could not prefetch user %r: %s", name, e)

    def register_group_names(self, *names: str) -> None:
        for name in names:
            try:
                self.find_group(name)
            except LookupFailure as e:
                logger.warning("Could not prefetch group %r: %s", name, e)

    def name_for_account(self, account_id: str) -> str | None:
        """Declared name previously resolved to ``account_id``, if any."""
        return self._names_by_account.get(account_id)

    def _cached(self, cache, name, lookup) -> Actor | None:
        now = time.monotonic()
        entry = cache.get(name)
        if entry is None or entry[0] <= now:
            entry = (now + self._cache_ttl, lookup(name))
            cache[name] = entry
        return entry[1]

    def _lookup_user(self, name: str) -> Actor | None:
        try:
            found = self._client.get("/rest/api/3/user/search", params={"query": name})
        except AtlassianAPIError as e:
            raise LookupFailure(f"User lookup for {name!r} failed: {e}") from e

        wanted = name.casefold()
        for user in found or []:
            account_id = user.get("accountId")
            if not account_id:
                continue
            if (
                account_id == name
                or (user.get("emailAddress") or "").casefold() == wanted
                or user.get("displayName") == name
            ):
                self._names_by_account[account_id] = name
                return Actor(kind=ActorKind.USER, name=name, actor_id=account_id)
        return None

    def _lookup_group(self, name: str) -> Actor | None:
        try:
            found = self._client.get("/rest/api/3/group/bulk", params={"groupName": name})
        except AtlassianAPIError as e:
            raise LookupFailure(f"Group lookup for {name!r} failed: {e}") from e

        for group in (found or {}).get("values", []):
            if group.get("name") == name:
                return Actor(
                    kind=ActorKind.GROUP,
                    name=name,
                    actor_id=group.get("groupId") or name,
                )
        return None
