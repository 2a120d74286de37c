"""Pytest fixtures for grantsync tests."""

from __future__ import annotations

from collections.abc import Iterable

import httpx
import pytest

from grantsync.domain.entities import Actor, ObservedGrant, ObservedPermissions
from grantsync.domain.exceptions import GatewayError, LookupFailure
from grantsync.domain.value_objects import ActorKind


# --- Fake ports ---


class FakeActorDirectory:
    """In-memory directory. Only names passed to the constructor resolve."""

    def __init__(self, users: Iterable[str] = (), groups: Iterable[str] = ()) -> None:
        self._users = {n: Actor(ActorKind.USER, n, f"acc-{n}") for n in users}
        self._groups = {n: Actor(ActorKind.GROUP, n, f"grp-{n}") for n in groups}
        self.registered_users: list[str] = []
        self.registered_groups: list[str] = []
        self.lookups: list[tuple[ActorKind, str]] = []

    def find_user(self, name: str) -> Actor | None:
        self.lookups.append((ActorKind.USER, name))
        return self._users.get(name)

    def find_group(self, name: str) -> Actor | None:
        self.lookups.append((ActorKind.GROUP, name))
        return self._groups.get(name)

    def register_usernames(self, *names: str) -> None:
        self.registered_users.extend(names)

    def register_group_names(self, *names: str) -> None:
        self.registered_groups.extend(names)


class FakePermissionGateway:
    """Records grant calls and keeps remote state in memory.

    ``fail_on`` names an actor whose grant call raises GatewayError.
    ``fail_read`` makes every read raise LookupFailure.
    """

    def __init__(
        self,
        users: dict[str, Iterable[str]] | None = None,
        groups: dict[str, Iterable[str]] | None = None,
        fail_on: str | None = None,
        fail_read: bool = False,
    ) -> None:
        self.users = {n: frozenset(t) for n, t in (users or {}).items()}
        self.groups = {n: frozenset(t) for n, t in (groups or {}).items()}
        self.fail_on = fail_on
        self.fail_read = fail_read
        self.calls: list[tuple[ActorKind, str, frozenset[str]]] = []
        self.reads: list[list[str] | None] = []

    def read_permissions(self, tokens: Iterable[str] | None = None) -> ObservedPermissions:
        self.reads.append(None if tokens is None else list(tokens))
        if self.fail_read:
            raise LookupFailure("remote unavailable")
        scope = None if tokens is None else set(tokens)

        def grants(kind: ActorKind, held: dict[str, frozenset[str]]) -> list[ObservedGrant]:
            result = []
            for name, granted in sorted(held.items()):
                scoped = granted if scope is None else granted & scope
                if scoped:
                    result.append(ObservedGrant(Actor(kind, name, f"id-{name}"), scoped))
            return result

        return ObservedPermissions(
            users=grants(ActorKind.USER, self.users),
            groups=grants(ActorKind.GROUP, self.groups),
        )

    def grant_user(self, actor: Actor, tokens: frozenset[str]) -> None:
        self._record(ActorKind.USER, actor, tokens, self.users)

    def grant_group(self, actor: Actor, tokens: frozenset[str]) -> None:
        self._record(ActorKind.GROUP, actor, tokens, self.groups)

    def _record(self, kind, actor, tokens, held) -> None:
        self.calls.append((kind, actor.name, frozenset(tokens)))
        if actor.name == self.fail_on:
            raise GatewayError(f"remote rejected {actor.name}")
        if tokens:
            held[actor.name] = frozenset(tokens)
        else:
            held.pop(actor.name, None)


class FakeGatewayFactory:
    """Hands out one shared gateway and remembers requested object keys."""

    def __init__(self, gateway: FakePermissionGateway) -> None:
        self.gateway = gateway
        self.keys: list[str] = []

    def __call__(self, object_key: str) -> FakePermissionGateway:
        self.keys.append(object_key)
        return self.gateway


class FakeAtlassian:
    """Routes (method, path) to canned JSON for httpx.MockTransport and records requests."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], tuple[int, object]] = {}
        self.requests: list[httpx.Request] = []

    def on(self, method: str, path: str, body: object = None, status: int = 200) -> None:
        self.routes[(method, path)] = (status, body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, body = self.routes.get(
            (request.method, request.url.path), (404, {"errorMessages": ["not found"]})
        )
        if body is None:
            return httpx.Response(status)
        return httpx.Response(status, json=body)

    def sent(self, method: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method]


# --- Fixtures ---


@pytest.fixture
def directory() -> FakeActorDirectory:
    """Directory resolving alice, bob and the eng/ops groups."""
    return FakeActorDirectory(users=["alice", "bob"], groups=["eng", "ops"])


@pytest.fixture
def gateway() -> FakePermissionGateway:
    return FakePermissionGateway()


@pytest.fixture
def gateway_factory(gateway: FakePermissionGateway) -> FakeGatewayFactory:
    return FakeGatewayFactory(gateway)


@pytest.fixture
def remote() -> FakeAtlassian:
    """In-memory Atlassian site; register responses with ``remote.on``."""
    return FakeAtlassian()
