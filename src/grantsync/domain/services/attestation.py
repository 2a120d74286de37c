"""Attestation - who holds which token on an object, inverted from observed permissions."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from grantsync.domain.entities import ObservedGrant, ObservedPermissions

DEFAULT_IGNORED_TOKENS: frozenset[str] = frozenset({"atlassian-addons-project-access"})


@dataclass
class Attestation:
    """Token -> sorted actor names, for users and groups."""

    users: dict[str, list[str]] = field(default_factory=dict)
    groups: dict[str, list[str]] = field(default_factory=dict)

    def to_dict(self) -> dict[str, dict[str, list[str]]]:
        return {"users": self.users, "groups": self.groups}


def _invert(grants: Iterable[ObservedGrant], ignored: frozenset[str]) -> dict[str, list[str]]:
    holders: dict[str, set[str]] = {}
    for grant in grants:
        for token in grant.tokens:
            if token in ignored:
                continue
            holders.setdefault(token, set()).add(grant.name)
    return {token: sorted(names) for token, names in sorted(holders.items())}


def create_attestation(
    observed: ObservedPermissions,
    ignored_tokens: Iterable[str] = DEFAULT_IGNORED_TOKENS,
) -> Attestation:
    """Invert observed grants; tokens in ``ignored_tokens`` are left out."""
    ignored = frozenset(ignored_tokens)
    return Attestation(
        users=_invert(observed.users, ignored),
        groups=_invert(observed.groups, ignored),
    )
