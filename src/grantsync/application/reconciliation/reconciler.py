"""Reconciliation driver - applies resolved assignment orders through a grantor.

Every pass walks users fully before groups, one actor at a time, and stops on
the first failing mutation. Work already done is left in place: remote side
effects are not transactional and nothing is rolled back or retried.
"""

import logging

from grantsync.application.ports import ActorDirectory, PermissionGrantor
from grantsync.domain.entities import (
    Actor,
    AssignmentOrder,
    AssignmentResult,
    ComputedAssignment,
    ObservedPermissions,
)
from grantsync.domain.exceptions import GatewayError, grant_failure, revoke_failure
from grantsync.domain.services import build_result, compute_delta
from grantsync.domain.value_objects import ActorKind

logger = logging.getLogger(__name__)

_KINDS = (ActorKind.USER, ActorKind.GROUP)


class AssignmentReconciler:
    """Drives a grantor so that remote tokens match an assignment order."""

    def __init__(self, directory: ActorDirectory, grantor: PermissionGrantor) -> None:
        self._directory = directory
        self._grantor = grantor

    def apply(self, order: AssignmentOrder) -> AssignmentResult:
        """Grant every resolvable actor its tokens; no prior state."""
        computed: dict[ActorKind, list[ComputedAssignment]] = {}
        for kind in _KINDS:
            computed[kind] = []
            mapping = order.mapping(kind)
            for name in order.unique_names(kind):
                actor = self._find(kind, name)
                if actor is None:
                    continue
                self._grant(actor, mapping[name])
                computed[kind].append(ComputedAssignment.of(name, mapping[name]))

        logger.info(
            "Applied assignments: %d users, %d groups",
            len(computed[ActorKind.USER]),
            len(computed[ActorKind.GROUP]),
        )
        return build_result(computed[ActorKind.USER], computed[ActorKind.GROUP])

    def update(
        self,
        previous: AssignmentOrder,
        planned: AssignmentOrder,
        force_update: bool = False,
    ) -> AssignmentResult:
        """Move from ``previous`` to ``planned`` issuing calls only for changed actors.

        Computed output always reflects the planned tokens, whether or not a
        call was needed. ``force_update`` re-sends tokens for unchanged actors.
        """
        computed_users = self._update_kind(ActorKind.USER, previous, planned, force_update)
        computed_groups = self._update_kind(ActorKind.GROUP, previous, planned, force_update)
        return build_result(computed_users, computed_groups)

    def remove(self, previous: AssignmentOrder, observed: ObservedPermissions) -> None:
        """Revoke tokens of observed actors that ``previous`` declared.

        Observed actors that were never declared are left untouched.
        """
        revoked = 0
        for kind in _KINDS:
            declared = previous.mapping(kind)
            for grant in observed.grants(kind):
                if grant.name not in declared:
                    continue
                self._revoke(grant.actor)
                revoked += 1
        logger.info("Removed assignments for %d actors", revoked)

    def compute(self, observed: ObservedPermissions, order: AssignmentOrder) -> AssignmentResult:
        """Report observed tokens of declared actors. Read-only."""
        computed: dict[ActorKind, list[ComputedAssignment]] = {}
        for kind in _KINDS:
            declared = order.mapping(kind)
            computed[kind] = [
                ComputedAssignment.of(grant.name, grant.tokens)
                for grant in observed.grants(kind)
                if grant.name in declared
            ]
        return build_result(computed[ActorKind.USER], computed[ActorKind.GROUP])

    def _update_kind(
        self,
        kind: ActorKind,
        previous: AssignmentOrder,
        planned: AssignmentOrder,
        force_update: bool,
    ) -> list[ComputedAssignment]:
        delta = compute_delta(previous, planned, kind)
        mapping = planned.mapping(kind)
        computed: list[ComputedAssignment] = []
        calls = 0

        for name in planned.unique_names(kind):
            actor = self._find(kind, name)
            if actor is None:
                continue
            if delta.needs_call(name, force_update):
                self._grant(actor, mapping[name])
                calls += 1
            computed.append(ComputedAssignment.of(name, mapping[name]))

        for name in delta.to_remove:
            actor = self._find(kind, name)
            if actor is None:
                continue
            self._revoke(actor)
            calls += 1

        logger.info(
            "Updated %s assignments: %d calls, %d unchanged, %d removed",
            kind,
            calls,
            len(delta.unchanged),
            len(delta.to_remove),
        )
        return computed

    def _find(self, kind: ActorKind, name: str) -> Actor | None:
        if kind is ActorKind.USER:
            actor = self._directory.find_user(name)
        else:
            actor = self._directory.find_group(name)
        if actor is None:
            logger.warning("Skipping unknown %s %r", kind, name)
        return actor

    def _grant(self, actor: Actor, tokens: frozenset[str]) -> None:
        logger.debug("Granting %s %r: %s", actor.kind, actor.name, sorted(tokens))
        try:
            self._call(actor, tokens)
        except GatewayError as e:
            raise grant_failure(actor.kind, actor.name, tokens) from e

    def _revoke(self, actor: Actor) -> None:
        logger.debug("Revoking all tokens of %s %r", actor.kind, actor.name)
        try:
            self._call(actor, frozenset())
        except GatewayError as e:
            raise revoke_failure(actor.kind, actor.name) from e

    def _call(self, actor: Actor, tokens: frozenset[str]) -> None:
        if actor.kind is ActorKind.USER:
            self._grantor.grant_user(actor, tokens)
        else:
            self._grantor.grant_group(actor, tokens)
