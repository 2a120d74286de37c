"""Update assignments use case - move an object from its in-state to its planned assignments."""

import logging

from grantsync.application.ports import ActorDirectory, PermissionGatewayFactory
from grantsync.application.reconciliation import AssignmentReconciler, warm_up
from grantsync.domain.entities import Assignment, AssignmentResult
from grantsync.domain.services import resolve_assignments

logger = logging.getLogger(__name__)


class UpdateAssignmentsUseCase:
    """Apply only what changed between two assignment sets."""

    def __init__(
        self,
        gateway_factory: PermissionGatewayFactory,
        directory: ActorDirectory,
    ) -> None:
        self._gateway_factory = gateway_factory
        self._directory = directory

    def execute(
        self,
        object_key: str,
        previous: list[Assignment],
        planned: list[Assignment],
        *,
        previous_version: str | None = None,
        planned_version: str | None = None,
        force_update: bool = False,
    ) -> AssignmentResult:
        """Reconcile ``object_key`` from ``previous`` to ``planned``.

        A changed assignment version forces every resolvable actor to be
        re-sent, the same as ``force_update``.
        """
        if previous_version != planned_version:
            logger.info(
                "Assignment version changed on %s (%s -> %s), forcing update",
                object_key,
                previous_version,
                planned_version,
            )
            force_update = True

        previous_order = resolve_assignments(previous)
        planned_order = resolve_assignments(planned)

        gateway = self._gateway_factory(object_key)
        warm_up(gateway, self._directory, previous_order, planned_order)
        return AssignmentReconciler(self._directory, gateway).update(
            previous_order, planned_order, force_update=force_update
        )
