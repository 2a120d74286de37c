"""Apply assignments use case - first grant on an object with no prior state."""

import logging

from grantsync.application.ports import ActorDirectory, PermissionGatewayFactory
from grantsync.application.reconciliation import AssignmentReconciler, warm_up
from grantsync.domain.entities import Assignment, AssignmentResult
from grantsync.domain.services import resolve_assignments

logger = logging.getLogger(__name__)


class ApplyAssignmentsUseCase:
    """Grant declared tokens to every resolvable actor on an object."""

    def __init__(
        self,
        gateway_factory: PermissionGatewayFactory,
        directory: ActorDirectory,
    ) -> None:
        self._gateway_factory = gateway_factory
        self._directory = directory

    def execute(self, object_key: str, assignments: list[Assignment]) -> AssignmentResult:
        """Resolve ``assignments`` and grant them on ``object_key``."""
        order = resolve_assignments(assignments)
        logger.info("Applying %d assignments to %s", len(assignments), object_key)

        gateway = self._gateway_factory(object_key)
        warm_up(gateway, self._directory, order)
        return AssignmentReconciler(self._directory, gateway).apply(order)
