"""Remove assignments use case - teardown of everything this service granted."""

from grantsync.application.ports import ActorDirectory, PermissionGatewayFactory
from grantsync.application.reconciliation import AssignmentReconciler
from grantsync.domain.entities import Assignment
from grantsync.domain.services import resolve_assignments
from grantsync.domain.value_objects import ActorKind


class RemoveAssignmentsUseCase:
    """Revoke tokens from observed actors that the in-state assignments declared."""

    def __init__(
        self,
        gateway_factory: PermissionGatewayFactory,
        directory: ActorDirectory,
    ) -> None:
        self._gateway_factory = gateway_factory
        self._directory = directory

    def execute(self, object_key: str, assignments: list[Assignment]) -> None:
        """Revoke on ``object_key``. Raises LookupFailure when the current state cannot be read."""
        order = resolve_assignments(assignments)
        gateway = self._gateway_factory(object_key)

        self._directory.register_usernames(*order.unique_names(ActorKind.USER))
        self._directory.register_group_names(*order.unique_names(ActorKind.GROUP))
        observed = gateway.read_permissions(order.sorted_tokens())

        AssignmentReconciler(self._directory, gateway).remove(order, observed)
