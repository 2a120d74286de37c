"""Compute assignments use case - read-only drift check."""

from grantsync.application.ports import ActorDirectory, PermissionGatewayFactory
from grantsync.application.reconciliation import AssignmentReconciler
from grantsync.domain.entities import Assignment, AssignmentResult
from grantsync.domain.services import resolve_assignments
from grantsync.domain.value_objects import ActorKind


class ComputeAssignmentsUseCase:
    """Report what declared actors actually hold on an object, without mutating it."""

    def __init__(
        self,
        gateway_factory: PermissionGatewayFactory,
        directory: ActorDirectory,
    ) -> None:
        self._gateway_factory = gateway_factory
        self._directory = directory

    def execute(self, object_key: str, assignments: list[Assignment]) -> AssignmentResult:
        """Read observed permissions scoped to the declared tokens. Raises LookupFailure.

        Declared names are registered first so observed grants, which the
        remote side keys by account id, carry the names the order uses.
        """
        order = resolve_assignments(assignments)
        gateway = self._gateway_factory(object_key)

        self._directory.register_usernames(*order.unique_names(ActorKind.USER))
        self._directory.register_group_names(*order.unique_names(ActorKind.GROUP))
        observed = gateway.read_permissions(order.sorted_tokens())

        return AssignmentReconciler(self._directory, gateway).compute(observed, order)
