"""Deterministic ordering of computed output."""

from collections.abc import Iterable

from grantsync.domain.entities import AssignmentResult, ComputedAssignment


def by_name(assignment: ComputedAssignment) -> str:
    return assignment.name


def sorted_by_name(assignments: Iterable[ComputedAssignment]) -> list[ComputedAssignment]:
    return sorted(assignments, key=by_name)


def build_result(
    computed_users: Iterable[ComputedAssignment],
    computed_groups: Iterable[ComputedAssignment],
) -> AssignmentResult:
    """Wrap computed lists in a result, both sorted by name ascending."""
    return AssignmentResult(
        computed_users=sorted_by_name(computed_users),
        computed_groups=sorted_by_name(computed_groups),
    )
