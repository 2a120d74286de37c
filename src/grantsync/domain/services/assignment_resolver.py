"""Collapse priority-ordered assignment rules into one actor -> tokens mapping."""

from collections.abc import Iterable

from grantsync.domain.entities import Assignment, AssignmentOrder


def _by_priority(assignment: Assignment) -> int:
    return assignment.priority


def resolve_assignments(assignments: Iterable[Assignment]) -> AssignmentOrder:
    """Resolve assignments in ascending priority; later writes override earlier ones.

    Assignments sharing a priority are visited in input order, so the last
    declared one wins for the actors they have in common. Never raises.
    """
    users: dict[str, frozenset[str]] = {}
    groups: dict[str, frozenset[str]] = {}
    user_names: list[str] = []
    group_names: list[str] = []
    tokens: set[str] = set()

    for assignment in sorted(assignments, key=_by_priority):
        granted = frozenset(assignment.tokens)
        tokens.update(granted)
        for user in assignment.users:
            users[user] = granted
            user_names.append(user)
        for group in assignment.groups:
            groups[group] = granted
            group_names.append(group)

    return AssignmentOrder(
        users=users,
        user_names=user_names,
        groups=groups,
        group_names=group_names,
        tokens=frozenset(tokens),
    )
