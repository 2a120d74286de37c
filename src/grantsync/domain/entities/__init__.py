"""Domain entities."""

from grantsync.domain.entities.actor import Actor
from grantsync.domain.entities.assignment import Assignment, AssignmentOrder
from grantsync.domain.entities.computed_assignment import (
    AssignmentResult,
    ComputedAssignment,
)
from grantsync.domain.entities.observed_permissions import (
    ObservedGrant,
    ObservedPermissions,
)

__all__ = [
    "Actor",
    "Assignment",
    "AssignmentOrder",
    "AssignmentResult",
    "ComputedAssignment",
    "ObservedGrant",
    "ObservedPermissions",
]
