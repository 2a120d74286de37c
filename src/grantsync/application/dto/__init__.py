"""Application DTOs."""

from grantsync.application.dto.assignment_dto import (
    AssignmentInput,
    AssignmentSetInput,
    parse_assignments,
)

__all__ = [
    "AssignmentInput",
    "AssignmentSetInput",
    "parse_assignments",
]
