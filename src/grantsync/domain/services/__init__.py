"""Domain services - pure resolution, delta and ordering logic."""

from grantsync.domain.services.assignment_delta import (
    AssignmentDelta,
    compute_delta,
    removed_names,
)
from grantsync.domain.services.assignment_resolver import resolve_assignments
from grantsync.domain.services.attestation import (
    DEFAULT_IGNORED_TOKENS,
    Attestation,
    create_attestation,
)
from grantsync.domain.services.sorting import build_result, by_name, sorted_by_name

__all__ = [
    "AssignmentDelta",
    "Attestation",
    "DEFAULT_IGNORED_TOKENS",
    "build_result",
    "by_name",
    "compute_delta",
    "create_attestation",
    "removed_names",
    "resolve_assignments",
    "sorted_by_name",
]
