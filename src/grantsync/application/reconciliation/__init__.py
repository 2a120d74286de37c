"""Reconciliation engine."""

from grantsync.application.reconciliation.reconciler import AssignmentReconciler
from grantsync.application.reconciliation.warmup import warm_up

__all__ = [
    "AssignmentReconciler",
    "warm_up",
]
