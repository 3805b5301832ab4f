"""Background scheduling helpers for the infrastructure layer."""

from .manager import ReconciliationScheduler, get_reconciliation_scheduler

__all__ = ["ReconciliationScheduler", "get_reconciliation_scheduler"]
