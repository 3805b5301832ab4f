"""Repository implementations for infrastructure layer."""

from .alert_repository import AlertRepository
from .alert_settings_repository import AlertSettingsRepository
from .tracked_entity_repositories import (
    PaymentRepository,
    ProjectRepository,
    TaskRepository,
)

__all__ = [
    "AlertRepository",
    "AlertSettingsRepository",
    "PaymentRepository",
    "ProjectRepository",
    "TaskRepository",
]
