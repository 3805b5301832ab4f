"""ORM models used by the application infrastructure."""

from .alert import AlertModel
from .alert_emission import AlertEmissionModel
from .alert_settings import AlertSettingsModel
from .payment import PaymentModel
from .project import ProjectModel
from .task import TaskModel

__all__ = [
    "AlertModel",
    "AlertEmissionModel",
    "AlertSettingsModel",
    "PaymentModel",
    "ProjectModel",
    "TaskModel",
]
