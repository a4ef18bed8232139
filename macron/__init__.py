"""macron - schedule scripts as macOS launchd tasks."""

from macron.errors import ScriptNotFoundError, TaskError, TaskIOError, TaskValidationError
from macron.models.task import CreatedTask, TaskRequest
from macron.tasks import create_task

__all__ = [
    "CreatedTask",
    "ScriptNotFoundError",
    "TaskError",
    "TaskIOError",
    "TaskRequest",
    "TaskValidationError",
    "create_task",
]

__version__ = "0.1.0"
