"""Exceptions raised while creating launchd tasks."""

from __future__ import annotations

from pathlib import Path


class TaskError(Exception):
    """Base exception for task creation errors."""

    pass


class TaskValidationError(TaskError):
    """User input could not be turned into a task."""

    pass


class ScriptNotFoundError(TaskError):
    """Script to schedule does not exist or is not a file."""

    def __init__(self, path: Path, reason: str = "script file does not exist"):
        self.path = path
        super().__init__(f"{reason}: {path}")


class TaskIOError(TaskError):
    """Filesystem access failed while creating a task."""

    pass
