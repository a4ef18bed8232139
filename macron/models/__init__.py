"""Data models for macron."""

from macron.models.task import CreatedTask, TaskRequest

__all__ = ["CreatedTask", "TaskRequest"]
