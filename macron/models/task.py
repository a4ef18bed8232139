"""Task models - what the user asked for and what was created."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class TaskRequest(BaseModel):
    """A request to schedule a script at a fixed interval."""

    name: str
    interval: str
    script: str

    model_config = {
        "frozen": True,
        "extra": "forbid",
    }


class CreatedTask(BaseModel):
    """Summary of a task whose plist has been written."""

    label: str
    interval: str
    interval_seconds: int = Field(ge=0)
    script: Path
    plist_path: Path

    model_config = {"frozen": True}

    @property
    def load_command(self) -> str:
        """Command that loads the task into launchd."""
        return f"launchctl load {self.plist_path}"

    def summary(self) -> str:
        """Human-readable summary of the created task."""
        lines = [
            "Successfully created launchd task:",
            f"  Label: {self.label}",
            f"  Interval: {self.interval} ({self.interval_seconds} seconds)",
            f"  Script: {self.script}",
            f"  Plist: {self.plist_path}",
            "",
            "To load the task, run:",
            f"  {self.load_command}",
        ]
        return "\n".join(lines)
