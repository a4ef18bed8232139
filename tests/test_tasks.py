"""Tests for task creation."""

from __future__ import annotations

from pathlib import Path
from tempfile import TemporaryDirectory

import pytest
from pydantic import ValidationError

from macron.errors import ScriptNotFoundError, TaskValidationError
from macron.models.task import CreatedTask, TaskRequest
from macron.scheduling.launchd import LaunchAgentWriter
from macron.tasks import create_task


@pytest.fixture
def workspace():
    """A script to schedule and an empty LaunchAgents directory."""
    with TemporaryDirectory() as tmpdir:
        script = Path(tmpdir) / "backup.sh"
        script.write_text("#!/bin/bash\necho backup")
        yield script, Path(tmpdir) / "LaunchAgents"


class TestTaskRequest:
    """Tests for TaskRequest model."""

    def test_fields(self) -> None:
        """Test constructing a request."""
        request = TaskRequest(name="backup", interval="1h", script="backup.sh")
        assert request.name == "backup"
        assert request.interval == "1h"

    def test_extra_fields_forbidden(self) -> None:
        """Test unknown fields are rejected."""
        with pytest.raises(ValidationError):
            TaskRequest(name="backup", interval="1h", script="backup.sh", hour=9)


class TestCreatedTask:
    """Tests for CreatedTask model."""

    def test_summary(self) -> None:
        """Test the summary shown after creation."""
        task = CreatedTask(
            label="com.macron.backup",
            interval="1h",
            interval_seconds=3600,
            script=Path("/scripts/backup.sh"),
            plist_path=Path("/agents/com.macron.backup.plist"),
        )

        assert task.load_command == "launchctl load /agents/com.macron.backup.plist"
        assert task.summary().splitlines() == [
            "Successfully created launchd task:",
            "  Label: com.macron.backup",
            "  Interval: 1h (3600 seconds)",
            "  Script: /scripts/backup.sh",
            "  Plist: /agents/com.macron.backup.plist",
            "",
            "To load the task, run:",
            "  launchctl load /agents/com.macron.backup.plist",
        ]


class TestCreateTask:
    """Tests for create_task."""

    def test_creates_plist(self, workspace) -> None:
        """Test a valid request writes the plist."""
        script, agents_dir = workspace
        writer = LaunchAgentWriter(launch_agents_dir=agents_dir)

        task = create_task(TaskRequest(name="backup", interval="90m", script=str(script)), writer)

        assert task.label == "com.macron.backup"
        assert task.interval == "90m"
        assert task.interval_seconds == 5400
        assert task.script == script
        assert task.plist_path == agents_dir / "com.macron.backup.plist"

        content = task.plist_path.read_text()
        assert f"<string>{script}</string>" in content
        assert "<integer>5400</integer>" in content

    def test_rerun_updates_task(self, workspace) -> None:
        """Test creating the same task again keeps only the latest interval."""
        script, agents_dir = workspace
        writer = LaunchAgentWriter(launch_agents_dir=agents_dir)

        create_task(TaskRequest(name="backup", interval="1h", script=str(script)), writer)
        task = create_task(TaskRequest(name="backup", interval="30m", script=str(script)), writer)

        content = task.plist_path.read_text()
        assert "<integer>1800</integer>" in content
        assert "<integer>3600</integer>" not in content

    def test_invalid_interval_writes_nothing(self, workspace) -> None:
        """Test a bad interval fails before anything is written."""
        script, agents_dir = workspace
        writer = LaunchAgentWriter(launch_agents_dir=agents_dir)

        with pytest.raises(TaskValidationError, match="invalid interval"):
            create_task(TaskRequest(name="backup", interval="abc", script=str(script)), writer)

        assert not agents_dir.exists()

    def test_missing_script_writes_nothing(self, workspace) -> None:
        """Test a missing script fails before anything is written."""
        script, agents_dir = workspace
        writer = LaunchAgentWriter(launch_agents_dir=agents_dir)

        with pytest.raises(ScriptNotFoundError):
            create_task(
                TaskRequest(name="backup", interval="1h", script=str(script.with_name("gone.sh"))),
                writer,
            )

        assert not agents_dir.exists()

    def test_default_writer_uses_home(self, workspace, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the default writer targets ~/Library/LaunchAgents."""
        script, _ = workspace
        home = script.parent / "home"
        monkeypatch.setenv("HOME", str(home))

        task = create_task(TaskRequest(name="backup", interval="1h", script=str(script)))

        assert task.plist_path == home / "Library" / "LaunchAgents" / "com.macron.backup.plist"
        assert task.plist_path.exists()

    def test_nul_byte_rejected(self, workspace) -> None:
        """Test NUL bytes in the name or script are validation errors."""
        script, agents_dir = workspace
        writer = LaunchAgentWriter(launch_agents_dir=agents_dir)

        for request in [
            TaskRequest(name="back\x00up", interval="1h", script=str(script)),
            TaskRequest(name="backup", interval="1h", script=f"{script}\x00"),
        ]:
            with pytest.raises(TaskValidationError, match="NUL"):
                create_task(request, writer)

        assert not agents_dir.exists()
