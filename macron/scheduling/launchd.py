"""LaunchAgent plist generation for macOS scheduling."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import structlog

from macron.errors import TaskIOError

logger = structlog.get_logger(__name__)

LABEL_PREFIX = "com.macron"
LAUNCH_AGENTS_DIR_MODE = 0o755
PLIST_FILE_MODE = 0o644

_PLIST_TEMPLATE = """\
<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" "http://www.apple.com/DTDs/PropertyList-1.0.dtd">
<plist version="1.0">
<dict>
	<key>Label</key>
	<string>{label}</string>
	<key>ProgramArguments</key>
	<array>
		<string>{script_path}</string>
	</array>
	<key>StartInterval</key>
	<integer>{interval_seconds}</integer>
	<key>RunAtLoad</key>
	<true/>
	<key>StandardOutPath</key>
	<string>/tmp/{label}.stdout</string>
	<key>StandardErrorPath</key>
	<string>/tmp/{label}.stderr</string>
</dict>
</plist>"""


@dataclass
class TaskDescriptor:
    """A plist written for a task."""

    label: str
    plist_path: Path
    content: str


def render_plist(label: str, script_path: str | Path, interval_seconds: int) -> str:
    """Render the plist XML for a launchd task.

    Values are substituted as-is, without XML escaping.
    """
    return _PLIST_TEMPLATE.format(
        label=label,
        script_path=script_path,
        interval_seconds=interval_seconds,
    )


def default_launch_agents_dir() -> Path:
    """Get the per-user LaunchAgents directory."""
    try:
        home = Path.home()
    except (RuntimeError, KeyError, OSError) as e:
        raise TaskIOError(f"error getting home directory: {e}") from e
    return home / "Library" / "LaunchAgents"


class LaunchAgentWriter:
    """Writes LaunchAgent plists for interval-scheduled scripts."""

    LABEL_PREFIX = LABEL_PREFIX

    def __init__(self, launch_agents_dir: Path | None = None):
        """Initialize the writer.

        Args:
            launch_agents_dir: Directory for LaunchAgent plists (default: ~/Library/LaunchAgents,
                resolved when writing)
        """
        self.launch_agents_dir = launch_agents_dir

    def label(self, task_name: str) -> str:
        """Get the LaunchAgent label for a task."""
        return f"{self.LABEL_PREFIX}.{task_name}"

    def plist_name(self, task_name: str) -> str:
        """Get the plist filename for a task."""
        return f"{self.label(task_name)}.plist"

    def plist_path(self, task_name: str) -> Path:
        """Get the full path to a task's plist file."""
        return self._agents_dir() / self.plist_name(task_name)

    def _agents_dir(self) -> Path:
        if self.launch_agents_dir is None:
            return default_launch_agents_dir()
        return self.launch_agents_dir

    def write(self, task_name: str, script_path: Path, interval_seconds: int) -> TaskDescriptor:
        """Write the plist for a task, replacing any previous version.

        Args:
            task_name: Name of the task
            script_path: Absolute path of the script to run
            interval_seconds: Seconds between runs

        Returns:
            The written descriptor

        Raises:
            TaskIOError: If the home directory, LaunchAgents directory or plist
                file could not be used
        """
        agents_dir = self._agents_dir()
        try:
            agents_dir.mkdir(mode=LAUNCH_AGENTS_DIR_MODE, parents=True, exist_ok=True)
        except (OSError, ValueError) as e:
            raise TaskIOError(f"error creating LaunchAgents directory: {e}") from e
        logger.debug("launch_agents_dir_ready", path=str(agents_dir))

        label = self.label(task_name)
        plist_path = agents_dir / self.plist_name(task_name)
        content = render_plist(label, script_path, interval_seconds)

        try:
            plist_path.write_text(content, encoding="utf-8")
            plist_path.chmod(PLIST_FILE_MODE)
        except (OSError, ValueError) as e:
            raise TaskIOError(f"error writing plist file: {e}") from e

        logger.info("plist_written", label=label, path=str(plist_path))
        return TaskDescriptor(label=label, plist_path=plist_path.absolute(), content=content)
