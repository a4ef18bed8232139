"""Input validation for task creation."""

from __future__ import annotations

import os
import stat
from datetime import timedelta
from pathlib import Path

import structlog

from macron.duration import parse_duration
from macron.errors import ScriptNotFoundError, TaskIOError, TaskValidationError

logger = structlog.get_logger(__name__)


def parse_interval(text: str) -> timedelta:
    """Parse the interval a task runs at."""
    try:
        duration = parse_duration(text)
    except ValueError as e:
        raise TaskValidationError(
            f"invalid interval '{text}': must be a valid duration (e.g., 1h, 30m, 1h30m): {e}"
        ) from e

    logger.debug("interval_parsed", interval=text, seconds=duration.total_seconds())
    return duration


def interval_seconds(duration: timedelta) -> int:
    """Convert an interval to whole seconds for StartInterval.

    Fractions of a second are truncated, so sub-second intervals become 0.
    Negative intervals are rejected.
    """
    if duration < timedelta(0):
        raise TaskValidationError(
            f"invalid interval: must not be negative (got {duration.total_seconds():g}s)"
        )
    return int(duration.total_seconds())


def validate_name(name: str) -> str:
    """Check a task name can be used as a label suffix and file name."""
    if not name:
        raise TaskValidationError("task name must not be empty")
    if "\x00" in name:
        raise TaskValidationError("invalid task name: must not contain a NUL byte")
    if os.sep in name or (os.altsep and os.altsep in name):
        raise TaskValidationError(
            f"invalid task name '{name}': must not contain a path separator"
        )
    return name


def resolve_script(script_path: str | Path) -> Path:
    """Validate the script exists and return its absolute path.

    Relative paths resolve against the current working directory. Symlinks
    are left as given.

    Raises:
        ScriptNotFoundError: If nothing exists at the path, or it is a directory
        TaskValidationError: If the path contains a NUL byte
        TaskIOError: If the path could not be checked
    """
    if "\x00" in str(script_path):
        raise TaskValidationError("invalid script path: must not contain a NUL byte")

    try:
        abs_script = Path(os.path.abspath(script_path))
    except OSError as e:
        raise TaskIOError(f"error resolving script path: {e}") from e

    try:
        mode = abs_script.stat().st_mode
    except FileNotFoundError:
        raise ScriptNotFoundError(abs_script) from None
    except OSError as e:
        raise TaskIOError(f"error checking script file: {e}") from e

    if stat.S_ISDIR(mode):
        raise ScriptNotFoundError(abs_script, reason="script path is not a file")

    logger.debug("script_resolved", script=str(abs_script))
    return abs_script
