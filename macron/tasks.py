"""Task creation - validate a request and write its LaunchAgent."""

from __future__ import annotations

import structlog

from macron.models.task import CreatedTask, TaskRequest
from macron.scheduling import LaunchAgentWriter
from macron.validation import interval_seconds, parse_interval, resolve_script, validate_name

logger = structlog.get_logger(__name__)


def create_task(request: TaskRequest, writer: LaunchAgentWriter | None = None) -> CreatedTask:
    """Create a launchd task that runs a script at an interval.

    Nothing is written unless the name, interval and script all validate.
    An existing plist for the same name is overwritten.

    Args:
        request: What to schedule
        writer: Writer to use (defaults to one targeting ~/Library/LaunchAgents)

    Raises:
        TaskError: If validation or writing fails
    """
    writer = writer or LaunchAgentWriter()

    name = validate_name(request.name)
    seconds = interval_seconds(parse_interval(request.interval))
    script = resolve_script(request.script)

    descriptor = writer.write(name, script, seconds)
    logger.debug("task_created", label=descriptor.label, interval_seconds=seconds)

    return CreatedTask(
        label=descriptor.label,
        interval=request.interval,
        interval_seconds=seconds,
        script=script,
        plist_path=descriptor.plist_path,
    )
