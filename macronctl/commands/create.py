"""Task creation command."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from macron.errors import TaskError
from macron.models.task import TaskRequest
from macron.tasks import create_task


def create(
    name: Annotated[str, typer.Option("--name", "-n", help="Name of the launchd task")],
    interval: Annotated[
        str, typer.Option("--interval", "-i", help="Interval for the task execution (e.g., 1h, 30m, 1h30m)")
    ],
    script: Annotated[str, typer.Option("--script", "-s", help="Path to the script to execute")],
) -> None:
    """Create a new launchd cron task with NAME to run SCRIPT over an INTERVAL."""
    console = Console(soft_wrap=True, emoji=False)

    request = TaskRequest(name=name, interval=interval, script=script)
    try:
        task = create_task(request)
    except TaskError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(1)

    console.print(escape(task.summary()), highlight=False)
