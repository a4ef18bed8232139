"""Scheduling infrastructure for launchd tasks."""

from macron.scheduling.launchd import LaunchAgentWriter, TaskDescriptor, render_plist

__all__ = ["LaunchAgentWriter", "TaskDescriptor", "render_plist"]
