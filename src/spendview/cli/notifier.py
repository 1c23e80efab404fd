"""Terminal rendering of notifications."""

from typing import Optional

import click

from spendview.domain.entities import Notification, NotificationLevel, NotificationState
from spendview.domain.notifications import LEVEL_TITLES, NotificationManager
from spendview.domain.scheduling import ManualScheduler, Scheduler

LEVEL_COLORS = {
    NotificationLevel.SUCCESS: "green",
    NotificationLevel.ERROR: "red",
    NotificationLevel.WARNING: "yellow",
    NotificationLevel.INFO: "blue",
}


def render_notification(notification: Notification, state: NotificationState) -> None:
    """Print a notification when it becomes visible. Errors go to stderr."""
    if state != NotificationState.VISIBLE:
        return
    title = LEVEL_TITLES[notification.level]
    click.secho(
        f"{title}: {notification.message}",
        fg=LEVEL_COLORS[notification.level],
        err=notification.level == NotificationLevel.ERROR,
    )


def create_cli_notifier(scheduler: Optional[Scheduler] = None) -> NotificationManager:
    """Create a notification manager that renders to the terminal.

    A CLI command finishes long before any TTL elapses, so the default
    scheduler is a manual clock that is never advanced.
    """
    manager = NotificationManager(scheduler or ManualScheduler())
    manager.subscribe(render_notification)
    return manager
