"""Transient notification lifecycle management."""

import itertools
from dataclasses import dataclass
from typing import Callable, Optional

from spendview.domain.entities import Notification, NotificationLevel, NotificationState
from spendview.domain.scheduling import Scheduler, TimerHandle
from spendview.utils.logger import get_logger

logger = get_logger(__name__)

LEVEL_TTLS = {
    NotificationLevel.ERROR: 6.0,
    NotificationLevel.WARNING: 5.0,
    NotificationLevel.SUCCESS: 4.0,
    NotificationLevel.INFO: 4.0,
}

LEVEL_TITLES = {
    NotificationLevel.SUCCESS: "Success",
    NotificationLevel.ERROR: "Error",
    NotificationLevel.WARNING: "Warning",
    NotificationLevel.INFO: "Info",
}

# Exit animation window; shorter than every TTL above.
EXIT_DELAY = 0.3

Listener = Callable[[Notification, NotificationState], None]


@dataclass
class _Entry:
    notification: Notification
    state: NotificationState
    timer: Optional[TimerHandle] = None


class NotificationManager:
    """Tracks visible notifications and removes them when they expire.

    ``post`` makes a notification visible immediately and starts its TTL
    timer. Expiry and ``dismiss`` take the same path: VISIBLE -> DISMISSING,
    then REMOVED once the exit delay has passed. Timer callbacks re-check the
    entry's state, so a cancelled or stale timer never transitions twice.
    """

    def __init__(self, scheduler: Scheduler, exit_delay: float = EXIT_DELAY):
        """Initialize notification manager.

        Args:
            scheduler: Scheduler used for TTL and exit timers
            exit_delay: Seconds a dismissed notification spends in DISMISSING
        """
        self.scheduler = scheduler
        self.exit_delay = exit_delay
        self._entries: dict[int, _Entry] = {}
        self._ids = itertools.count(1)
        self._last_id = 0
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener for every state transition.

        Returns:
            Callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def post(
        self,
        level: NotificationLevel | str,
        message: str,
        ttl: Optional[float] = None,
    ) -> int:
        """Show a new notification and start its TTL timer.

        Identical messages are never merged; every call creates a new
        notification.

        Args:
            level: Notification level
            message: Text to show
            ttl: Seconds until automatic dismissal (defaults to the level's
                entry in LEVEL_TTLS)

        Returns:
            Notification ID
        """
        level = NotificationLevel(level)
        if ttl is None:
            ttl = LEVEL_TTLS[level]

        notification_id = next(self._ids)
        self._last_id = notification_id
        notification = Notification(
            id=notification_id,
            level=level,
            message=message,
            created_at=self.scheduler.now(),
            ttl=ttl,
        )
        # Visible with a running timer before any listener is told about it.
        entry = _Entry(notification=notification, state=NotificationState.VISIBLE)
        entry.timer = self.scheduler.call_later(
            ttl, lambda: self._expire(notification_id)
        )
        self._entries[notification_id] = entry
        self._emit(notification, NotificationState.CREATED)
        if entry.state == NotificationState.VISIBLE:
            self._emit(notification, NotificationState.VISIBLE)
        return notification_id

    def info(self, message: str, ttl: Optional[float] = None) -> int:
        """Post an info notification."""
        return self._post_level(NotificationLevel.INFO, message, ttl)

    def success(self, message: str, ttl: Optional[float] = None) -> int:
        """Post a success notification."""
        return self._post_level(NotificationLevel.SUCCESS, message, ttl)

    def warning(self, message: str, ttl: Optional[float] = None) -> int:
        """Post a warning notification."""
        return self._post_level(NotificationLevel.WARNING, message, ttl)

    def error(self, message: str, ttl: Optional[float] = None) -> int:
        """Post an error notification."""
        return self._post_level(NotificationLevel.ERROR, message, ttl)

    def _post_level(
        self, level: NotificationLevel, message: str, ttl: Optional[float]
    ) -> int:
        return self.post(level, message, ttl)

    def dismiss(self, notification_id: int) -> None:
        """Start removing a visible notification.

        Unknown, dismissing and removed IDs are ignored.
        """
        entry = self._entries.get(notification_id)
        if entry is None or entry.state != NotificationState.VISIBLE:
            return

        if entry.timer is not None:
            entry.timer.cancel()
        entry.state = NotificationState.DISMISSING
        entry.timer = self.scheduler.call_later(
            self.exit_delay, lambda: self._remove(notification_id)
        )
        self._emit(entry.notification, entry.state)

    def clear(self) -> None:
        """Dismiss every visible notification."""
        for notification in self.visible():
            self.dismiss(notification.id)

    def visible(self) -> list[Notification]:
        """Return visible notifications in posting order."""
        return [
            entry.notification
            for entry in self._entries.values()
            if entry.state == NotificationState.VISIBLE
        ]

    def get(self, notification_id: int) -> Optional[Notification]:
        """Return a notification that has not been removed yet."""
        entry = self._entries.get(notification_id)
        return entry.notification if entry is not None else None

    def get_state(self, notification_id: int) -> Optional[NotificationState]:
        """Return the current state of a notification.

        Returns:
            The state, REMOVED for IDs that were issued and have since been
            removed, or None for IDs this manager never issued
        """
        entry = self._entries.get(notification_id)
        if entry is not None:
            return entry.state
        if 0 < notification_id <= self._last_id:
            return NotificationState.REMOVED
        return None

    def _expire(self, notification_id: int) -> None:
        entry = self._entries.get(notification_id)
        if entry is None or entry.state != NotificationState.VISIBLE:
            return
        logger.debug("Notification %s expired", notification_id)
        entry.timer = None
        self.dismiss(notification_id)

    def _remove(self, notification_id: int) -> None:
        entry = self._entries.get(notification_id)
        if entry is None or entry.state != NotificationState.DISMISSING:
            return
        entry.timer = None
        entry.state = NotificationState.REMOVED
        del self._entries[notification_id]
        self._emit(entry.notification, entry.state)

    def _emit(self, notification: Notification, state: NotificationState) -> None:
        logger.debug("Notification %s -> %s", notification.id, state.value)
        for listener in list(self._listeners):
            try:
                listener(notification, state)
            except Exception:
                logger.exception(
                    "Notification listener failed on %s -> %s",
                    notification.id,
                    state.value,
                )
