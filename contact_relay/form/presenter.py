"""Transient notifications and the rendering targets behind them"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Protocol
import asyncio
import logging

logger = logging.getLogger(__name__)

# Notification lifecycle, in seconds
SHOW_DELAY = 0.1
DISMISS_DELAY = 5.0
REMOVE_DELAY = 0.3


class NotificationKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class Notification:
    """A transient status message"""
    message: str
    kind: NotificationKind
    visible: bool = False
    dismissing: bool = False


class Presenter(Protocol):
    """Rendering target for notifications (DOM, terminal, test harness)"""

    def present(self, content: Notification) -> None:
        ...

    def dismiss(self) -> None:
        ...


class TimerHandle(Protocol):
    def cancel(self) -> None:
        ...


class Scheduler(Protocol):
    """Anything with an asyncio-style call_later"""

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> TimerHandle:
        ...


class LoggingPresenter:
    """Render notifications to the application log"""

    def present(self, content: Notification) -> None:
        level = logging.INFO if content.kind == NotificationKind.SUCCESS else logging.WARNING
        logger.log(level, f"[{content.kind.value}] {content.message}")

    def dismiss(self) -> None:
        logger.debug("Notification dismissed")


class NotificationPresenter:
    """
    Keeps at most one live notification.

    A notification becomes visible SHOW_DELAY after creation, starts
    dismissing DISMISS_DELAY after creation and is removed REMOVE_DELAY after
    that. Showing a new notification tears down the current one and cancels
    its pending timers.
    """

    def __init__(self, target: Presenter, scheduler: Optional[Scheduler] = None):
        self.target = target
        self._scheduler = scheduler
        self.current: Optional[Notification] = None
        self._timers: List[TimerHandle] = []

    @property
    def scheduler(self) -> Scheduler:
        if self._scheduler is None:
            return asyncio.get_running_loop()
        return self._scheduler

    def show(self, message: str, kind: NotificationKind) -> Notification:
        self.clear()

        notification = Notification(message=message, kind=NotificationKind(kind))
        self.current = notification

        self._timers = [
            self.scheduler.call_later(SHOW_DELAY, self._reveal, notification),
            self.scheduler.call_later(DISMISS_DELAY, self._begin_dismiss, notification),
        ]
        return notification

    def clear(self) -> None:
        """Remove the current notification immediately"""
        for timer in self._timers:
            timer.cancel()
        self._timers = []

        if self.current is not None:
            self.current.visible = False
            self.target.dismiss()
            self.current = None

    def _reveal(self, notification: Notification) -> None:
        if notification is not self.current:
            return
        notification.visible = True
        self.target.present(notification)

    def _begin_dismiss(self, notification: Notification) -> None:
        if notification is not self.current:
            return
        notification.dismissing = True
        self._timers.append(
            self.scheduler.call_later(REMOVE_DELAY, self._remove, notification)
        )

    def _remove(self, notification: Notification) -> None:
        if notification is not self.current:
            return
        notification.visible = False
        self.target.dismiss()
        self.current = None
        self._timers = []
