"""Single-threaded event dispatch for the contact form"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Set
import asyncio
import logging

from contact_relay.form.controller import FormController

logger = logging.getLogger(__name__)


class EventType(str, Enum):
    BLUR = "blur"
    INPUT = "input"
    SUBMIT = "submit"


@dataclass(frozen=True)
class FormEvent:
    """A UI event aimed at the form"""
    type: EventType
    field: Optional[str] = None
    value: str = ""


class FormEventQueue:
    """
    Dispatches form events in arrival order on the running event loop.

    Blur and input handlers run inline. Submit runs as its own task so the
    queue keeps draining while the transport call is pending; a submit that
    arrives during that window is dropped by the controller.
    """

    def __init__(self, controller: FormController):
        self.controller = controller
        self._queue: asyncio.Queue = asyncio.Queue()
        self._submissions: Set[asyncio.Task] = set()

    def post(self, event: FormEvent) -> None:
        self._queue.put_nowait(event)

    def blur(self, field: str) -> None:
        self.post(FormEvent(EventType.BLUR, field))

    def input(self, field: str, value: str) -> None:
        self.post(FormEvent(EventType.INPUT, field, value))

    def submit(self) -> None:
        self.post(FormEvent(EventType.SUBMIT))

    async def drain(self) -> None:
        """Dispatch every queued event, then wait for submissions to settle"""
        while not self._queue.empty():
            self.dispatch(self._queue.get_nowait())
            # Let a freshly started submission reach its transport call
            await asyncio.sleep(0)
        if self._submissions:
            await asyncio.gather(*self._submissions)

    async def run(self) -> None:
        """Dispatch events until cancelled"""
        while True:
            event = await self._queue.get()
            self.dispatch(event)

    def dispatch(self, event: FormEvent) -> None:
        if event.type == EventType.BLUR:
            self.controller.on_blur(event.field)
        elif event.type == EventType.INPUT:
            self.controller.on_input(event.field, event.value)
        elif event.type == EventType.SUBMIT:
            task = asyncio.get_running_loop().create_task(self.controller.submit())
            self._submissions.add(task)
            task.add_done_callback(self._submissions.discard)
        else:
            logger.warning(f"Unhandled form event: {event.type}")
