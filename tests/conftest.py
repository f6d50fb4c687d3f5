import asyncio

import pytest

from contact_relay.form.controller import FormController, FormDisplay
from contact_relay.form.presenter import NotificationPresenter
from contact_relay.form.transport import Failure, Success


class FakeTimer:
    def __init__(self, when, callback, args):
        self.when = when
        self.callback = callback
        self.args = args
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class FakeScheduler:
    """Manually advanced clock with an asyncio-style call_later"""

    def __init__(self):
        self.now = 0.0
        self.timers = []

    def call_later(self, delay, callback, *args):
        timer = FakeTimer(self.now + delay, callback, args)
        self.timers.append(timer)
        return timer

    def advance(self, seconds):
        target = self.now + seconds
        while True:
            due = [t for t in self.timers if not t.cancelled and t.when <= target + 1e-9]
            if not due:
                break
            timer = min(due, key=lambda t: t.when)
            self.timers.remove(timer)
            self.now = timer.when
            timer.callback(*timer.args)
        self.now = target


class RecordingPresenter:
    def __init__(self):
        self.presented = []
        self.dismissals = 0

    def present(self, content):
        self.presented.append((content.kind.value, content.message))

    def dismiss(self):
        self.dismissals += 1


class RecordingTransport:
    def __init__(self, outcome=None):
        self.outcome = outcome or Success()
        self.payloads = []

    async def send(self, payload):
        self.payloads.append(dict(payload))
        return self.outcome


class BlockingTransport:
    """Holds the send call open until released"""

    def __init__(self, outcome=None):
        self.outcome = outcome or Success()
        self.payloads = []
        self.started = asyncio.Event()
        self.release = asyncio.Event()

    async def send(self, payload):
        self.payloads.append(dict(payload))
        self.started.set()
        await self.release.wait()
        return self.outcome


class RaisingTransport:
    async def send(self, payload):
        raise ConnectionError("network unreachable")


class StubMailer:
    def __init__(self, delivered=True):
        self.delivered = delivered
        self.sent = []

    async def deliver(self, email):
        self.sent.append(email)
        return self.delivered


def make_controller(transport, fields=None):
    scheduler = FakeScheduler()
    target = RecordingPresenter()
    notifications = NotificationPresenter(target, scheduler)
    controller = FormController(transport, notifications, view=FormDisplay(), fields=fields)
    return controller, target, scheduler


def fill(controller, **values):
    defaults = {
        "name": "Jo",
        "email": "jo@x.com",
        "phone": "",
        "inquiryType": "General",
        "message": "Hi",
    }
    defaults.update(values)
    for name, value in defaults.items():
        controller.on_input(name, value)


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def target():
    return RecordingPresenter()


@pytest.fixture
def failing_transport():
    return RecordingTransport(Failure("request failed"))
