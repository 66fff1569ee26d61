from typing import Callable, List, Tuple

import pytest

from quicklaunch.errors import LaunchError
from quicklaunch.events import EventBus
from quicklaunch.models import AppEntry
from quicklaunch.pins import PinStore
from quicklaunch.ranking import Catalog
from quicklaunch.session import Session
from quicklaunch.settings import SettingsStore
from quicklaunch.storage import MemoryStore


def app(name: str, category: str = "Programs") -> AppEntry:
    return AppEntry(name=name, path=f"C:/Start Menu/{name}.lnk", category=category)


CHROME = app("Google Chrome")
VSCODE = app("Visual Studio Code")
WECHAT = app("WeChat")


class FakeLauncher:
    def __init__(self):
        self.launched: List[str] = []
        self.hide_calls = 0
        self.fail_paths = set()

    def launch(self, path: str) -> None:
        if path in self.fail_paths:
            raise LaunchError(path, "access denied")
        self.launched.append(path)

    def hide(self) -> None:
        self.hide_calls += 1


class FakeWindow:
    def __init__(self):
        self.callbacks: List[Callable[[bool], None]] = []
        self.calls: List[str] = []

    def show(self):
        self.calls.append("show")

    def set_focus(self):
        self.calls.append("set_focus")

    def on_focus_changed(self, callback):
        self.callbacks.append(callback)

        def unsubscribe():
            self.callbacks.remove(callback)

        return unsubscribe

    def start_dragging(self):
        self.calls.append("start_dragging")

    def save_position(self):
        self.calls.append("save_position")

    def restore_position(self):
        self.calls.append("restore_position")

    def focus(self, focused: bool):
        for cb in list(self.callbacks):
            cb(focused)


class ManualTimers:
    """Timer factory driven by an explicit clock (milliseconds)."""

    class Handle:
        def __init__(self, due: int, callback):
            self.due = due
            self.callback = callback
            self.cancelled = False
            self.fired = False

        def cancel(self):
            self.cancelled = True

    def __init__(self):
        self.now = 0
        self.handles: List["ManualTimers.Handle"] = []

    def __call__(self, delay_ms: int, callback):
        h = ManualTimers.Handle(self.now + delay_ms, callback)
        self.handles.append(h)
        return h

    def advance(self, ms: int) -> None:
        self.now += ms
        for h in list(self.handles):
            if not h.cancelled and not h.fired and h.due <= self.now:
                h.fired = True
                h.callback()

    @property
    def pending(self) -> List["ManualTimers.Handle"]:
        return [h for h in self.handles if not h.cancelled and not h.fired]


@pytest.fixture
def corpus() -> List[AppEntry]:
    return [CHROME, VSCODE, WECHAT]


@pytest.fixture
def kv() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def harness(corpus, kv) -> Tuple[Session, FakeLauncher, FakeWindow, ManualTimers, EventBus]:
    launcher = FakeLauncher()
    window = FakeWindow()
    timers = ManualTimers()
    bus = EventBus()
    session = Session(
        catalog=Catalog(corpus),
        pins=PinStore(kv),
        settings=SettingsStore(kv),
        launcher=launcher,
        window=window,
        start_timer=timers,
    )
    session.attach(bus)
    return session, launcher, window, timers, bus
