#===============================================================================
#  QuickLaunch | session.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Session orchestrator: owns the selection state and reconciles the outside
#  signals (summon, hotkey lifecycle, focus changes) and user actions
#  (search, launch, pin toggle) into one consistent palette state.
#
#  Everything here runs on the GUI thread. It has no Qt dependency: the
#  window, launcher and timer are passed in, so tests drive it with fakes.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Protocol

from . import selection
from .constants import BLUR_HIDE_DELAY_MS
from .errors import LaunchError
from .events import HOTKEY_FAILED, HOTKEY_REGISTERED, RESET_SEARCH, EventBus, Subscription
from .models import AppEntry
from .pins import PinStore
from .ranking import Catalog
from .selection import Command, Intent, Mode, SelectionState
from .settings import SettingsStore

logger = logging.getLogger(__name__)


class Launcher(Protocol):
    def launch(self, path: str) -> None:
        ...

    def hide(self) -> None:
        ...


class WindowService(Protocol):
    def show(self) -> None:
        ...

    def set_focus(self) -> None:
        ...

    def on_focus_changed(self, callback: Callable[[bool], None]) -> Callable[[], None]:
        ...

    def start_dragging(self) -> None:
        ...

    def save_position(self) -> None:
        ...

    def restore_position(self) -> None:
        ...


class TimerHandle(Protocol):
    def cancel(self) -> None:
        ...


# start_timer(delay_ms, callback) -> handle; the callback fires once unless cancelled
TimerFactory = Callable[[int, Callable[[], None]], TimerHandle]


class Session:
    def __init__(
        self,
        catalog: Catalog,
        pins: PinStore,
        settings: SettingsStore,
        launcher: Launcher,
        window: WindowService,
        start_timer: TimerFactory,
        blur_delay_ms: int = BLUR_HIDE_DELAY_MS,
    ):
        self.catalog = catalog
        self.pins = pins
        self.settings = settings
        self.launcher = launcher
        self.window = window
        self._start_timer = start_timer
        self.blur_delay_ms = blur_delay_ms

        self.state = SelectionState()
        self.results: List[AppEntry] = catalog.default_results()
        self.hotkey_label = settings.prefs.hotkey
        self.hotkey_warning: Optional[str] = None
        self.launch_error: Optional[str] = None

        self._hide_timer: Optional[TimerHandle] = None
        self._subscriptions: List[Subscription] = []
        self._listeners: List[Callable[[], None]] = []

    # ----------------------------
    # Wiring
    # ----------------------------
    def attach(self, bus: EventBus) -> None:
        self._subscriptions += [
            bus.subscribe(RESET_SEARCH, self.summon),
            bus.subscribe(HOTKEY_REGISTERED, self.on_hotkey_registered),
            bus.subscribe(HOTKEY_FAILED, self.on_hotkey_failed),
            Subscription(self.window.on_focus_changed(self.on_focus_changed)),
        ]

    def close(self) -> None:
        for sub in self._subscriptions:
            sub.cancel()
        self._subscriptions.clear()
        self._cancel_hide_timer()
        self._listeners.clear()

    @property
    def attached(self) -> bool:
        return any(s.active for s in self._subscriptions)

    def add_listener(self, callback: Callable[[], None]) -> Subscription:
        """Register a redraw callback, invoked after every state change."""
        self._listeners.append(callback)

        def release() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return Subscription(release)

    def _changed(self) -> None:
        for cb in list(self._listeners):
            cb()

    # ----------------------------
    # Derived view state
    # ----------------------------
    @property
    def mode(self) -> Mode:
        return self.state.mode

    @property
    def query(self) -> str:
        return self.state.query

    @property
    def active_list(self) -> List[AppEntry]:
        if self.mode == Mode.SEARCH:
            return list(self.results)
        return self.pins.apps()

    @property
    def selected_index(self) -> int:
        return self.state.index_for(len(self.active_list))

    @property
    def selected_entry(self) -> Optional[AppEntry]:
        items = self.active_list
        if not items:
            return None
        return items[self.state.index_for(len(items))]

    # ----------------------------
    # Keyboard / pointer input
    # ----------------------------
    def set_query(self, text: str) -> None:
        self.state = selection.query_changed(self.state, text)
        self.results = self.catalog.search(text)
        self._changed()

    def select(self, index: int) -> None:
        self.state = selection.select(self.state, index, len(self.active_list))
        self._changed()

    def handle_intent(self, intent: Intent) -> None:
        items = self.active_list
        query_before = self.state.query
        t = selection.reduce(self.state, intent, len(items))
        self.state = t.state
        if self.state.query != query_before:
            self.results = self.catalog.search(self.state.query)

        if t.command == Command.LAUNCH:
            self.launch_entry(items[t.index])
            return
        if t.command == Command.HIDE:
            self.launcher.hide()
        self._changed()

    def open_settings(self) -> None:
        self.state = selection.open_overlay(self.state)
        self._changed()

    def close_settings(self) -> None:
        self.state = selection.close_overlay(self.state)
        self._changed()

    # ----------------------------
    # Launch
    # ----------------------------
    def launch_entry(self, entry: AppEntry) -> bool:
        """Launch, then clear and hide whether or not the launch worked."""
        ok = True
        try:
            self.launcher.launch(entry.path)
            self.launch_error = None
            logger.info("Launched %s (%s)", entry.name, entry.path)
        except LaunchError as e:
            ok = False
            self.launch_error = str(e)
            logger.error("Launch failed for %s: %s", entry.path, e.reason)

        self.state = selection.query_changed(self.state, "")
        self.results = self.catalog.default_results()
        self.launcher.hide()
        self._changed()
        return ok

    def dismiss_launch_error(self) -> None:
        self.launch_error = None
        self._changed()

    # ----------------------------
    # Pins
    # ----------------------------
    def toggle_pin(self, entry: AppEntry) -> bool:
        """Pin or unpin `entry`. Returns the new pinned status."""
        existing = self.pins.find_by_path(entry.path)
        if existing is not None:
            self.pins.remove_pin(existing.id)
            pinned = False
        else:
            self.pins.add_pin(entry)
            pinned = True
        self._changed()
        return pinned

    def remove_pin(self, pin_id: str) -> None:
        self.pins.remove_pin(pin_id)
        self._changed()

    def rename_pin(self, pin_id: str, alias: str) -> None:
        self.pins.rename_pin(pin_id, alias)
        self._changed()

    def reorder_pins(self, from_id: str, to_id: str) -> None:
        self.pins.reorder_pins(from_id, to_id)
        self._changed()

    # ----------------------------
    # Roster
    # ----------------------------
    def refresh_roster(self, entries: List[AppEntry]) -> bool:
        if not self.catalog.refresh(entries):
            return False
        results = self.catalog.search(self.state.query)
        if results != self.results:
            self.results = results
            if self.mode == Mode.SEARCH:
                self.state = selection.select(self.state, 0, len(results))
        self._changed()
        return True

    # ----------------------------
    # External signals
    # ----------------------------
    def summon(self) -> None:
        self.state = selection.summon_reset(self.state)
        self.results = self.catalog.default_results()
        if self.settings.prefs.remember_position:
            self.window.restore_position()
        self._changed()

    def on_hotkey_registered(self, label: str) -> None:
        self.hotkey_label = label
        if self.settings.prefs.hotkey != label:
            self.settings.patch(hotkey=label)
            self.settings.save()
        self._changed()

    def on_hotkey_failed(self, reason: str) -> None:
        logger.warning("Global hotkey unavailable: %s", reason)
        self.hotkey_warning = reason
        self._changed()

    def dismiss_warning(self) -> None:
        self.hotkey_warning = None
        self._changed()

    def on_focus_changed(self, focused: bool) -> None:
        if focused:
            self._cancel_hide_timer()
            return
        if not self.settings.prefs.auto_hide_on_blur:
            return
        self._cancel_hide_timer()
        self._hide_timer = self._start_timer(self.blur_delay_ms, self._hide_after_blur)

    @property
    def hide_pending(self) -> bool:
        return self._hide_timer is not None

    def _cancel_hide_timer(self) -> None:
        if self._hide_timer is not None:
            self._hide_timer.cancel()
            self._hide_timer = None

    def _hide_after_blur(self) -> None:
        self._hide_timer = None
        if self.settings.prefs.remember_position:
            self.window.save_position()
        self.launcher.hide()
