#===============================================================================
#  QuickLaunch | hotkeys.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Global summon hotkey via pynput. Candidates are tried in order and the
#  outcome is published as hotkey-registered(label) or hotkey-failed(reason).
#
#  pynput calls back on its own listener thread; the press is re-emitted as a
#  Qt signal so the handler runs on the GUI thread with everything else.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from pynput import keyboard
from PySide6.QtCore import QObject, Signal

from .constants import HOTKEY_CANDIDATES, HOTKEY_FAILED_MESSAGE
from .events import HOTKEY_FAILED, HOTKEY_REGISTERED, EventBus

logger = logging.getLogger(__name__)


class _PressBridge(QObject):
    pressed = Signal()


class HotkeyService:
    def __init__(
        self,
        bus: EventBus,
        on_pressed: Callable[[], None],
        candidates: Optional[List[Tuple[str, str]]] = None,
    ):
        self.bus = bus
        self.candidates = candidates if candidates is not None else list(HOTKEY_CANDIDATES)
        self.label: Optional[str] = None
        self._listener: Optional[keyboard.GlobalHotKeys] = None
        self._bridge = _PressBridge()
        # Created on the GUI thread, so emits from the pynput thread are queued
        self._bridge.pressed.connect(on_pressed)

    def register(self) -> Optional[str]:
        for combo, label in self.candidates:
            try:
                keyboard.HotKey.parse(combo)
                listener = keyboard.GlobalHotKeys({combo: self._bridge.pressed.emit})
                listener.start()
                listener.wait()
            except Exception as e:
                logger.warning("Hotkey %s unavailable: %s", label, e)
                continue
            if not listener.running:
                logger.warning("Hotkey %s unavailable: listener stopped", label)
                continue
            self._listener = listener
            self.label = label
            logger.info("Hotkey registered: %s", label)
            self.bus.publish(HOTKEY_REGISTERED, label)
            return label

        logger.error("No global hotkey registered")
        self.bus.publish(HOTKEY_FAILED, HOTKEY_FAILED_MESSAGE)
        return None

    def stop(self) -> None:
        if self._listener is not None:
            self._listener.stop()
            self._listener = None
