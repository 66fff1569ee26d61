#===============================================================================
#  QuickLaunch | timers.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Single-shot, cancellable QTimer handles for the session's debounce.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import QCoreApplication, QTimer


class QtTimerHandle:
    def __init__(self, delay_ms: int, callback: Callable[[], None]):
        self._callback = callback
        self._done = False
        # Parented to the application so the QTimer outlives this wrapper
        # while its own timeout is being delivered.
        self._timer = QTimer(QCoreApplication.instance())
        self._timer.setSingleShot(True)
        self._timer.setInterval(delay_ms)
        self._timer.timeout.connect(self._fire)
        self._timer.start()

    def _fire(self) -> None:
        if self._done:
            return
        self._done = True
        self._timer.deleteLater()
        self._callback()

    def cancel(self) -> None:
        if self._done:
            return
        self._done = True
        self._timer.stop()
        self._timer.deleteLater()

    @property
    def pending(self) -> bool:
        return not self._done


def start_qt_timer(delay_ms: int, callback: Callable[[], None]) -> QtTimerHandle:
    return QtTimerHandle(delay_ms, callback)
