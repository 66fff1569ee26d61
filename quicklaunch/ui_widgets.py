#===============================================================================
#  QuickLaunch | ui_widgets.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Reusable palette widgets: the search box (keys -> intents), the result
#  list and the drag-to-reorder pin board. Keeps the window smaller.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from PySide6.QtCore import QEvent, Qt, Signal
from PySide6.QtWidgets import QLineEdit, QListWidget

from .constants import PIN_GRID_SIZE
from .selection import Intent

KEY_INTENTS = {
    Qt.Key_Down: Intent.MOVE_DOWN,
    Qt.Key_Up: Intent.MOVE_UP,
    Qt.Key_Return: Intent.CONFIRM,
    Qt.Key_Enter: Intent.CONFIRM,
    Qt.Key_Escape: Intent.CANCEL,
    Qt.Key_Tab: Intent.TAB,
    Qt.Key_Backtab: Intent.SHIFT_TAB,
}


class SearchBox(QLineEdit):
    """Query input. Navigation keys are turned into intents instead of edits."""

    intent = Signal(object)
    toggle_pin_requested = Signal()

    def event(self, e):
        # Tab/Backtab never reach keyPressEvent: Qt uses them for focus changes
        if e.type() == QEvent.KeyPress and e.key() in (Qt.Key_Tab, Qt.Key_Backtab):
            self.intent.emit(KEY_INTENTS[e.key()])
            return True
        return super().event(e)

    def keyPressEvent(self, e):
        if e.key() == Qt.Key_P and e.modifiers() & Qt.ControlModifier:
            self.toggle_pin_requested.emit()
            return
        intent = KEY_INTENTS.get(e.key())
        if intent is not None:
            self.intent.emit(intent)
            return
        super().keyPressEvent(e)


class ResultList(QListWidget):
    """Search results, one row per app. Hover moves the highlight."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setMouseTracking(True)
        self.setSelectionMode(QListWidget.SingleSelection)
        self.setFocusPolicy(Qt.NoFocus)
        self.setContextMenuPolicy(Qt.CustomContextMenu)


class PinBoardList(QListWidget):
    """A grid of pin tiles. Dropping a tile onto another emits (from_id, to_id)."""

    pin_dropped = Signal(str, str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setViewMode(QListWidget.IconMode)
        self.setMovement(QListWidget.Snap)
        self.setResizeMode(QListWidget.Adjust)
        self.setUniformItemSizes(True)
        self.setGridSize(PIN_GRID_SIZE)
        self.setSpacing(4)
        self.setMouseTracking(True)
        self.setFocusPolicy(Qt.NoFocus)
        self.setContextMenuPolicy(Qt.CustomContextMenu)

        self.setDragEnabled(True)
        self.setAcceptDrops(True)
        self.setDropIndicatorShown(True)
        self.setDragDropMode(QListWidget.InternalMove)
        self.setSelectionMode(QListWidget.SingleSelection)

    def dropEvent(self, event):
        # The store owns the order; the view is rebuilt from it afterwards
        source = self.currentItem()
        target = self.itemAt(event.position().toPoint())
        event.ignore()
        if source is None or target is None or source is target:
            return
        self.pin_dropped.emit(source.data(Qt.UserRole), target.data(Qt.UserRole))
