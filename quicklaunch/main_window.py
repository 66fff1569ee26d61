#===============================================================================
#  QuickLaunch | main_window.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Floating palette window:
#    - search box (type to search, arrows/Tab to move, Enter to open,
#      Esc to back out, Ctrl+P to pin the highlighted result)
#    - result list (right-click: pin / unpin)
#    - pin board (drop a tile on another to reorder; right-click: rename,
#      unpin)
#    - settings overlay, hotkey / launch warning strip, footer
#  Also the window service the session talks to (show, focus, focus-change
#  subscription, dragging, position memory).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import html
from typing import Callable, List, Optional

from PySide6.QtCore import QEvent, QPoint, Qt
from PySide6.QtGui import QAction, QGuiApplication
from PySide6.QtWidgets import (
    QApplication,
    QFrame,
    QHBoxLayout,
    QInputDialog,
    QLabel,
    QListWidgetItem,
    QMenu,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from .constants import (
    APP_TITLE,
    PALETTE_ACCENT,
    PALETTE_BG,
    PALETTE_FG,
    PALETTE_WARN,
    PIN_TILE_SIZE,
    WINDOW_SIZE,
)
from .ranking import match_span
from .selection import Mode
from .session import Session
from .settings import SettingsStore
from .settings_panel import SettingsPanel
from .tile_widget import PinTile, TileVisual, tile_color_for_key
from .ui_widgets import PinBoardList, ResultList, SearchBox

PAGE_RESULTS, PAGE_PINS, PAGE_SETTINGS = 0, 1, 2


def highlighted_name(name: str, query: str) -> str:
    """Name as rich text with the matched part of the query in bold."""
    span = match_span(name, query)
    if span is None:
        return html.escape(name)
    start, end = span
    return (
        html.escape(name[:start])
        + f"<b style=\"color: {PALETTE_WARN};\">{html.escape(name[start:end])}</b>"
        + html.escape(name[end:])
    )


class DragStrip(QFrame):
    """Thin bar at the top of the frameless window; press to move the window."""

    def __init__(self, on_press: Callable[[], None], parent=None):
        super().__init__(parent)
        self._on_press = on_press
        self.setFixedHeight(10)
        self.setCursor(Qt.SizeAllCursor)

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            self._on_press()
        super().mousePressEvent(event)


class PaletteWindow(QWidget):
    def __init__(self, settings: SettingsStore, parent=None):
        super().__init__(parent, Qt.FramelessWindowHint | Qt.Tool | Qt.WindowStaysOnTopHint)
        self.setWindowTitle(APP_TITLE)
        self.resize(WINDOW_SIZE)

        self.settings = settings
        self.session: Optional[Session] = None
        self.quitting = False

        self._focus_callbacks: List[Callable[[bool], None]] = []
        self._saved_pos: Optional[QPoint] = None
        self._result_sig: tuple = ()
        self._pin_sig: tuple = ()
        self._pin_tiles: List[PinTile] = []

        self.setStyleSheet(f"""
        QWidget {{ background: {PALETTE_BG}; color: {PALETTE_FG}; font-family: "Segoe UI"; }}
        QLineEdit {{ font-size: 18px; padding: 8px; border: 1px solid #2a2a2a; }}
        QListWidget {{ border: none; }}
        QListWidget::item:selected {{ background: {PALETTE_ACCENT}; }}
        QPushButton {{ background: #26262b; border: 1px solid #2a2a2a; padding: 4px 8px; }}
        QPushButton:hover {{ background: #303036; }}
        QFrame#WarningStrip {{ background: #3a2f00; border: 1px solid {PALETTE_WARN}; }}
        """)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(10, 4, 10, 8)
        layout.setSpacing(6)

        layout.addWidget(DragStrip(self.start_dragging))

        # Warning strip (hotkey failure / launch failure), dismissible
        self.warning = QFrame()
        self.warning.setObjectName("WarningStrip")
        warn_row = QHBoxLayout(self.warning)
        warn_row.setContentsMargins(8, 4, 4, 4)
        self.warning_label = QLabel("")
        self.warning_label.setWordWrap(True)
        warn_row.addWidget(self.warning_label, 1)
        btn_dismiss = QPushButton("✕")
        btn_dismiss.setFixedWidth(28)
        btn_dismiss.clicked.connect(self._dismiss_warning)
        warn_row.addWidget(btn_dismiss)
        self.warning.setVisible(False)
        layout.addWidget(self.warning)

        search_row = QHBoxLayout()
        self.search = SearchBox()
        self.search.setPlaceholderText("Search apps...")
        search_row.addWidget(self.search, 1)
        self.btn_settings = QPushButton("⚙")
        self.btn_settings.setFixedWidth(36)
        self.btn_settings.setFocusPolicy(Qt.NoFocus)
        search_row.addWidget(self.btn_settings)
        self.btn_close = QPushButton("✕")
        self.btn_close.setFixedWidth(36)
        self.btn_close.setFocusPolicy(Qt.NoFocus)
        self.btn_close.setToolTip("Close (Esc)")
        search_row.addWidget(self.btn_close)
        layout.addLayout(search_row)

        self.pages = QStackedWidget()

        results_page = QWidget()
        results_layout = QVBoxLayout(results_page)
        results_layout.setContentsMargins(0, 0, 0, 0)
        self.results = ResultList()
        results_layout.addWidget(self.results, 1)
        self.results_empty = QLabel("")
        self.results_empty.setWordWrap(True)
        self.results_empty.setAlignment(Qt.AlignCenter)
        results_layout.addWidget(self.results_empty, 1)
        self.pages.addWidget(results_page)

        pin_page = QWidget()
        pin_layout = QVBoxLayout(pin_page)
        pin_layout.setContentsMargins(0, 0, 0, 0)
        pin_layout.addWidget(QLabel("<b>Pinned</b>"))
        self.pin_board = PinBoardList()
        pin_layout.addWidget(self.pin_board, 1)
        self.pin_empty = QLabel("No pins yet. Search an app and press Ctrl+P (or right-click) to pin it here.")
        self.pin_empty.setWordWrap(True)
        self.pin_empty.setAlignment(Qt.AlignCenter)
        pin_layout.addWidget(self.pin_empty, 1)
        self.pages.addWidget(pin_page)

        self.settings_panel = SettingsPanel(settings)
        self.pages.addWidget(self.settings_panel)

        layout.addWidget(self.pages, 1)

        self.footer = QLabel("")
        self.footer.setStyleSheet("color: rgba(242,242,242,0.6); font-size: 11px;")
        layout.addWidget(self.footer)

    # ----------------------------
    # Session binding
    # ----------------------------
    def bind(self, session: Session) -> None:
        self.session = session
        session.add_listener(self.render)

        self.search.textEdited.connect(session.set_query)
        self.search.intent.connect(session.handle_intent)
        self.search.toggle_pin_requested.connect(self._toggle_pin_selected)
        self.btn_settings.clicked.connect(session.open_settings)
        self.btn_close.clicked.connect(session.launcher.hide)
        self.settings_panel.close_requested.connect(session.close_settings)

        self.results.itemClicked.connect(lambda item: self._launch_row(self.results.row(item)))
        self.results.itemEntered.connect(lambda item: session.select(self.results.row(item)))
        self.results.customContextMenuRequested.connect(self._open_result_menu)

        self.pin_board.itemClicked.connect(lambda item: self._launch_row(self.pin_board.row(item)))
        self.pin_board.itemEntered.connect(lambda item: session.select(self.pin_board.row(item)))
        self.pin_board.customContextMenuRequested.connect(self._open_pin_menu)
        self.pin_board.pin_dropped.connect(session.reorder_pins)

        self.render()

    def render(self) -> None:
        s = self.session
        if s is None:
            return

        if self.search.text() != s.query:
            self.search.setText(s.query)

        notice = s.hotkey_warning or s.launch_error
        self.warning_label.setText(f"⚠ {notice}" if notice else "")
        self.warning.setVisible(bool(notice))

        if s.state.overlay_open:
            if self.pages.currentIndex() != PAGE_SETTINGS:
                self.settings_panel.load(s.hotkey_label)
            self.pages.setCurrentIndex(PAGE_SETTINGS)
        elif s.mode == Mode.SEARCH:
            self._render_results()
            self.pages.setCurrentIndex(PAGE_RESULTS)
        else:
            self._render_pins()
            self.pages.setCurrentIndex(PAGE_PINS)

        count = len(s.results) if s.mode == Mode.SEARCH else len(s.pins)
        noun = "results" if s.mode == Mode.SEARCH else "pinned"
        self.footer.setText(
            f"{s.hotkey_label}  ·  ↑↓ Navigate  ·  Enter Open  ·  Ctrl+P Pin  ·  Esc Close  ·  {count} {noun}"
        )

    def _render_results(self) -> None:
        s = self.session
        sig = (s.query,) + tuple((e.path, e.name, s.pins.is_pinned(e.path)) for e in s.results)
        if sig != self._result_sig:
            self._result_sig = sig
            self.results.clear()
            for entry in s.results:
                star = "★ " if s.pins.is_pinned(entry.path) else "&nbsp;&nbsp;&nbsp;"
                label = QLabel(
                    f"{star}{highlighted_name(entry.name, s.query)}"
                    f"&nbsp;&nbsp;&nbsp;&nbsp;·&nbsp;&nbsp;{html.escape(entry.category)}"
                )
                label.setTextFormat(Qt.RichText)
                label.setStyleSheet("background: transparent; padding: 4px 6px;")
                label.setAttribute(Qt.WA_TransparentForMouseEvents)
                item = QListWidgetItem()
                item.setData(Qt.UserRole, entry.path)
                item.setToolTip(entry.path)
                item.setSizeHint(label.sizeHint())
                self.results.addItem(item)
                self.results.setItemWidget(item, label)

        has_results = bool(s.results)
        self.results.setVisible(has_results)
        self.results_empty.setVisible(not has_results)
        if has_results:
            self.results.setCurrentRow(s.selected_index)
        else:
            self.results_empty.setText(
                f'No results for "<b>{html.escape(s.query.strip())}</b>"<br>'
                f'<span style="color: rgba(242,242,242,0.6);">Check the spelling or try another keyword</span>'
            )

    def _render_pins(self) -> None:
        s = self.session
        pins = s.pins.pins
        sig = tuple((p.id, p.alias, p.path) for p in pins)
        if sig != self._pin_sig:
            self._pin_sig = sig
            self.pin_board.clear()
            self._pin_tiles = []
            for pin in pins:
                item = QListWidgetItem()
                item.setData(Qt.UserRole, pin.id)
                item.setSizeHint(PIN_TILE_SIZE)
                item.setToolTip(pin.path)
                self.pin_board.addItem(item)
                tile = PinTile(
                    TileVisual(
                        bg_color=tile_color_for_key(pin.path),
                        title=pin.alias,
                        subtitle=pin.app.category,
                    ),
                    size=PIN_TILE_SIZE,
                )
                self.pin_board.setItemWidget(item, tile)
                self._pin_tiles.append(tile)

        self.pin_board.setVisible(bool(pins))
        self.pin_empty.setVisible(not pins)
        selected = s.selected_index
        for i, tile in enumerate(self._pin_tiles):
            tile.set_selected(i == selected)

    # ----------------------------
    # Actions
    # ----------------------------
    def _launch_row(self, row: int) -> None:
        items = self.session.active_list
        if 0 <= row < len(items):
            self.session.launch_entry(items[row])

    def _toggle_pin_selected(self) -> None:
        s = self.session
        if s.mode != Mode.SEARCH:
            return
        entry = s.selected_entry
        if entry is not None:
            s.toggle_pin(entry)

    def _dismiss_warning(self) -> None:
        if self.session.hotkey_warning:
            self.session.dismiss_warning()
        else:
            self.session.dismiss_launch_error()

    def _open_result_menu(self, pos) -> None:
        item = self.results.itemAt(pos)
        if not item:
            return
        row = self.results.row(item)
        entry = self.session.results[row]
        pinned = self.session.pins.is_pinned(entry.path)

        menu = QMenu(self)
        act_open = QAction("Open", self)
        act_pin = QAction("Unpin" if pinned else "Pin", self)
        menu.addAction(act_open)
        menu.addAction(act_pin)

        chosen = menu.exec(self.results.mapToGlobal(pos))
        if chosen == act_open:
            self.session.launch_entry(entry)
        elif chosen == act_pin:
            self.session.toggle_pin(entry)

    def _open_pin_menu(self, pos) -> None:
        item = self.pin_board.itemAt(pos)
        if not item:
            return
        pin = self.session.pins.get(item.data(Qt.UserRole))
        if pin is None:
            return

        menu = QMenu(self)
        act_rename = QAction("Rename…", self)
        act_unpin = QAction("Unpin", self)
        menu.addAction(act_rename)
        menu.addSeparator()
        menu.addAction(act_unpin)

        chosen = menu.exec(self.pin_board.mapToGlobal(pos))
        if chosen == act_rename:
            text, ok = QInputDialog.getText(self, "Rename pin", "Name:", text=pin.alias)
            if ok:
                cleaned = text.strip()
                self.session.rename_pin(pin.id, cleaned or pin.app.name)
        elif chosen == act_unpin:
            self.session.remove_pin(pin.id)

    # ----------------------------
    # Window service
    # ----------------------------
    def set_focus(self) -> None:
        self.raise_()
        self.activateWindow()
        self.search.setFocus()

    def on_focus_changed(self, callback: Callable[[bool], None]) -> Callable[[], None]:
        self._focus_callbacks.append(callback)

        def unsubscribe() -> None:
            if callback in self._focus_callbacks:
                self._focus_callbacks.remove(callback)

        return unsubscribe

    def start_dragging(self) -> None:
        handle = self.windowHandle()
        if handle is not None:
            handle.startSystemMove()

    def save_position(self) -> None:
        self._saved_pos = self.pos()

    def restore_position(self) -> None:
        if self._saved_pos is None:
            self.center_on_screen()
        else:
            self.move(self._saved_pos)

    def center_on_screen(self) -> None:
        screen = self.screen() or QGuiApplication.primaryScreen()
        if screen is None:
            return
        geo = screen.availableGeometry()
        x = geo.x() + (geo.width() - self.width()) // 2
        y = geo.y() + geo.height() // 2 - self.height() // 2 - 80
        self.move(x, y)

    def _owns(self, widget) -> bool:
        while widget is not None:
            if widget is self:
                return True
            widget = widget.parentWidget()
        return False

    def changeEvent(self, event):
        if event.type() == QEvent.ActivationChange:
            focused = self.isActiveWindow()
            # Our own rename dialog or context menu taking activation is not a blur
            if focused or not self._owns(QApplication.activeWindow()):
                for cb in list(self._focus_callbacks):
                    cb(focused)
        super().changeEvent(event)

    def closeEvent(self, event):
        if self.settings.prefs.minimize_to_tray and not self.quitting:
            event.ignore()
            self.hide()
            return
        super().closeEvent(event)
