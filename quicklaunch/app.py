#===============================================================================
#  QuickLaunch | app.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Application wiring: storage, stores, catalog, session, palette window,
#  tray icon, roster refresh timer and the global hotkey.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from PySide6.QtCore import QTimer
from PySide6.QtGui import QAction
from PySide6.QtWidgets import QApplication, QMenu, QStyle, QSystemTrayIcon

from .constants import APP_TITLE, DATA_DIR_ENV, DATA_DIR_NAME, ROSTER_REFRESH_MS, STATE_FILE_NAME
from .discovery import ShortcutDirectory
from .events import RESET_SEARCH, EventBus
from .hotkeys import HotkeyService
from .launcher import AppLauncher
from .logging_setup import setup_logging
from .main_window import PaletteWindow
from .pins import PinStore
from .ranking import Catalog
from .session import Session
from .settings import SettingsStore, load_fuzzy_config
from .storage import JsonFileStore
from .timers import start_qt_timer

logger = logging.getLogger(__name__)


def resolve_data_dir() -> Path:
    configured = os.environ.get(DATA_DIR_ENV, "").strip()
    if configured:
        return Path(configured).expanduser()
    return Path.home() / DATA_DIR_NAME


class QuickLaunchApp:
    def __init__(self, data_dir: Path):
        self.data_dir = data_dir
        self.store = JsonFileStore(data_dir / STATE_FILE_NAME)
        self.settings = SettingsStore(self.store)
        self.pins = PinStore(self.store)
        self.provider = ShortcutDirectory()
        self.catalog = Catalog(self.provider.list_applications(), fuzzy=load_fuzzy_config(self.store))
        self.bus = EventBus()

        self.window = PaletteWindow(self.settings)
        self.launcher = AppLauncher(self.window.hide)
        self.session = Session(
            catalog=self.catalog,
            pins=self.pins,
            settings=self.settings,
            launcher=self.launcher,
            window=self.window,
            start_timer=start_qt_timer,
        )
        self.session.attach(self.bus)
        self.window.bind(self.session)
        self.window.center_on_screen()

        self.tray = self._build_tray()

        self.refresh_timer = QTimer()
        self.refresh_timer.setInterval(ROSTER_REFRESH_MS)
        self.refresh_timer.timeout.connect(self.refresh_roster)
        self.refresh_timer.start()

        self.hotkeys = HotkeyService(self.bus, self.toggle_window)
        self.hotkeys.register()

    def _build_tray(self) -> Optional[QSystemTrayIcon]:
        if not QSystemTrayIcon.isSystemTrayAvailable():
            logger.info("No system tray available")
            return None
        icon = QApplication.style().standardIcon(QStyle.SP_ComputerIcon)
        tray = QSystemTrayIcon(icon)
        tray.setToolTip(APP_TITLE)

        menu = QMenu()
        act_show = QAction(f"Open {APP_TITLE}", menu)
        act_show.triggered.connect(self.summon)
        act_quit = QAction("Quit", menu)
        act_quit.triggered.connect(self.quit)
        menu.addAction(act_show)
        menu.addAction(act_quit)
        tray.setContextMenu(menu)

        tray.activated.connect(self._on_tray_activated)
        tray.show()
        return tray

    def _on_tray_activated(self, reason) -> None:
        if reason == QSystemTrayIcon.Trigger:
            self.toggle_window()

    def summon(self) -> None:
        self.window.center_on_screen()
        self.window.show()
        self.window.set_focus()
        self.bus.publish(RESET_SEARCH)

    def toggle_window(self) -> None:
        if self.window.isVisible():
            self.window.hide()
        else:
            self.summon()

    def refresh_roster(self) -> None:
        try:
            apps = self.provider.list_applications()
        except OSError:
            logger.exception("Roster refresh failed; keeping the previous roster")
            return
        self.session.refresh_roster(apps)

    def quit(self) -> None:
        self.shutdown()
        self.window.quitting = True
        QApplication.quit()

    def shutdown(self) -> None:
        self.refresh_timer.stop()
        self.hotkeys.stop()
        self.session.close()
        if self.tray is not None:
            self.tray.hide()


def parse_args(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="quicklaunch", description="Keyboard-driven application launcher.")
    parser.add_argument("--show", action="store_true", help="show the palette right away")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    data_dir = resolve_data_dir()
    log_path = setup_logging(data_dir)
    logger.info("%s starting (data: %s, log: %s)", APP_TITLE, data_dir, log_path or "stderr")

    app = QApplication(sys.argv[:1])
    app.setQuitOnLastWindowClosed(False)
    launcher_app = QuickLaunchApp(data_dir)
    if args.show or launcher_app.tray is None:
        launcher_app.summon()
    rc = app.exec()
    launcher_app.shutdown()
    return rc
