#===============================================================================
#  QuickLaunch | constants.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Central place for sizing, theme, timing, storage keys and file naming.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from PySide6.QtCore import QSize

APP_TITLE = "QuickLaunch"
DATA_DIR_NAME = ".quicklaunch"
DATA_DIR_ENV = "QUICKLAUNCH_HOME"
LOG_LEVEL_ENV = "QUICKLAUNCH_LOG_LEVEL"
STATE_FILE_NAME = "quicklaunch_state.json"
LOG_FILE_NAME = "quicklaunch.log"

# Namespaced keys inside the key/value store
PINS_KEY = "quicklaunch:pins"
SETTINGS_KEY = "quicklaunch:settings"
FUZZY_KEY = "quicklaunch:fuzzy"

# --- Search / session behavior ---
MAX_RESULTS = 8
BLUR_HIDE_DELAY_MS = 150
ROSTER_REFRESH_MS = 30_000

# Tried in order; the first one the OS accepts wins (pynput syntax, display label)
HOTKEY_CANDIDATES = [
    ("<ctrl>+<shift>+<space>", "Ctrl+Shift+Space"),
    ("<ctrl>+<shift>+<f1>", "Ctrl+Shift+F1"),
    ("<ctrl>+<shift>+q", "Ctrl+Shift+Q"),
]
HOTKEY_FAILED_MESSAGE = "All hotkeys are taken. Open the launcher from the tray icon."

# Discovery filters (lowercase substrings of the shortcut name)
SKIP_NAME_WORDS = ("uninstall", "readme", "help", "manual")
SCAN_MAX_DEPTH = 5

# --- Palette theme ---
PALETTE_BG = "#1b1b1f"
PALETTE_FG = "#f2f2f2"
PALETTE_ACCENT = "#0078D7"
PALETTE_WARN = "#FFB900"

PIN_TILE_COLORS = [
    "#0078D7",  # blue
    "#00B294",  # teal
    "#E81123",  # red
    "#FFB900",  # yellow
    "#8764B8",  # purple
    "#2D7D9A",  # steel
    "#107C10",  # green
    "#5C2D91",  # deep purple
]

WINDOW_SIZE = QSize(640, 460)
PIN_TILE_SIZE = QSize(132, 84)
PIN_GRID_SIZE = QSize(142, 94)
