#===============================================================================
#  QuickLaunch | settings_panel.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Settings overlay: edit preferences, then Save (persist) or Reset (defaults).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from PySide6.QtCore import QTimer, Signal
from PySide6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
)

from .settings import SettingsStore

LANGUAGE_CHOICES = [("zh", "简体中文"), ("en", "English")]


class SettingsPanel(QFrame):
    close_requested = Signal()

    def __init__(self, settings: SettingsStore, parent=None):
        super().__init__(parent)
        self.setObjectName("SettingsPanel")
        self.settings = settings

        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 8, 12, 8)
        layout.setSpacing(8)

        header = QHBoxLayout()
        header.addWidget(QLabel("<b>General Settings</b>"))
        header.addStretch(1)
        btn_close = QPushButton("✕")
        btn_close.setFixedWidth(32)
        btn_close.clicked.connect(self.close_requested.emit)
        header.addWidget(btn_close)
        layout.addLayout(header)

        lang_row = QHBoxLayout()
        lang_row.addWidget(QLabel("Language"))
        self.language = QComboBox()
        for code, label in LANGUAGE_CHOICES:
            self.language.addItem(label, code)
        self.language.currentIndexChanged.connect(
            lambda _i: self._patch(language=self.language.currentData())
        )
        lang_row.addWidget(self.language)
        lang_row.addStretch(1)
        layout.addLayout(lang_row)

        self.auto_start = QCheckBox("Launch at login")
        self.minimize_to_tray = QCheckBox("Minimize to system tray")
        self.auto_hide = QCheckBox("Auto-hide when focus is lost")
        self.remember_pos = QCheckBox("Remember window position (off = always center)")
        for box, field in (
            (self.auto_start, "auto_start"),
            (self.minimize_to_tray, "minimize_to_tray"),
            (self.auto_hide, "auto_hide_on_blur"),
            (self.remember_pos, "remember_position"),
        ):
            box.toggled.connect(lambda checked, f=field: self._patch(**{f: checked}))
            layout.addWidget(box)

        self._hotkey = ""
        self.hotkey_label = QLabel("")
        layout.addWidget(self.hotkey_label)
        layout.addStretch(1)

        footer = QHBoxLayout()
        self.status = QLabel("")
        footer.addWidget(self.status)
        footer.addStretch(1)
        self.btn_reset = QPushButton("Reset Defaults")
        self.btn_reset.clicked.connect(self.reset)
        footer.addWidget(self.btn_reset)
        self.btn_save = QPushButton("Save Changes")
        self.btn_save.clicked.connect(self.save)
        footer.addWidget(self.btn_save)
        layout.addLayout(footer)

        self._status_timer = QTimer(self)
        self._status_timer.setSingleShot(True)
        self._status_timer.setInterval(2000)
        self._status_timer.timeout.connect(lambda: self.status.setText(""))

    def load(self, hotkey: str) -> None:
        """Push the current preferences into the widgets without re-patching."""
        self._hotkey = hotkey
        prefs = self.settings.prefs
        widgets = (self.language, self.auto_start, self.minimize_to_tray, self.auto_hide, self.remember_pos)
        for w in widgets:
            w.blockSignals(True)
        try:
            idx = self.language.findData(prefs.language)
            self.language.setCurrentIndex(max(idx, 0))
            self.auto_start.setChecked(prefs.auto_start)
            self.minimize_to_tray.setChecked(prefs.minimize_to_tray)
            self.auto_hide.setChecked(prefs.auto_hide_on_blur)
            self.remember_pos.setChecked(prefs.remember_position)
        finally:
            for w in widgets:
                w.blockSignals(False)
        self.hotkey_label.setText(f"Hotkey: <b>{hotkey}</b> (picked automatically)")
        self.btn_save.setEnabled(self.settings.dirty)

    def _patch(self, **changes) -> None:
        self.settings.patch(**changes)
        self.btn_save.setEnabled(True)

    def save(self) -> None:
        if self.settings.save():
            self.status.setText("✓ Saved")
            self._status_timer.start()
        else:
            self.status.setText("Could not save settings (see log)")
        self.btn_save.setEnabled(self.settings.dirty)

    def reset(self) -> None:
        self.settings.reset()
        self.load(self._hotkey)
