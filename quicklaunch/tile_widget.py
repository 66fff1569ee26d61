#===============================================================================
#  QuickLaunch | tile_widget.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Flat tiles for the pin board. The tile color is derived from the app path
#  so a pin keeps its color across sessions.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import hashlib
from dataclasses import dataclass

from PySide6.QtCore import Qt, QSize
from PySide6.QtGui import QFont
from PySide6.QtWidgets import QFrame, QLabel, QVBoxLayout

from .constants import PIN_TILE_COLORS


def tile_color_for_key(key: str) -> str:
    h = hashlib.sha1(key.encode("utf-8")).hexdigest()
    return PIN_TILE_COLORS[int(h[:2], 16) % len(PIN_TILE_COLORS)]


@dataclass
class TileVisual:
    bg_color: str
    title: str
    subtitle: str = ""


class PinTile(QFrame):
    """A pin on the board: alias on top, category underneath."""

    def __init__(self, visual: TileVisual, size: QSize, parent=None):
        super().__init__(parent)
        self.setObjectName("PinTile")
        self.setFixedSize(size)
        self._bg_color = visual.bg_color
        self.set_selected(False)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(2)
        layout.addStretch(1)

        title_label = QLabel(visual.title)
        title_label.setAlignment(Qt.AlignLeft | Qt.AlignBottom)
        title_font = QFont("Segoe UI", 10)
        title_font.setBold(True)
        title_label.setFont(title_font)
        title_label.setStyleSheet("color: white; background: transparent; border: none;")
        title_label.setWordWrap(True)
        layout.addWidget(title_label)

        subtitle_label = QLabel(visual.subtitle)
        subtitle_label.setAlignment(Qt.AlignLeft | Qt.AlignBottom)
        subtitle_label.setFont(QFont("Segoe UI", 8))
        subtitle_label.setStyleSheet("color: rgba(255,255,255,0.85); background: transparent; border: none;")
        subtitle_label.setVisible(bool(visual.subtitle.strip()))
        layout.addWidget(subtitle_label)

    def set_selected(self, selected: bool) -> None:
        border = "white" if selected else "transparent"
        self.setStyleSheet(f"""
        QFrame#PinTile {{
            background: {self._bg_color};
            border: 2px solid {border};
        }}
        """)
