#===============================================================================
#  QuickLaunch | launcher.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Starts a roster entry through the OS shell (shortcut, .desktop or file) and
#  hides the palette window.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path
from typing import Callable, List

from .errors import LaunchError


def open_command(path: str) -> List[str]:
    """Command line that asks the desktop to open `path` (non-Windows)."""
    if sys.platform == "darwin":
        return ["open", path]
    if path.lower().endswith(".desktop"):
        return ["gio", "launch", path]
    return ["xdg-open", path]


def _startfile(path: str) -> None:
    # Windows shortcut (.lnk) support uses os.startfile
    if hasattr(os, "startfile"):
        os.startfile(path)  # type: ignore[attr-defined]
    else:
        subprocess.Popen(
            open_command(path),
            cwd=str(Path(path).parent),
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )


class AppLauncher:
    def __init__(self, hide_window: Callable[[], None]):
        self._hide_window = hide_window

    def launch(self, path: str) -> None:
        if not path:
            raise LaunchError(path, "empty path")
        if not Path(path).exists():
            raise LaunchError(path, "target does not exist")
        try:
            _startfile(path)
        except OSError as e:
            raise LaunchError(path, str(e)) from e

    def hide(self) -> None:
        self._hide_window()
