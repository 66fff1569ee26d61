#===============================================================================
#  QuickLaunch | discovery.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Builds the application roster from shortcut folders.
#    - Windows: Start Menu (all users + current user) and the Desktop, .lnk
#    - Linux  : XDG application folders, .desktop
#  Uninstallers, readmes and help shortcuts are skipped; duplicate names keep
#  the first one found; the roster is sorted by name.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import configparser
import logging
import os
import sys
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from .constants import SCAN_MAX_DEPTH, SKIP_NAME_WORDS
from .models import AppEntry

logger = logging.getLogger(__name__)


def start_menu_dirs() -> List[Path]:
    dirs: List[Path] = []
    for var in ("PROGRAMDATA", "APPDATA"):
        v = os.environ.get(var)
        if v:
            dirs.append(Path(v) / "Microsoft" / "Windows" / "Start Menu" / "Programs")
    profile = os.environ.get("USERPROFILE")
    if profile:
        dirs.append(Path(profile) / "Desktop")
    return dirs


def xdg_application_dirs() -> List[Path]:
    data_home = os.environ.get("XDG_DATA_HOME") or str(Path.home() / ".local" / "share")
    data_dirs = os.environ.get("XDG_DATA_DIRS") or "/usr/local/share:/usr/share"
    roots = [data_home] + [d for d in data_dirs.split(":") if d]
    return [Path(r) / "applications" for r in roots]


def walk_files(root: Path, suffix: str, max_depth: int = SCAN_MAX_DEPTH) -> Iterator[Path]:
    """Yield files ending in `suffix` at most `max_depth` levels below root.

    A file directly inside root is level 1.
    """
    root_depth = len(root.parts)
    for dirpath, dirnames, filenames in os.walk(root, followlinks=True):
        depth = len(Path(dirpath).parts) - root_depth
        # files here are at level depth + 1, so subfolders would exceed max_depth
        if depth + 1 >= max_depth:
            dirnames[:] = []
        for name in sorted(filenames):
            if name.lower().endswith(suffix):
                yield Path(dirpath) / name


def is_noise(name: str) -> bool:
    lower = name.lower()
    return any(word in lower for word in SKIP_NAME_WORDS)


def desktop_entry_name(path: Path) -> Optional[str]:
    """Name= of a launchable .desktop file, or None when it shouldn't be listed."""
    parser = configparser.ConfigParser(interpolation=None, strict=False)
    try:
        parser.read(path, encoding="utf-8")
    except (OSError, configparser.Error, UnicodeDecodeError) as e:
        logger.debug("Skipping unreadable desktop entry %s: %s", path, e)
        return None
    if not parser.has_section("Desktop Entry"):
        return None
    section = parser["Desktop Entry"]
    if section.get("Type", "Application") != "Application":
        return None
    if section.get("NoDisplay", "false").lower() == "true" or section.get("Hidden", "false").lower() == "true":
        return None
    name = section.get("Name", "").strip()
    return name or path.stem


def scan_shortcut_dirs(dirs: Iterable[Path], suffix: str = ".lnk") -> List[AppEntry]:
    apps: List[AppEntry] = []
    for root in dirs:
        if not root.is_dir():
            continue
        category = root.name or "Other"
        for item in walk_files(root, suffix):
            if suffix == ".desktop":
                name = desktop_entry_name(item)
            else:
                name = item.stem
            if not name or is_noise(name):
                continue
            apps.append(AppEntry(name=name, path=str(item), category=category))

    seen = set()
    unique: List[AppEntry] = []
    for a in apps:
        if a.name in seen:
            continue
        seen.add(a.name)
        unique.append(a)
    unique.sort(key=lambda a: a.name.lower())
    return unique


class ShortcutDirectory:
    """Application directory provider backed by the platform shortcut folders."""

    def __init__(self, dirs: Optional[List[Path]] = None, suffix: Optional[str] = None):
        if sys.platform.startswith("win"):
            self.dirs = dirs if dirs is not None else start_menu_dirs()
            self.suffix = suffix or ".lnk"
        else:
            self.dirs = dirs if dirs is not None else xdg_application_dirs()
            self.suffix = suffix or ".desktop"

    def list_applications(self) -> List[AppEntry]:
        apps = scan_shortcut_dirs(self.dirs, self.suffix)
        logger.debug("Scanned %d folders, %d applications", len(self.dirs), len(apps))
        return apps
