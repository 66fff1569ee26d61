#===============================================================================
#  QuickLaunch | settings.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  User preferences (language, window behavior, hotkey label) and the fuzzy
#  search tuning. Both load with defaults merged over whatever is persisted.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict

from .constants import FUZZY_KEY, SETTINGS_KEY
from .errors import StorageError
from .ranking import FuzzyConfig
from .storage import KeyValueStore

logger = logging.getLogger(__name__)

LANGUAGES = ("zh", "en")


@dataclass(frozen=True)
class Preferences:
    language: str = "zh"
    auto_start: bool = False
    minimize_to_tray: bool = True
    auto_hide_on_blur: bool = True
    remember_position: bool = False   # False = always re-center on summon
    hotkey: str = "Ctrl+Shift+Space"  # display only; binding lives in hotkeys.py

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_dict(d: Any) -> "Preferences":
        """Merge persisted values over the defaults, dropping anything odd."""
        prefs = Preferences()
        if not isinstance(d, dict):
            return prefs
        patch = {}
        for f in fields(Preferences):
            if f.name not in d:
                continue
            value = d[f.name]
            if isinstance(value, type(getattr(prefs, f.name))):
                patch[f.name] = value
        if patch.get("language") not in (None, *LANGUAGES):
            patch.pop("language")
        return replace(prefs, **patch)


class SettingsStore:
    """Edit-then-save preferences, mirroring the settings panel workflow."""

    def __init__(self, store: KeyValueStore):
        self._store = store
        self.prefs = Preferences.from_dict(store.get(SETTINGS_KEY))
        self.dirty = False

    def patch(self, **changes: Any) -> Preferences:
        self.prefs = replace(self.prefs, **changes)
        self.dirty = True
        return self.prefs

    def reset(self) -> Preferences:
        self.prefs = Preferences()
        self.dirty = True
        return self.prefs

    def save(self) -> bool:
        try:
            self._store.set(SETTINGS_KEY, self.prefs.to_dict())
        except StorageError:
            logger.exception("Saving preferences failed; keeping them in memory")
            return False
        self.dirty = False
        return True


def load_fuzzy_config(store: KeyValueStore) -> FuzzyConfig:
    """Fuzzy tuning from the state file; defaults for anything missing or invalid."""
    data = store.get(FUZZY_KEY)
    if not isinstance(data, dict):
        return FuzzyConfig()
    try:
        return FuzzyConfig.from_dict(data)
    except ValueError as e:
        logger.warning("Ignoring fuzzy settings: %s", e)
        return FuzzyConfig()
