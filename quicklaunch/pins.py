#===============================================================================
#  QuickLaunch | pins.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Persisted, ordered pin board (add / remove / rename / reorder).
#
#  Invariants after every mutation:
#    - order values are exactly 0..n-1 and match list position
#    - at most one pin per application path
#  Each mutation rewrites the whole list under PINS_KEY.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from typing import Any, List, Optional

from .constants import PINS_KEY
from .errors import StorageError
from .models import AppEntry, PinItem
from .storage import KeyValueStore

logger = logging.getLogger(__name__)


def _renumber(pins: List[PinItem]) -> List[PinItem]:
    return [p.with_order(i) for i, p in enumerate(pins)]


def parse_pins(data: Any) -> List[PinItem]:
    """Decode a persisted pin list. Anything malformed yields an empty board."""
    if not isinstance(data, list):
        return []
    try:
        pins = [PinItem.from_dict(d) for d in data]
    except (AttributeError, TypeError, ValueError) as e:
        logger.warning("Discarding malformed pin list: %s", e)
        return []

    pins.sort(key=lambda p: p.order)
    # Drop duplicate paths/ids that a hand-edited file might contain
    seen_paths, seen_ids, unique = set(), set(), []
    for p in pins:
        if p.path in seen_paths or p.id in seen_ids:
            continue
        seen_paths.add(p.path)
        seen_ids.add(p.id)
        unique.append(p)
    return _renumber(unique)


class PinStore:
    def __init__(self, store: KeyValueStore):
        self._store = store
        self._pins: List[PinItem] = parse_pins(store.get(PINS_KEY))

    @property
    def pins(self) -> List[PinItem]:
        return list(self._pins)

    def __len__(self) -> int:
        return len(self._pins)

    def apps(self) -> List[AppEntry]:
        return [p.app for p in self._pins]

    def is_pinned(self, path: str) -> bool:
        return any(p.path == path for p in self._pins)

    def find_by_path(self, path: str) -> Optional[PinItem]:
        return next((p for p in self._pins if p.path == path), None)

    def get(self, pin_id: str) -> Optional[PinItem]:
        return next((p for p in self._pins if p.id == pin_id), None)

    def _index_of(self, pin_id: str) -> int:
        for i, p in enumerate(self._pins):
            if p.id == pin_id:
                return i
        return -1

    # ----------------------------
    # Mutations
    # ----------------------------
    def add_pin(self, app: AppEntry) -> Optional[PinItem]:
        """Pin `app` at the end. Returns None if it was already pinned."""
        if self.is_pinned(app.path):
            return None
        pin = PinItem(app=app, alias=app.name, order=len(self._pins))
        self._commit(self._pins + [pin])
        return pin

    def remove_pin(self, pin_id: str) -> bool:
        remaining = [p for p in self._pins if p.id != pin_id]
        if len(remaining) == len(self._pins):
            return False
        self._commit(_renumber(remaining))
        return True

    def rename_pin(self, pin_id: str, alias: str) -> bool:
        idx = self._index_of(pin_id)
        if idx < 0:
            return False
        updated = list(self._pins)
        updated[idx] = updated[idx].with_alias(alias)
        self._commit(updated)
        return True

    def reorder_pins(self, from_id: str, to_id: str) -> bool:
        """Move `from_id` so it sits immediately before `to_id`."""
        if from_id == to_id:
            return False
        if self._index_of(from_id) < 0 or self._index_of(to_id) < 0:
            return False
        arr = list(self._pins)
        moving = arr.pop(self._index_of(from_id))
        to_idx = next(i for i, p in enumerate(arr) if p.id == to_id)
        arr.insert(to_idx, moving)
        self._commit(_renumber(arr))
        return True

    def _commit(self, pins: List[PinItem]) -> None:
        self._pins = pins
        try:
            self._store.set(PINS_KEY, [p.to_dict() for p in pins])
        except StorageError:
            logger.exception("Persisting %d pins failed; continuing with in-memory pins", len(pins))
