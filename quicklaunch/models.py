#===============================================================================
#  QuickLaunch | models.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Shared data models: launchable application entries and user pins.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class AppEntry:
    """A launchable application supplied by the directory provider."""
    name: str                        # display name (shortcut stem)
    path: str                        # unique identity key; what gets launched
    category: str = "Other"          # folder the entry was found under
    icon_ref: Optional[str] = None   # opaque icon handle, never produced here

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "path": self.path,
            "category": self.category,
            "icon": self.icon_ref,
        }

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "AppEntry":
        name = d.get("name")
        path = d.get("path")
        if not isinstance(name, str) or not isinstance(path, str) or not path:
            raise ValueError(f"Invalid app entry: {d!r}")
        category = d.get("category")
        icon = d.get("icon")
        return AppEntry(
            name=name,
            path=path,
            category=category if isinstance(category, str) else "Other",
            icon_ref=icon if isinstance(icon, str) else None,
        )


@dataclass(frozen=True)
class PinItem:
    """A user-pinned shortcut. `app` is a snapshot referenced by its path."""
    app: AppEntry
    alias: str
    order: int
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    @property
    def path(self) -> str:
        return self.app.path

    def with_order(self, order: int) -> "PinItem":
        return self if order == self.order else replace(self, order=order)

    def with_alias(self, alias: str) -> "PinItem":
        return replace(self, alias=alias)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "app": self.app.to_dict(),
            "alias": self.alias,
            "order": self.order,
        }

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "PinItem":
        app = AppEntry.from_dict(d.get("app") or {})
        pin_id = d.get("id")
        order = d.get("order")
        alias = d.get("alias")
        if not isinstance(pin_id, str) or not pin_id:
            raise ValueError(f"Invalid pin id: {pin_id!r}")
        if not isinstance(order, int) or isinstance(order, bool):
            raise ValueError(f"Invalid pin order: {order!r}")
        return PinItem(
            id=pin_id,
            app=app,
            alias=alias if isinstance(alias, str) else app.name,
            order=order,
        )
