#===============================================================================
#  QuickLaunch | errors.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations


class QuickLaunchError(RuntimeError):
    """Base class for launcher errors."""


class LaunchError(QuickLaunchError):
    """The launch target could not be started."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Could not launch {path}: {reason}")
        self.path = path
        self.reason = reason


class StorageError(QuickLaunchError):
    """The persisted state file could not be written."""
