#===============================================================================
#  QuickLaunch | selection.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Selection / navigation state machine for the palette.
#
#  State is an immutable SelectionState; every keyboard intent goes through
#  reduce(state, intent, length) and yields the next state plus at most one
#  command for the session to carry out (launch the row, hide the window).
#  The mode (pins vs search) is never stored: it is derived from the query.
#  The highlighted row is clamped against the active list length on every
#  read, so a list that shrinks under the cursor can't produce a stale index.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class Mode(str, Enum):
    PINS = "pins"
    SEARCH = "search"


class Intent(str, Enum):
    MOVE_DOWN = "move_down"
    MOVE_UP = "move_up"
    TAB = "tab"
    SHIFT_TAB = "shift_tab"
    CONFIRM = "confirm"
    CANCEL = "cancel"


class Command(str, Enum):
    LAUNCH = "launch"
    HIDE = "hide"


def clamp_index(index: int, length: int) -> int:
    if length <= 0:
        return 0
    return max(0, min(index, length - 1))


@dataclass(frozen=True)
class SelectionState:
    query: str = ""
    selected_index: int = 0
    overlay_open: bool = False

    @property
    def mode(self) -> Mode:
        return Mode.SEARCH if self.query.strip() else Mode.PINS

    def index_for(self, length: int) -> int:
        """Selected row, re-validated against the current list length."""
        return clamp_index(self.selected_index, length)


@dataclass(frozen=True)
class Transition:
    state: SelectionState
    command: Optional[Command] = None
    index: int = 0  # row to launch when command is LAUNCH


def reduce(state: SelectionState, intent: Intent, length: int) -> Transition:
    current = state.index_for(length)

    if intent in (Intent.MOVE_DOWN, Intent.TAB):
        return Transition(replace(state, selected_index=clamp_index(current + 1, length)))

    if intent in (Intent.MOVE_UP, Intent.SHIFT_TAB):
        return Transition(replace(state, selected_index=clamp_index(current - 1, length)))

    if intent == Intent.CONFIRM:
        if length <= 0:
            return Transition(state)
        return Transition(replace(state, selected_index=current), Command.LAUNCH, current)

    if intent == Intent.CANCEL:
        if state.overlay_open:
            return Transition(replace(state, overlay_open=False))
        if state.query:
            return Transition(query_changed(state, ""))
        return Transition(state, Command.HIDE)

    raise ValueError(f"Unknown intent: {intent!r}")


def query_changed(state: SelectionState, query: str) -> SelectionState:
    # New query = new active list (or a mode flip), so the cursor goes home.
    return replace(state, query=query, selected_index=0)


def select(state: SelectionState, index: int, length: int) -> SelectionState:
    return replace(state, selected_index=clamp_index(index, length))


def summon_reset(state: SelectionState) -> SelectionState:
    return SelectionState()


def open_overlay(state: SelectionState) -> SelectionState:
    return replace(state, overlay_open=True)


def close_overlay(state: SelectionState) -> SelectionState:
    return replace(state, overlay_open=False)
