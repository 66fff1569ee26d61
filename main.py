#===============================================================================
#  QuickLaunch  |  Keyboard-driven Application Launcher
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  A floating launcher palette summoned with a global hotkey. Type part of an
#  application name and press Enter to start the best match, or pick one of
#  your pinned shortcuts.
#  Supports:
#    - Ranked search: exact > prefix > substring > initials ("vsc" finds
#      Visual Studio Code), then fuzzy matches for typos
#    - Pin board with rename and drag reorder
#    - Auto-hide on focus loss, optional window position memory
#    - Tray icon + persistent state (quicklaunch_state.json)
#
#  Data Folder
#  -----------
#    ~/.quicklaunch/ (override with QUICKLAUNCH_HOME)
#      - quicklaunch_state.json            -> pins, preferences, fuzzy tuning
#      - logs/quicklaunch.log              -> rotating application log
#
#  Copyright & License Notes
#  -------------------------
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#
#  This source code is provided "AS IS", without warranty of any kind, express
#  or implied, including but not limited to the warranties of merchantability,
#  fitness for a particular purpose, and noninfringement.
#
#  Permission Notice (Personal/Internal Use)
#  -----------------------------------------
#  You may use, copy, and modify this software for personal or internal use.
#  Redistribution or public release should include this header and credit the
#  author. If you plan to open-source this project, consider replacing this
#  section with an OSI-approved license (e.g., MIT) for clarity.
#
#  Third-Party Components
#  ----------------------
#  This project uses third-party libraries (PySide6, rapidfuzz, pynput) which
#  are licensed separately by their respective authors. Ensure compliance with
#  their license terms when distributing this software.
#===============================================================================

from quicklaunch.app import main


if __name__ == "__main__":
    raise SystemExit(main())
