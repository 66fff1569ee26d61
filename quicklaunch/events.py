#===============================================================================
#  QuickLaunch | events.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Synchronous topic pub/sub for signals coming from the hotkey listener and
#  the tray. Publishing must happen on the GUI thread (hotkeys.py hops
#  threads through a queued Qt signal before publishing here).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)

RESET_SEARCH = "reset-search"
HOTKEY_REGISTERED = "hotkey-registered"
HOTKEY_FAILED = "hotkey-failed"

Handler = Callable[..., None]


class Subscription:
    """Handle returned by subscribe(); calling it (or .cancel()) unsubscribes."""

    def __init__(self, release: Callable[[], None]):
        self._release = release
        self.active = True

    def cancel(self) -> None:
        if not self.active:
            return
        self.active = False
        self._release()

    __call__ = cancel


class EventBus:
    def __init__(self) -> None:
        self._subscribers: Dict[str, List[Handler]] = defaultdict(list)

    def subscribe(self, topic: str, handler: Handler) -> Subscription:
        self._subscribers[topic].append(handler)

        def release() -> None:
            handlers = self._subscribers.get(topic, [])
            if handler in handlers:
                handlers.remove(handler)

        return Subscription(release)

    def subscriber_count(self, topic: str) -> int:
        return len(self._subscribers.get(topic, []))

    def publish(self, topic: str, *args: Any) -> None:
        handlers = list(self._subscribers.get(topic, []))
        if not handlers:
            logger.debug("No subscribers for topic '%s'", topic)
            return
        for handler in handlers:
            # One failing handler must not stop the rest
            try:
                handler(*args)
            except Exception:
                logger.exception("Handler %r failed for topic '%s'", handler, topic)
