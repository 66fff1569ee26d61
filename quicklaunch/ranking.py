#===============================================================================
#  QuickLaunch | ranking.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Search ranking over the application roster.
#
#  Two phases:
#    1) deterministic tiers: exact (0) > prefix (1) > substring (2) >
#       initials (3), stable within a tier (roster order)
#    2) fuzzy fallback (rapidfuzz partial_ratio over name + category) for
#       whatever phase 1 didn't already return
#
#  The fuzzy index is built once per roster refresh (Catalog.refresh) and
#  reused for every keystroke.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, NamedTuple, Optional, Sequence, Tuple

from rapidfuzz import fuzz, process, utils

from .constants import MAX_RESULTS
from .models import AppEntry

logger = logging.getLogger(__name__)

TIER_EXACT = 0
TIER_PREFIX = 1
TIER_SUBSTRING = 2
TIER_INITIALS = 3

_WORD_SPLIT_RE = re.compile(r"[\s\-_.]+")
_WHITESPACE_RE = re.compile(r"\s+")


class RankedResult(NamedTuple):
    entry: AppEntry
    tier: Optional[int]  # None = fuzzy-only


def initials(name: str) -> str:
    """'Visual Studio Code' -> 'vsc'."""
    return "".join(tok[:1] for tok in _WORD_SPLIT_RE.split(name or "")).lower()


def initials_match(name: str, query: str) -> bool:
    """True when the query (whitespace removed) is a contiguous run of the initials."""
    q = _WHITESPACE_RE.sub("", (query or "").lower())
    if not q:
        return False
    return q in initials(name)


def tier_of(name: str, query: str) -> Optional[int]:
    """Deterministic tier for `name` against a trimmed query, or None."""
    n = (name or "").lower()
    q = (query or "").lower()
    if not q:
        return None
    if n == q:
        return TIER_EXACT
    if n.startswith(q):
        return TIER_PREFIX
    if q in n:
        return TIER_SUBSTRING
    if initials_match(name, q):
        return TIER_INITIALS
    return None


def match_span(name: str, query: str) -> Optional[Tuple[int, int]]:
    """(start, end) of the first case-insensitive occurrence of the query in name."""
    q = (query or "").strip().lower()
    if not q:
        return None
    start = (name or "").lower().find(q)
    if start < 0:
        return None
    return start, start + len(q)


@dataclass(frozen=True)
class FuzzyConfig:
    """Tuning for the fuzzy fallback.

    threshold: maximum normalized distance (0..1) for a field to count as a match
    name_weight / category_weight: relevance multipliers per field
    """
    threshold: float = 0.4
    name_weight: float = 1.0
    category_weight: float = 0.5

    def __post_init__(self):
        if not 0.0 <= self.threshold <= 1.0:
            raise ValueError(f"threshold must be within [0, 1], got {self.threshold}")
        if self.name_weight < 0 or self.category_weight < 0:
            raise ValueError("field weights must be >= 0")

    @property
    def score_cutoff(self) -> float:
        return (1.0 - self.threshold) * 100.0

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "FuzzyConfig":
        base = FuzzyConfig()
        values = {}
        for name in ("threshold", "name_weight", "category_weight"):
            v = d.get(name, getattr(base, name))
            if isinstance(v, bool) or not isinstance(v, (int, float)):
                raise ValueError(f"{name} must be a number, got {v!r}")
            values[name] = float(v)
        return FuzzyConfig(**values)


class FuzzyIndex:
    """Pre-processed name/category choices for one roster snapshot."""

    def __init__(self, entries: Iterable[AppEntry], config: Optional[FuzzyConfig] = None):
        self.entries: List[AppEntry] = list(entries)
        self.config = config or FuzzyConfig()
        self._names = [utils.default_process(e.name) for e in self.entries]
        self._categories = [utils.default_process(e.category or "") for e in self.entries]

    def search(self, query: str) -> List[AppEntry]:
        """Entries within the distance threshold, most relevant first."""
        q = utils.default_process(query or "")
        if not q or not self.entries:
            return []

        relevance: Dict[int, float] = {}
        fields = (
            (self._names, self.config.name_weight),
            (self._categories, self.config.category_weight),
        )
        for choices, weight in fields:
            if weight <= 0:
                continue
            matches = process.extract(
                q,
                choices,
                scorer=fuzz.partial_ratio,
                processor=None,
                score_cutoff=self.config.score_cutoff,
                limit=None,
            )
            for _choice, score, idx in matches:
                r = weight * score / 100.0
                if r > relevance.get(idx, 0.0):
                    relevance[idx] = r

        ordered = sorted(relevance, key=lambda i: (-relevance[i], i))
        return [self.entries[i] for i in ordered]


def classify(corpus: Sequence[AppEntry], query: str) -> List[RankedResult]:
    """Direct (tiered) matches only, sorted by tier, stable, unique by path."""
    q = (query or "").strip()
    if not q:
        return []
    seen = set()
    direct: List[RankedResult] = []
    for entry in corpus:
        if entry.path in seen:
            continue
        t = tier_of(entry.name, q)
        if t is None:
            continue
        seen.add(entry.path)
        direct.append(RankedResult(entry, t))
    direct.sort(key=lambda r: r.tier)
    return direct


def rank(
    corpus: Sequence[AppEntry],
    query: str,
    fuzzy_index: Optional[FuzzyIndex] = None,
    limit: int = MAX_RESULTS,
) -> List[AppEntry]:
    """Top `limit` entries for `query`.

    An empty/whitespace query returns the head of the roster unchanged.
    Without a prebuilt `fuzzy_index` a throwaway one is built; long-lived
    callers should go through Catalog instead.
    """
    q = (query or "").strip()
    if not q:
        return list(corpus[:limit])

    results = [r.entry for r in classify(corpus, q)]
    if len(results) >= limit:
        return results[:limit]

    index = fuzzy_index if fuzzy_index is not None else FuzzyIndex(corpus)
    seen = {e.path for e in results}
    for entry in index.search(q):
        if entry.path in seen:
            continue
        seen.add(entry.path)
        results.append(entry)
        if len(results) >= limit:
            break
    return results


class Catalog:
    """Current roster plus its fuzzy index."""

    def __init__(self, entries: Iterable[AppEntry] = (), fuzzy: Optional[FuzzyConfig] = None):
        self.fuzzy_config = fuzzy or FuzzyConfig()
        self.entries: List[AppEntry] = []
        self._index = FuzzyIndex([], self.fuzzy_config)
        self.refresh(entries)

    def refresh(self, entries: Iterable[AppEntry]) -> bool:
        """Swap in a new roster. Returns False (and keeps the index) if nothing changed."""
        entries = list(entries)
        if entries == self.entries and self._index.entries == entries:
            return False
        self.entries = entries
        self._index = FuzzyIndex(entries, self.fuzzy_config)
        logger.info("Catalog refreshed: %d applications", len(entries))
        return True

    def search(self, query: str) -> List[AppEntry]:
        return rank(self.entries, query, self._index)

    def default_results(self) -> List[AppEntry]:
        return self.entries[:MAX_RESULTS]
