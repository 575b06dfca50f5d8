"""Substring filter over filterable items.

The filter never mutates its source: ``apply`` returns a new list preserving
the original relative order and records which source indices matched. An
empty query means everything matches.
"""

from __future__ import annotations

import logging
from typing import Sequence, TypeVar

from .types import FilterableItem, MatchAware

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Filter:
    """Query state plus the matching operations that use it."""

    def __init__(self, query: str = "", case_sensitive: bool = False):
        self._query = ""
        self._active = False
        self._case_sensitive = case_sensitive
        self._matches: list[int] = []
        self.set_query(query)

    def __repr__(self) -> str:
        return f"Filter(query={self._query!r}, case_sensitive={self._case_sensitive})"

    # ── state ─────────────────────────────────────────────────────────────

    @property
    def query(self) -> str:
        return self._query

    @property
    def active(self) -> bool:
        return self._active

    @property
    def case_sensitive(self) -> bool:
        return self._case_sensitive

    @property
    def matches(self) -> list[int]:
        """Source indices matched by the last ``apply``."""
        return list(self._matches)

    def set_matches(self, matches: Sequence[int]) -> None:
        self._matches = list(matches)

    def set_query(self, query: str) -> None:
        """Set the query. Callers re-apply against their own source."""
        self._query = query
        self._active = query != ""

    def set_case_sensitive(self, case_sensitive: bool) -> None:
        self._case_sensitive = case_sensitive

    def clear(self) -> None:
        self._query = ""
        self._active = False
        self._matches = []

    # ── matching ──────────────────────────────────────────────────────────

    def apply(self, items: Sequence[T]) -> list[T]:
        """Return the items whose filter value contains the query.

        Match-aware items receive every occurrence offset of the query in
        their filter value. Items without a filter value never match an
        active query.
        """
        self._matches = []
        if not self._active:
            return list(items)

        query = self._prepare_query()
        result: list[T] = []
        for i, item in enumerate(items):
            if not isinstance(item, FilterableItem):
                continue
            value = item.filter_value()
            if query not in self._fold(value):
                continue
            result.append(item)
            self._matches.append(i)
            if isinstance(item, MatchAware):
                item.set_match_indexes(self.find_all_matches(value))

        logger.debug("filter %r kept %d of %d items", self._query, len(result), len(items))
        return result

    def apply_to_strings(self, values: Sequence[str]) -> list[str]:
        if not self._active:
            return list(values)
        query = self._prepare_query()
        return [value for value in values if query in self._fold(value)]

    def match_indexes(self, items: Sequence[object]) -> list[int]:
        """Indices of matching items, without touching ``matches``."""
        if not self._active:
            return []
        query = self._prepare_query()
        return [
            i
            for i, item in enumerate(items)
            if isinstance(item, FilterableItem) and query in self._fold(item.filter_value())
        ]

    def find_all_matches(self, text: str) -> list[int]:
        """Start offsets of every non-overlapping occurrence in ``text``."""
        return [start for start, _ in self.find_all_spans(text)]

    def find_all_spans(self, text: str) -> list[tuple[int, int]]:
        """Half-open ``(start, end)`` spans of each occurrence, in ``text`` offsets.

        Spans stay correct when case folding changes a character's length
        (``"İ".lower()`` is two characters).
        """
        if not self._active:
            return []
        query = self._prepare_query()
        haystack, origin = self._fold_with_origin(text)
        spans: list[tuple[int, int]] = []
        idx = haystack.find(query)
        while idx != -1:
            end = idx + len(query)
            spans.append((origin[idx], origin[end - 1] + 1))
            idx = haystack.find(query, end)
        return spans

    def match_count(self, text: str) -> int:
        return len(self.find_all_matches(text))

    def has_match_in(self, text: str) -> bool:
        """True if ``text`` contains the query (always True when inactive)."""
        if not self._active:
            return True
        return self._prepare_query() in self._fold(text)

    def highlight(self, text: str, before: str, after: str) -> str:
        """Wrap every occurrence of the query in ``text`` with markers."""
        if not self._active:
            return text
        parts: list[str] = []
        last = 0
        for start, end in self.find_all_spans(text):
            if start < last:
                continue
            parts.append(text[last:start])
            parts.append(f"{before}{text[start:end]}{after}")
            last = end
        parts.append(text[last:])
        return "".join(parts)

    # ── internals ─────────────────────────────────────────────────────────

    def _fold(self, text: str) -> str:
        return self._fold_with_origin(text)[0]

    def _fold_with_origin(self, text: str) -> tuple[str, list[int]]:
        """Folded text plus, for each folded character, its index in ``text``."""
        if self._case_sensitive:
            return text, list(range(len(text)))
        folded: list[str] = []
        origin: list[int] = []
        for i, ch in enumerate(text):
            low = ch.lower()
            folded.append(low)
            origin.extend([i] * len(low))
        return "".join(folded), origin

    def _prepare_query(self) -> str:
        return self._fold(self._query)
