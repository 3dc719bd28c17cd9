"""Marks the common substrings of a document pair for presentation."""
from __future__ import annotations

from html import escape
from typing import Iterable, List

from docsim.services.substring import find_common_substrings
from docsim.services.types import HighlightResult, HighlightSpan

MARK_OPEN = "<mark>"
MARK_CLOSE = "</mark>"


class HighlightRenderer:
    """精确定位公共子串并生成高亮文本"""

    def highlight(self, left_text: str, right_text: str, min_length: int) -> HighlightResult:
        """
        Wrap the first occurrence of every common substring in a mark tag,
        independently in each text.

        All spans are located against the unmodified texts, merged, and the
        markup is produced in a single left-to-right pass, so overlapping
        substrings never shift each other's offsets or nest tags.
        """
        common = sorted(find_common_substrings(left_text, right_text, min_length))

        left_spans = self.find_spans(left_text, common)
        right_spans = self.find_spans(right_text, common)

        return HighlightResult(
            left_html=self.render(left_text, left_spans),
            right_html=self.render(right_text, right_spans),
            left_spans=left_spans,
            right_spans=right_spans,
        )

    def find_spans(self, text: str, substrings: Iterable[str]) -> List[HighlightSpan]:
        """First-occurrence span of each substring, merged."""
        spans = []
        for substring in substrings:
            start = text.find(substring)
            if start != -1:
                spans.append(HighlightSpan(start, start + len(substring)))
        return self._merge_overlapping_spans(spans)

    def render(self, text: str, spans: List[HighlightSpan]) -> str:
        """Escape ``text`` and wrap each (sorted, disjoint) span in a mark tag."""
        parts = []
        cursor = 0
        for span in spans:
            parts.append(escape(text[cursor:span.start]))
            parts.append(MARK_OPEN + escape(text[span.start:span.end]) + MARK_CLOSE)
            cursor = span.end
        parts.append(escape(text[cursor:]))
        return "".join(parts)

    def _merge_overlapping_spans(self, spans: List[HighlightSpan]) -> List[HighlightSpan]:
        """合并重叠或相邻的span"""
        if not spans:
            return []

        sorted_spans = sorted(spans, key=lambda s: (s.start, s.end))
        merged = [sorted_spans[0]]

        for current in sorted_spans[1:]:
            last = merged[-1]
            if current.start <= last.end:  # 重叠或相邻
                merged[-1] = HighlightSpan(last.start, max(last.end, current.end))
            else:
                merged.append(current)

        return merged


def highlight(left_text: str, right_text: str, min_length: int) -> HighlightResult:
    """Module-level shortcut for ``HighlightRenderer().highlight``."""
    return HighlightRenderer().highlight(left_text, right_text, min_length)
