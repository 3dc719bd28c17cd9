"""Shared dataclasses used across services."""
from __future__ import annotations

from dataclasses import dataclass, field
from html import escape
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True, slots=True, order=True)
class DocumentPair:
    """Unordered document pair, always stored with ``left < right``."""

    left: int
    right: int

    def __post_init__(self) -> None:
        if self.left >= self.right:
            raise ValueError(f"DocumentPair requires left < right, got ({self.left}, {self.right})")

    def as_tuple(self) -> Tuple[int, int]:
        return (self.left, self.right)


@dataclass(frozen=True, slots=True)
class HighlightSpan:
    """Half-open character span ``[start, end)`` rendered inside a mark tag."""

    start: int
    end: int


@dataclass(slots=True)
class HighlightResult:
    """Both texts of a pair with their common spans marked."""

    left_html: str
    right_html: str
    left_spans: List[HighlightSpan] = field(default_factory=list)
    right_spans: List[HighlightSpan] = field(default_factory=list)

    def to_html(self, left_title: str = "Text 1", right_title: str = "Text 2") -> str:
        return (
            f"<h3>{escape(left_title)}:</h3><p>{self.left_html}</p>"
            f"<h3>{escape(right_title)}:</h3><p>{self.right_html}</p>"
        )


@dataclass(slots=True)
class ReportEntry:
    """Metrics and highlighted rendering for one of the top ranked pairs."""

    rank: int
    pair: DocumentPair
    similarity: float
    edit_distance: int
    containment: float
    highlight: HighlightResult

    def to_dict(self) -> Dict[str, object]:
        return {
            "rank": self.rank,
            "left": self.pair.left,
            "right": self.pair.right,
            "similarity": self.similarity,
            "edit_distance": self.edit_distance,
            "containment": self.containment,
            "left_html": self.highlight.left_html,
            "right_html": self.highlight.right_html,
        }


@dataclass(slots=True)
class Corpus:
    """Ordered document texts with the names they were loaded from."""

    documents: List[str]
    names: Optional[List[str]] = None

    def __len__(self) -> int:
        return len(self.documents)

    def name_of(self, index: int) -> str:
        if self.names is not None:
            return self.names[index]
        return f"Document {index}"
