"""HTML report of the most similar document pairs."""
from __future__ import annotations

from html import escape
from pathlib import Path
from typing import Optional, Sequence, Union

from docsim.core.logging import LogEvent, get_logger
from docsim.services.detection_pipeline import DetectionResult
from docsim.services.types import ReportEntry

logger = get_logger(__name__)

REPORT_TITLE = "Most Similar Text Pairs"


def _name(names: Optional[Sequence[str]], index: int) -> str:
    if names is None:
        return f"Document {index}"
    return names[index]


def render_entry(entry: ReportEntry, names: Optional[Sequence[str]] = None) -> str:
    """One report section: metrics heading followed by both highlighted texts."""
    left_name = _name(names, entry.pair.left)
    right_name = _name(names, entry.pair.right)
    heading = (
        f"<h2>Pair {entry.rank} (Similarity: {entry.similarity:.2f}, "
        f"Edit Distance: {entry.edit_distance}, "
        f"Broder Containment: {entry.containment:.2f})</h2>"
    )
    return heading + entry.highlight.to_html(left_name, right_name)


def render_report(result: DetectionResult, names: Optional[Sequence[str]] = None) -> str:
    """Full HTML document with one section per reported pair."""
    sections = "".join(render_entry(entry, names) for entry in result.entries)
    return (
        f"<html><head><meta charset=\"utf-8\"><title>{escape(REPORT_TITLE)}</title></head><body>"
        f"<h1>Top {len(result.entries)} {escape(REPORT_TITLE)}</h1>"
        f"{sections}"
        "</body></html>"
    )


def write_report(
    result: DetectionResult,
    path: Union[str, Path],
    names: Optional[Sequence[str]] = None,
) -> Path:
    """Render the report and write it to ``path`` as UTF-8."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_report(result, names), encoding="utf-8")
    logger.info(LogEvent.REPORT_WRITTEN, path=str(path), pairs=len(result.entries))
    return path
