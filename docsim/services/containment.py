"""Exact Broder containment over every substring of a text.

No shingling and no min-hash sketch: both substring sets are enumerated in
full, which costs O(n^2) strings per text and roughly O(n^3) characters of
memory. The estimator refuses texts longer than ``containment_max_length``
and logs a ``slow_operation`` warning above ``containment_warn_length``.
It is meant for short to medium documents only.
"""
from __future__ import annotations

from typing import Optional, Set

from docsim.core.config import get_settings
from docsim.core.errors import ResourceExhaustionError
from docsim.core.logging import LogEvent, get_logger

logger = get_logger(__name__)

OPERATION = "broder_containment"


def all_substrings(text: str) -> Set[str]:
    """Every distinct contiguous span of ``text``."""
    size = len(text)
    return {text[start:end] for start in range(size) for end in range(start + 1, size + 1)}


def _check_length(text: str, max_length: int, warn_length: int) -> None:
    length = len(text)
    if max_length and length > max_length:
        raise ResourceExhaustionError(OPERATION, length, max_length)
    if warn_length and length > warn_length:
        logger.warning(
            LogEvent.SLOW_OPERATION,
            operation=OPERATION,
            length=length,
            substrings=length * (length + 1) // 2,
        )


def containment(
    text_a: str,
    text_b: str,
    max_length: Optional[int] = None,
    warn_length: Optional[int] = None,
) -> float:
    """
    Fraction of the distinct substrings of ``text_a`` that also occur in ``text_b``.

    Args:
        text_a: text whose substrings are counted
        text_b: text searched for them
        max_length: refuse longer texts (0 disables); defaults to settings
        warn_length: warn above this length (0 disables); defaults to settings

    Returns:
        Ratio in [0, 1]; 0.0 when ``text_a`` is empty.

    Raises:
        ResourceExhaustionError: either text exceeds ``max_length``.
    """
    if not text_a:
        return 0.0

    settings = get_settings()
    if max_length is None:
        max_length = settings.containment_max_length
    if warn_length is None:
        warn_length = settings.containment_warn_length

    _check_length(text_a, max_length, warn_length)
    _check_length(text_b, max_length, warn_length)

    substrings_a = all_substrings(text_a)
    substrings_b = all_substrings(text_b)

    contained = sum(1 for s in substrings_a if s in substrings_b)
    return contained / len(substrings_a)
