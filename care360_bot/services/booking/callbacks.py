"""
Parsing of callback payloads into CallbackToken.
"""

import re

from ...core.enums import Stage
from ...core.exceptions import MalformedCallbackError
from ...core.models.callback import ById, ByName, CallbackToken, CategorySelector

_NUMERIC = re.compile(r"[0-9]+")

# Segment counts each keyword may carry after it
_SEGMENT_COUNTS = {
    "category": (0, 1),
    "date": (2,),
    "time": (3,),
}


def parse_selector(segment: str) -> CategorySelector:
    """Decide once whether a category segment is an id or a profession."""
    if _NUMERIC.fullmatch(segment):
        return ById(int(segment))
    return ByName(segment)


def _split_segments(keyword: str, rest: str):
    if keyword == "time":
        # The time range keeps its own colons ("09:00 - 09:30")
        return rest.split(":", 2)
    return rest.split(":")


def parse_callback(payload: str) -> CallbackToken:
    """
    Parse a callback payload; the stage follows from the number of segments.

    Raises:
        MalformedCallbackError: unknown keyword, wrong segment count or empty segment
    """
    if not payload:
        raise MalformedCallbackError("empty callback payload")

    keyword, sep, rest = payload.partition(":")
    if keyword not in _SEGMENT_COUNTS:
        raise MalformedCallbackError(f"unknown callback keyword: {payload!r}")

    segments = _split_segments(keyword, rest) if sep else []
    if len(segments) not in _SEGMENT_COUNTS[keyword] or not all(segments):
        raise MalformedCallbackError(f"bad {keyword} payload: {payload!r}")

    padded = segments + [None] * (3 - len(segments))
    return CallbackToken(
        Stage.from_segment_count(len(segments)),
        selector=parse_selector(padded[0]) if padded[0] is not None else None,
        date=padded[1],
        time_range=padded[2],
    )
