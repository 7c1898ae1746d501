"""Parsing of landmark coordinate strings.

The accepted grammar is::

    pointlist := pair ("," pair)*
    pair      := NUMBER " " NUMBER
    NUMBER    := digit+ ("." digit+)?

Numbers are truncated to their integer part, the fractional digits are
discarded without rounding.
"""

__all__ = ["ParserState", "parse_points", "format_points"]

import enum
import re
from typing import Iterable, List, Optional

from .exceptions import MalformedInput
from .geometry import Point
from .logging_utils import get_logger

logger = get_logger(__name__)

_NUMBER = re.compile(r"[0-9]+(?:\.[0-9]+)?")
_NUMERIC = frozenset("0123456789.")


class ParserState(enum.Enum):
    ACCUMULATING = "accumulating"
    AFTER_SPACE = "after_space"
    AFTER_COMMA = "after_comma"


class _Char(enum.Enum):
    NUMERIC = "numeric"
    SPACE = "space"
    COMMA = "comma"
    OTHER = "other"


def _classify(ch: str) -> _Char:
    if ch in _NUMERIC:
        return _Char.NUMERIC
    if ch == " ":
        return _Char.SPACE
    if ch == ",":
        return _Char.COMMA
    return _Char.OTHER


# (state, character class) -> (next state, action)
# "extend" grows the current numeric run, "x" closes it as the x coordinate,
# "y" closes it as the y coordinate and emits the pair.
_TRANSITIONS = {
    (ParserState.AFTER_COMMA, _Char.NUMERIC): (ParserState.ACCUMULATING, "extend"),
    (ParserState.AFTER_SPACE, _Char.NUMERIC): (ParserState.ACCUMULATING, "extend"),
    (ParserState.ACCUMULATING, _Char.NUMERIC): (ParserState.ACCUMULATING, "extend"),
    (ParserState.ACCUMULATING, _Char.SPACE): (ParserState.AFTER_SPACE, "x"),
    (ParserState.ACCUMULATING, _Char.COMMA): (ParserState.AFTER_COMMA, "y"),
}


def _to_int(text: str, begin: int, end: int) -> int:
    run = text[begin:end]
    if not _NUMBER.fullmatch(run):
        raise MalformedInput(f"Invalid number {run!r}", begin, text)
    try:
        return int(run.partition(".")[0])
    except ValueError as e:
        raise MalformedInput("Number cannot be converted", begin, text, cause=e) from e


def parse_points(text: str, flush_trailing: bool = True) -> List[Point]:
    """Parse a coordinate string into an ordered list of points.

    A single left to right scan drives the state machine in ``_TRANSITIONS``;
    ``begin`` marks the start of the numeric run being accumulated.

    Args:
        text (str): Coordinate string such as ``"260.04 888.61,269.97 986.23"``.
        flush_trailing (bool, optional): Emit a last pair that is not followed by
            a comma. When False the pair is dropped, as the comma-gated legacy
            scanner did. Defaults to True.

    Raises:
        TypeError: If text is not a string
        MalformedInput: If the string does not follow the grammar

    Returns:
        List[Point]: The parsed points in input order
    """
    if not isinstance(text, str):
        raise TypeError("text must be a string")

    text = text.strip()
    points: List[Point] = []
    state = ParserState.AFTER_COMMA
    begin = 0
    x: Optional[int] = None

    for i, ch in enumerate(text):
        cls = _classify(ch)
        try:
            state_next, action = _TRANSITIONS[(state, cls)]
        except KeyError:
            if cls is _Char.OTHER:
                raise MalformedInput(f"Unexpected character {ch!r}", i, text) from None
            raise MalformedInput(f"Unexpected {cls.value} in state {state.value}", i, text) from None

        if action == "extend":
            if state is not ParserState.ACCUMULATING:
                begin = i
        elif action == "x":
            if x is not None:
                raise MalformedInput("Pair has more than two coordinates", i, text)
            x = _to_int(text, begin, i)
        else:
            if x is None:
                raise MalformedInput("Pair is missing its y coordinate", i, text)
            points.append(Point(x, _to_int(text, begin, i)))
            x = None
        state = state_next

    if state is ParserState.ACCUMULATING:
        if x is None:
            raise MalformedInput("Pair is missing its y coordinate", len(text), text)
        pending = Point(x, _to_int(text, begin, len(text)))
        if flush_trailing:
            points.append(pending)
        else:
            logger.debug("Dropping trailing pair %s not followed by a comma", pending)

    return points


def format_points(points: Iterable[Iterable[int]]) -> str:
    """Write points back as a coordinate string, without a trailing comma."""
    return ",".join(f"{int(x)} {int(y)}" for x, y in points)
