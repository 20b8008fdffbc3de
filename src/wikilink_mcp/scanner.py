"""Link context scanner for wiki-style links.

Given a document and a cursor offset, works out whether the cursor sits inside
an open ``[[Note`` token (complete note identifiers) or an open ``[[Note#``
token (complete headings of ``Note``).

The scan reads backward from the character before the cursor to the start of
the line. Two kinds of memory are kept while scanning:

- bracket memory, whether the previous character read was ``[`` and/or ``]``.
  It is a small state machine (``BracketState``) driven by ``TRANSITIONS``.
  Any character other than ``#``, ``[`` and ``]`` clears it.
- hash memory, the offset of the leftmost ``#`` read so far. Nothing clears it
  until the scan ends, so it lives beside the table rather than in it.
"""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class NoContext:
    """The cursor is not inside an open wiki-link."""


@dataclass(frozen=True)
class FileLinkContext:
    """The cursor is inside ``[[...`` with no heading separator yet."""


@dataclass(frozen=True)
class HeadingLinkContext:
    """The cursor is inside ``[[note_identifier#...``."""

    note_identifier: str


LinkContext = NoContext | FileLinkContext | HeadingLinkContext


class BracketState(Enum):
    SCANNING = "scanning"
    ONE_OPEN = "one_open"
    ONE_CLOSE = "one_close"
    OPEN_AND_CLOSE = "open_and_close"


class Symbol(Enum):
    HASH = "#"
    OPEN = "["
    CLOSE = "]"
    NEWLINE = "\n"
    OTHER = "other"


class Action(Enum):
    CONTINUE = "continue"
    MARK_HEADING = "mark_heading"  # remember this '#'
    OPEN_LINK = "open_link"  # read '[[': stop, cursor is inside a link
    CLOSED_LINK = "closed_link"  # read ']]': stop, link closed before cursor
    LINE_START = "line_start"  # stop, no link on this line


_S = BracketState

# (state, symbol) -> (next state, action)
TRANSITIONS: dict[tuple[BracketState, Symbol], tuple[BracketState, Action]] = {
    (_S.SCANNING, Symbol.OPEN): (_S.ONE_OPEN, Action.CONTINUE),
    (_S.SCANNING, Symbol.CLOSE): (_S.ONE_CLOSE, Action.CONTINUE),
    (_S.ONE_OPEN, Symbol.OPEN): (_S.ONE_OPEN, Action.OPEN_LINK),
    (_S.ONE_OPEN, Symbol.CLOSE): (_S.OPEN_AND_CLOSE, Action.CONTINUE),
    (_S.ONE_CLOSE, Symbol.OPEN): (_S.OPEN_AND_CLOSE, Action.CONTINUE),
    (_S.ONE_CLOSE, Symbol.CLOSE): (_S.ONE_CLOSE, Action.CLOSED_LINK),
    (_S.OPEN_AND_CLOSE, Symbol.OPEN): (_S.OPEN_AND_CLOSE, Action.OPEN_LINK),
    (_S.OPEN_AND_CLOSE, Symbol.CLOSE): (_S.OPEN_AND_CLOSE, Action.CLOSED_LINK),
}
for _state in BracketState:
    # '#' leaves bracket memory untouched
    TRANSITIONS[(_state, Symbol.HASH)] = (_state, Action.MARK_HEADING)
    TRANSITIONS[(_state, Symbol.OTHER)] = (_S.SCANNING, Action.CONTINUE)
    TRANSITIONS[(_state, Symbol.NEWLINE)] = (_state, Action.LINE_START)

_SYMBOLS = {s.value: s for s in Symbol if s is not Symbol.OTHER}


def classify(char: str) -> Symbol:
    return _SYMBOLS.get(char, Symbol.OTHER)


def scan_link_context(text: str, offset: int) -> LinkContext:
    """
    Classify the link context at ``offset``.

    Args:
        text: Full document text
        offset: Cursor offset; the character at ``offset - 1`` is the one just
            before the cursor. Offsets past the end are clamped.

    Returns:
        NoContext, FileLinkContext, or HeadingLinkContext with the identifier
        found between ``[[`` and the first ``#`` after it. When the ``#`` sits
        between the two brackets the bounds are swapped, so ``[#[`` gives "#".
    """
    position = min(offset, len(text)) - 1
    state = BracketState.SCANNING
    marker: int | None = None

    while position >= 0:
        state, action = TRANSITIONS[(state, classify(text[position]))]

        if action is Action.MARK_HEADING:
            marker = position
        elif action is Action.OPEN_LINK:
            if marker is None:
                return FileLinkContext()
            start, end = sorted((position + 2, marker))
            return HeadingLinkContext(text[start:end])
        elif action in (Action.CLOSED_LINK, Action.LINE_START):
            return NoContext()

        position -= 1

    return NoContext()
