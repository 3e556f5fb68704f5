"""
Character Cursor
================

A forward-only cursor over a text stream with a small lookahead buffer
and line/column bookkeeping. Every sub-scanner reads through one cursor,
so positions are consistent across the whole token stream.

Position Tracking
-----------------
``line`` starts at 1 and advances on each consumed newline. ``column``
counts the characters consumed on the current line (0 before the first
one), so the next character sits at ``column + 1``. Both counters only
move when a character is consumed with advance(); peeking never changes
them, so neither ever goes backwards.

Lookahead
---------
Characters that have been peeked but not consumed wait in the lookahead
buffer. Sub-scanners look one character ahead. The comment skipper looks
two ahead to tell a comment opener from a lone slash, so the buffer
holds two. Peeking further raises LookaheadError.
"""

from collections import deque
from typing import Optional, TextIO

from cscan.errors import LookaheadError, SourceLocation


class CharCursor:
    """
    Reads characters one at a time from a text stream.

    Usage:
        cursor = CharCursor(io.StringIO("ab"), "<string>")
        cursor.peek()       # 'a', not consumed
        cursor.peek(1)      # 'b', not consumed
        cursor.advance()    # 'a', consumed

    Attributes:
        filename: Name of the source (for token locations)
        line: Current line number (1-indexed)
        column: Characters consumed on the current line
        consumed: Number of characters consumed
    """

    LOOKAHEAD_DEPTH = 2
    CHUNK_SIZE = 4096

    def __init__(self, stream: Optional[TextIO], filename: str = "<input>"):
        self._stream = stream
        self.filename = filename

        self.line = 1
        self.column = 0
        self.consumed = 0

        # Read-ahead chunk from the stream
        self._chunk = ""
        self._chunk_pos = 0

        # Peeked characters, not yet consumed
        self._lookahead: deque[str] = deque()

    # =========================================================================
    # Reading
    # =========================================================================

    def peek(self, offset: int = 0) -> str:
        """
        Look at the character ``offset`` places ahead without consuming it.

        Returns "" if the input ends before that character.

        Raises:
            LookaheadError: If offset is outside the lookahead buffer
        """
        if not 0 <= offset < self.LOOKAHEAD_DEPTH:
            raise LookaheadError(
                f"cannot look {offset + 1} characters ahead: at most "
                f"{self.LOOKAHEAD_DEPTH} are buffered",
                self.next_location,
            )
        while len(self._lookahead) <= offset:
            char = self._next_from_stream()
            if not char:
                return ""
            self._lookahead.append(char)
        return self._lookahead[offset]

    def advance(self) -> str:
        """
        Consume and return the next character, or "" at end of input.
        """
        char = self.peek()
        if not char:
            return ""

        self._lookahead.popleft()
        self.consumed += 1
        if char == "\n":
            self.line += 1
            self.column = 0
        else:
            self.column += 1
        return char

    def match(self, expected: str) -> bool:
        """Consume the next character if it equals ``expected``."""
        if self.peek() == expected:
            self.advance()
            return True
        return False

    @property
    def location(self) -> SourceLocation:
        """Location of the most recently consumed character."""
        return SourceLocation(self.filename, self.line, self.column)

    @property
    def next_location(self) -> SourceLocation:
        """Location of the character the next advance() will return."""
        return SourceLocation(self.filename, self.line, self.column + 1)

    @property
    def pending(self) -> int:
        """Number of characters peeked but not consumed."""
        return len(self._lookahead)

    def _next_from_stream(self) -> str:
        if self._chunk_pos >= len(self._chunk):
            if self._stream is None:
                return ""
            self._chunk = self._stream.read(self.CHUNK_SIZE)
            self._chunk_pos = 0
            if not self._chunk:
                return ""
        char = self._chunk[self._chunk_pos]
        self._chunk_pos += 1
        return char

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def close(self) -> None:
        """Close the underlying stream and drop any buffered input."""
        if self._stream is not None:
            self._stream.close()
        self.detach()

    def detach(self) -> None:
        """Forget the underlying stream without closing it."""
        self._stream = None
        self._chunk = ""
        self._chunk_pos = 0
        self._lookahead.clear()

    @property
    def closed(self) -> bool:
        return self._stream is None
