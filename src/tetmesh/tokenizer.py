"""
Mesh Tokenizer
==============

Typed tokens and a combined line/token reader over a ``.mesh`` text stream.

The format mixes two reading modes: keyword lines are consumed whole (with
comment and blank lines skipped in front of them), while counts and record
fields are whitespace-delimited tokens that may span line breaks. The
tokenizer keeps the unconsumed remainder of the current line so that both
modes share a single position in the stream.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, TextIO, Union

from .errors import MeshTruncationError
from .medit_format import COMMENT_CHAR


_INTEGER_RE = re.compile(r"^[+-]?\d+$", re.ASCII)
_FLOAT_RE = re.compile(
    r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$", re.ASCII)
_TOKEN_RE = re.compile(r"\s*(\S+)")


class TokenKind(Enum):
    """Kind of a whitespace-delimited token."""
    KEYWORD = "keyword"
    INTEGER = "integer"
    FLOAT = "float"


@dataclass(frozen=True)
class Token:
    """
    A single token read from the stream.

    Attributes:
        kind: KEYWORD, INTEGER or FLOAT
        text: raw text of the token
        line_number: 1-based line the token was read from
    """
    kind: TokenKind
    text: str
    line_number: int = 0

    @property
    def is_numeric(self) -> bool:
        return self.kind is not TokenKind.KEYWORD

    @property
    def value(self) -> Union[int, float, str]:
        """Parsed value: int for INTEGER, float for FLOAT, text otherwise."""
        if self.kind is TokenKind.INTEGER:
            return int(self.text)
        if self.kind is TokenKind.FLOAT:
            return float(self.text)
        return self.text


def classify_token(text: str, line_number: int = 0) -> Token:
    """
    Classify a whitespace-delimited word.

    Signed ASCII digit strings are INTEGER. Decimal or exponent notation
    made of ASCII digits is FLOAT; ``inf``, ``nan`` and underscore-grouped
    numbers are not. Everything else is a KEYWORD.

    Args:
        text: token text without surrounding whitespace
        line_number: line the token came from

    Returns:
        Token instance
    """
    if _INTEGER_RE.match(text):
        return Token(TokenKind.INTEGER, text, line_number)
    if _FLOAT_RE.match(text):
        return Token(TokenKind.FLOAT, text, line_number)
    return Token(TokenKind.KEYWORD, text, line_number)


def is_comment_or_blank(line: str) -> bool:
    """True for lines skipped in front of keywords: '#' lines and blank lines."""
    return line.startswith(COMMENT_CHAR) or not line.strip()


class MeshTokenizer:
    """
    Line and token reader sharing one position in a text stream.

    Attributes:
        stream: underlying text stream, read with ``readline``
        line_number: 1-based number of the last physical line read
    """

    def __init__(self, stream: TextIO):
        self.stream = stream
        self.line_number = 0
        # Current line and the offset of its first unread character
        self._line: Optional[str] = None
        self._pos = 0

    def _read_physical_line(self) -> str:
        line = self.stream.readline()
        if line:
            self.line_number += 1
        return line

    def read_line(self) -> str:
        """
        Return the rest of the current line, or the next line.

        Returns:
            line text including its newline, '' at end of file
        """
        line, pos = self._line, self._pos
        self._line = None
        if line is not None and pos < len(line):
            return line[pos:]
        return self._read_physical_line()

    def push_back_remainder(self, text: str) -> None:
        """Make ``text`` the unread remainder of the current line."""
        self._line = text
        self._pos = 0

    def next_substantive_line(self, context: str) -> str:
        """
        Skip comment and blank lines and return the next substantive line.

        Args:
            context: what the caller expects next, used in the error message

        Returns:
            the first line that is neither a comment nor blank

        Raises:
            MeshTruncationError: end of file reached first
        """
        while True:
            line = self.read_line()
            if not line:
                raise MeshTruncationError(
                    f"unexpected end of file, expecting {context}",
                    self.line_number)
            if not is_comment_or_blank(line):
                return line

    def next_token(self) -> Optional[Token]:
        """
        Return the next whitespace-delimited token, crossing line breaks.

        No comment skipping happens here. Returns None at end of file.
        """
        while True:
            if self._line is None:
                line = self._read_physical_line()
                if not line:
                    return None
                self._line = line
                self._pos = 0

            match = _TOKEN_RE.match(self._line, self._pos)
            if match is None:
                # Only whitespace left on this line
                self._line = None
                continue

            self._pos = match.end()
            return classify_token(match.group(1), self.line_number)
