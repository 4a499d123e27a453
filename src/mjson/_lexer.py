"""
Character scanner producing the token stream consumed by the parser.

Scanning is a single left-to-right pass over the text with an explicit
index cursor and one character of lookahead. Whitespace is skipped and
never emitted.

String escapes are handled asymmetrically: the simple escapes (``\\n``,
``\\"`` and friends) are kept in the token text as the literal two
character sequence, while ``\\uXXXX`` escapes are decoded. Consecutive
``\\u`` code units are buffered so that surrogate pairs combine into a
single character outside the Basic Multilingual Plane.
"""

import logging
import math
import struct
from dataclasses import dataclass
from enum import Enum

from ._errors import LexError
from ._errors import Position
from ._profile import ProfileContext

log = logging.getLogger(__name__)

WHITESPACE = frozenset(" \t\n\r")
DIGITS = frozenset("0123456789")
NUMBER_START = DIGITS | frozenset("+-.")
NUMBER_CHARS = NUMBER_START | frozenset("eE")
PASS_THROUGH_ESCAPES = frozenset('"\\/bfnrt')
HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class TokenKind(Enum):
    """
    Kinds of lexical units recognized by the scanner.

    Scalars carry a payload in ``Token.value``; structural markers do not.
    """

    STRING = "string"
    NUMBER = "number"
    BOOL = "bool"
    NULL = "null"
    LBRACE = "{"
    RBRACE = "}"
    LBRACKET = "["
    RBRACKET = "]"
    COMMA = ","
    COLON = ":"


STRUCTURAL = {
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    ",": TokenKind.COMMA,
    ":": TokenKind.COLON,
}

LITERALS = {
    "t": ("true", TokenKind.BOOL, True),
    "f": ("false", TokenKind.BOOL, False),
    "n": ("null", TokenKind.NULL, None),
}


@dataclass(frozen=True)
class Token:
    """
    Represents a JSON token with position information.

    ``value`` holds the decoded payload: ``str`` for strings, ``float`` for
    numbers, ``bool`` for booleans and ``None`` for null and structural
    markers. ``start``/``end`` are character offsets into the source text.
    """

    kind: TokenKind
    value: str | float | bool | None
    start: Position
    end: Position

    def describe(self) -> str:
        """Returns a short human-readable rendering used in error messages."""
        if self.kind is TokenKind.STRING:
            return f"string {self.value!r}"
        if self.kind is TokenKind.NUMBER:
            return f"number {self.value!r}"
        if self.kind is TokenKind.BOOL:
            return "true" if self.value else "false"
        if self.kind is TokenKind.NULL:
            return "null"
        return f"'{self.kind.value}'"


class JsonLexer:
    """
    Tokenizes JSON input for the recursive descent parser.

    Character-by-character scanning with a position cursor. Handles
    whitespace, strings, numbers, literals, and structural tokens.
    """

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.length = len(text)

    def peek(self) -> str:
        """Returns current character without advancing."""
        return self.text[self.pos] if self.pos < self.length else ""

    def advance(self) -> str:
        """Returns current character and advances position."""
        char = self.peek()
        if self.pos < self.length:
            self.pos += 1
        return char

    def skip_whitespace(self) -> None:
        """Skips space, tab, newline and carriage return."""
        with ProfileContext("skip_whitespace"):
            while self.pos < self.length and self.text[self.pos] in WHITESPACE:
                self.pos += 1

    def _error(self, msg: str, pos: Position) -> LexError:
        return LexError(msg, self.text, pos)

    def _flush_utf16(self, units: list[int], result: list[str]) -> None:
        """Decodes buffered UTF-16 code units and appends them to ``result``."""
        if not units:
            return
        raw = struct.pack(f"<{len(units)}H", *units)
        try:
            result.append(raw.decode("utf-16-le"))
        except UnicodeDecodeError as e:
            codes = " ".join(f"\\u{unit:04X}" for unit in units)
            raise self._error(
                f"Invalid surrogate sequence {codes}", self.pos
            ) from e
        units.clear()

    def _scan_unicode_escape(self, escape_start: Position) -> int:
        """Reads the four hex digits following ``\\u``."""
        digits = self.text[self.pos : self.pos + 4]
        if len(digits) < 4 or not all(c in HEX_DIGITS for c in digits):
            raise self._error(
                f"Invalid unicode escape sequence: \\u{digits}", escape_start
            )
        self.pos += 4
        return int(digits, 16)

    def scan_string(self) -> Token:
        """Scans a JSON string token, starting at the opening quote."""
        with ProfileContext("scan_string"):
            start = self.pos
            self.advance()

            result: list[str] = []
            utf16: list[int] = []

            while self.pos < self.length:
                char = self.advance()
                if char == '"':
                    self._flush_utf16(utf16, result)
                    return Token(
                        TokenKind.STRING, "".join(result), start, self.pos
                    )
                elif char == "\\":
                    escape_start = self.pos - 1
                    if self.pos >= self.length:
                        raise self._error(
                            "Unterminated escape sequence", escape_start
                        )
                    escaped = self.advance()
                    if escaped in PASS_THROUGH_ESCAPES:
                        self._flush_utf16(utf16, result)
                        result.append("\\" + escaped)
                    elif escaped == "u":
                        utf16.append(self._scan_unicode_escape(escape_start))
                    else:
                        raise self._error(
                            f"Invalid escape sequence: \\{escaped}",
                            escape_start,
                        )
                else:
                    self._flush_utf16(utf16, result)
                    result.append(char)

            raise self._error("Unterminated string starting at", start)

    def scan_number(self) -> Token:
        """
        Scans a number token.

        All characters that may appear in a number are consumed greedily;
        validation happens only when the collected text is converted, so
        inputs like ``1.2.3`` are rejected at that final step.
        """
        with ProfileContext("scan_number"):
            start = self.pos
            while (
                self.pos < self.length
                and self.text[self.pos] in NUMBER_CHARS
            ):
                self.pos += 1

            literal = self.text[start : self.pos]
            try:
                number = float(literal)
            except ValueError as e:
                raise self._error(f"Invalid number {literal!r}", start) from e
            if not math.isfinite(number):
                raise self._error(f"Number out of range {literal!r}", start)

            return Token(TokenKind.NUMBER, number, start, self.pos)

    def scan_literal(self) -> Token:
        """Scans literal tokens: true, false, null."""
        with ProfileContext("scan_literal"):
            start = self.pos
            expected, kind, value = LITERALS[self.peek()]
            found = self.text[start : start + len(expected)]
            if found != expected:
                raise self._error(
                    f"Invalid literal {found!r}, expected {expected!r}", start
                )
            self.pos += len(expected)
            return Token(kind, value, start, self.pos)

    def next_token(self) -> Token | None:
        """Returns the next token or None if at end."""
        self.skip_whitespace()

        if self.pos >= self.length:
            return None

        char = self.peek()
        start = self.pos

        if char in STRUCTURAL:
            self.advance()
            return Token(STRUCTURAL[char], None, start, self.pos)
        elif char == '"':
            return self.scan_string()
        elif char in NUMBER_START:
            return self.scan_number()
        elif char in LITERALS:
            return self.scan_literal()
        else:
            raise self._error(f"Unexpected character {char!r}", start)

    def tokenize(self) -> list[Token]:
        """Scans the whole input and returns every token in order."""
        with ProfileContext("tokenize", self.length):
            tokens = []
            while (token := self.next_token()) is not None:
                tokens.append(token)
        log.debug(
            "Tokenized %d characters into %d tokens", self.length, len(tokens)
        )
        return tokens


def tokenize(text: str) -> list[Token]:
    """Splits ``text`` into tokens, raising ``LexError`` on malformed input."""
    return JsonLexer(text).tokenize()
