"""
Recursive descent parser turning a token sequence into a value tree.

Grammar::

    value  := object | array | String | Number | Bool | Null
    object := '{' ( pair (',' pair)* )? '}'
    pair   := String ':' value
    array  := '[' ( value (',' value)* )? ']'

Parsing is fail-fast: the first structural violation raises ``ParseError``
and no partial tree is returned.
"""

import logging

from ._errors import ParseError
from ._lexer import Token
from ._lexer import TokenKind
from ._profile import ProfileContext
from ._value import Array
from ._value import Bool
from ._value import Null
from ._value import Number
from ._value import Object
from ._value import String
from ._value import Value

log = logging.getLogger(__name__)


class JsonParser:
    """
    Recursive descent parser over a materialized token list.

    Keeps an explicit index into ``tokens``; ``peek`` looks at the current
    token and ``advance`` consumes it. ``text`` is only used to attach line
    and column information to errors.
    """

    def __init__(self, tokens: list[Token], text: str = ""):
        self.tokens = tokens
        self.text = text
        self.index = 0

    def _error(self, msg: str, token: Token | None = None) -> ParseError:
        if token is not None:
            pos = token.start
        elif self.tokens:
            pos = self.tokens[-1].end
        else:
            pos = len(self.text)
        return ParseError(msg, self.text, pos)

    def peek(self) -> Token | None:
        """Returns current token without advancing."""
        if self.index < len(self.tokens):
            return self.tokens[self.index]
        return None

    def peek_expect(self) -> Token:
        """Returns current token, raising when the stream is exhausted."""
        token = self.peek()
        if token is None:
            raise self._error("Unexpected end of input: no token")
        return token

    def advance(self) -> Token:
        """Returns current token and advances, raising at end of stream."""
        token = self.peek_expect()
        self.index += 1
        return token

    def at_end(self) -> bool:
        return self.index >= len(self.tokens)

    def parse_value(self) -> Value:
        """Parses any JSON value based on the current token."""
        token = self.peek_expect()
        kind = token.kind

        if kind is TokenKind.LBRACE:
            return self.parse_object()
        elif kind is TokenKind.LBRACKET:
            return self.parse_array()
        elif kind is TokenKind.STRING:
            self.advance()
            return String(token.value)
        elif kind is TokenKind.NUMBER:
            self.advance()
            return Number(token.value)
        elif kind is TokenKind.BOOL:
            self.advance()
            return Bool(token.value)
        elif kind is TokenKind.NULL:
            self.advance()
            return Null()
        else:
            raise self._error(f"Expecting value, got {token.describe()}", token)

    def _parse_pair(self) -> tuple[str, Value]:
        """Parses ``String ':' value``."""
        key_token = self.advance()
        if key_token.kind is not TokenKind.STRING:
            raise self._error(
                "Expecting property name enclosed in double quotes, "
                f"got {key_token.describe()}",
                key_token,
            )
        colon_token = self.advance()
        if colon_token.kind is not TokenKind.COLON:
            raise self._error(
                f"Expecting ':' delimiter, got {colon_token.describe()}",
                colon_token,
            )
        return key_token.value, self.parse_value()

    def parse_object(self) -> Object:
        """Parses a JSON object; later duplicate keys replace earlier ones."""
        with ProfileContext("parse_object"):
            self.advance()

            if self.peek_expect().kind is TokenKind.RBRACE:
                self.advance()
                return Object()

            pairs: list[tuple[str, Value]] = []
            while True:
                pairs.append(self._parse_pair())

                token = self.advance()
                if token.kind is TokenKind.RBRACE:
                    return Object.from_pairs(pairs)
                elif token.kind is not TokenKind.COMMA:
                    raise self._error(
                        "Expecting ',' or '}' delimiter, "
                        f"got {token.describe()}",
                        token,
                    )

    def parse_array(self) -> Array:
        """Parses a JSON array."""
        with ProfileContext("parse_array"):
            self.advance()

            if self.peek_expect().kind is TokenKind.RBRACKET:
                self.advance()
                return Array()

            values: list[Value] = []
            while True:
                values.append(self.parse_value())

                token = self.advance()
                if token.kind is TokenKind.RBRACKET:
                    return Array(tuple(values))
                elif token.kind is not TokenKind.COMMA:
                    raise self._error(
                        "Expecting ',' or ']' delimiter, "
                        f"got {token.describe()}",
                        token,
                    )

    def parse(self) -> Value:
        """
        Parses exactly one value spanning the whole token stream.

        Tokens left over after the first complete value are rejected as
        extra data.
        """
        with ProfileContext("parse", len(self.tokens)):
            try:
                value = self.parse_value()
            except RecursionError as e:
                raise self._error(
                    "Maximum nesting depth exceeded", self.peek()
                ) from e

            if not self.at_end():
                raise self._error("Extra data", self.peek())

        log.debug(
            "Parsed %d tokens into %s", len(self.tokens), type(value).__name__
        )
        return value
