"""
Minimal JSON parser and prettifier.

Parses JSON text into an immutable value tree with sorted object keys and
renders trees back to text, either indented or minified, optionally with
ANSI highlighting. Two deliberate deviations from RFC 8259: numbers may
start with ``+``, and duplicate object keys keep the last value.
"""

import logging
from typing import IO

from ._errors import JSONDecodeError
from ._errors import LexError
from ._errors import ParseError
from ._lexer import JsonLexer
from ._lexer import Token
from ._lexer import TokenKind
from ._lexer import tokenize
from ._parser import JsonParser
from ._profile import HotPathStats
from ._profile import ProfileContext
from ._profile import clear_hot_path_stats
from ._profile import get_hot_path_stats
from ._render import RenderOptions
from ._render import render
from ._value import Array
from ._value import Bool
from ._value import Null
from ._value import Number
from ._value import Object
from ._value import PyJson
from ._value import String
from ._value import Value
from ._value import from_python

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())


def parse(text: str) -> Value:
    """
    Parses JSON text into a value tree.

    Raises ``LexError`` for malformed characters and ``ParseError`` for
    grammar violations; both derive from ``JSONDecodeError``.
    """
    if not isinstance(text, str):
        raise TypeError(
            f"the JSON object must be str, not {type(text).__name__}"
        )

    with ProfileContext("parse_text", len(text)):
        tokens = tokenize(text)
        return JsonParser(tokens, text).parse()


def load(fp: IO[str]) -> Value:
    """
    Parses JSON read from a file-like object.
    """
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    return parse(fp.read())


def dump(
    value: Value, fp: IO[str], options: RenderOptions | None = None
) -> None:
    """
    Renders a value tree into a file-like object.
    """
    if not hasattr(fp, "write"):
        raise TypeError("fp must have a write() method")

    fp.write(render(value, options))


__all__ = [
    "Array",
    "Bool",
    "HotPathStats",
    "JSONDecodeError",
    "JsonLexer",
    "JsonParser",
    "LexError",
    "Null",
    "Number",
    "Object",
    "ParseError",
    "PyJson",
    "RenderOptions",
    "String",
    "Token",
    "TokenKind",
    "Value",
    "clear_hot_path_stats",
    "dump",
    "from_python",
    "get_hot_path_stats",
    "load",
    "parse",
    "render",
    "tokenize",
]
