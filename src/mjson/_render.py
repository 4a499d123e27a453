"""
Rendering of value trees back to JSON text.

Two layouts are supported: minified (no inserted whitespace) and indented
(three spaces per nesting level, one member per line). Object members
always come out in ascending key order because that is how ``Object``
stores them. With ``color`` set, string content, object keys and ``null``
are wrapped in ANSI highlight sequences.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import assert_never

from termcolor import colored

from ._lexer import PASS_THROUGH_ESCAPES
from ._profile import ProfileContext
from ._value import Array
from ._value import Bool
from ._value import Null
from ._value import Number
from ._value import Object
from ._value import String
from ._value import Value

log = logging.getLogger(__name__)

INDENT_WIDTH = 3

STRING_COLOR = "green"
KEY_COLOR = "yellow"
NULL_COLOR = "red"

_CONTROL_LIMIT = 0x20


@dataclass(frozen=True)
class RenderOptions:
    """
    Configures rendering with immutable settings.

    ``minify`` drops all inserted whitespace; ``color`` adds ANSI highlights
    to strings, keys and null.
    """

    minify: bool = False
    color: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.minify, bool):
            raise TypeError("minify must be a boolean")
        if not isinstance(self.color, bool):
            raise TypeError("color must be a boolean")


def _highlight(text: str, color: str, options: RenderOptions) -> str:
    if not options.color:
        return text
    # Forced so output does not depend on whether stdout is a terminal
    return colored(text, color, force_color=True)


def _escape_content(content: str) -> str:
    """
    Makes string content safe to place between quotes.

    Two-character escapes already present in the content are kept verbatim.
    A bare quote, a backslash that does not start such an escape, and raw
    control characters are escaped so the output reads back unchanged.
    """
    if '"' not in content and "\\" not in content and all(
        ord(c) >= _CONTROL_LIMIT for c in content
    ):
        return content

    result = []
    i = 0
    length = len(content)
    while i < length:
        char = content[i]
        if char == "\\":
            if i + 1 < length and content[i + 1] in PASS_THROUGH_ESCAPES:
                result.append(content[i : i + 2])
                i += 2
                continue
            result.append("\\\\")
        elif char == '"':
            result.append('\\"')
        elif ord(char) < _CONTROL_LIMIT:
            result.append(f"\\u{ord(char):04x}")
        else:
            result.append(char)
        i += 1
    return "".join(result)


def _render_number(n: float) -> str:
    """
    Renders a number in positional notation without an exponent.

    Uses the shortest digits that round-trip, and drops the fractional part
    of integral values: ``1.0`` renders as ``1``, ``1e-10`` as
    ``0.0000000001``.
    """
    text = format(Decimal(repr(n)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _render_string(s: str, color: str, options: RenderOptions) -> str:
    return '"' + _highlight(_escape_content(s), color, options) + '"'


def _render_scalar(value: Value, options: RenderOptions) -> str:
    match value:
        case Number(n):
            return _render_number(n)
        case Bool(b):
            return "true" if b else "false"
        case String(s):
            return _render_string(s, STRING_COLOR, options)
        case Null():
            return _highlight("null", NULL_COLOR, options)
        case Array() | Object():
            raise TypeError("containers are not scalars")
        case _:
            assert_never(value)


def _render_minified(value: Value, options: RenderOptions) -> str:
    match value:
        case Array(items):
            inner = ",".join(_render_minified(item, options) for item in items)
            return "[" + inner + "]"
        case Object(members):
            inner = ",".join(
                _render_string(key, KEY_COLOR, options)
                + ":"
                + _render_minified(child, options)
                for key, child in members
            )
            return "{" + inner + "}"
        case _:
            return _render_scalar(value, options)


def _render_indented(value: Value, options: RenderOptions, depth: int) -> str:
    """
    Renders ``value`` whose first line is already positioned by the caller.

    Children are placed one per line at ``depth + 1``; the closing bracket
    goes at ``depth``.
    """
    match value:
        case Array(items):
            if not items:
                return "[]"
            inner_indent = " " * (INDENT_WIDTH * (depth + 1))
            lines = [
                inner_indent + _render_indented(item, options, depth + 1)
                for item in items
            ]
            closing = " " * (INDENT_WIDTH * depth) + "]"
            return "[\n" + ",\n".join(lines) + "\n" + closing
        case Object(members):
            if not members:
                return "{}"
            inner_indent = " " * (INDENT_WIDTH * (depth + 1))
            lines = [
                inner_indent
                + _render_string(key, KEY_COLOR, options)
                + ": "
                + _render_indented(child, options, depth + 1)
                for key, child in members
            ]
            closing = " " * (INDENT_WIDTH * depth) + "}"
            return "{\n" + ",\n".join(lines) + "\n" + closing
        case _:
            return _render_scalar(value, options)


def render(value: Value, options: RenderOptions | None = None) -> str:
    """
    Renders a value tree to JSON text.

    Pure function of the tree and options: no I/O and no re-parsing.
    """
    if options is None:
        options = RenderOptions()
    log.debug(
        "Rendering %s (minify=%s, color=%s)",
        type(value).__name__,
        options.minify,
        options.color,
    )
    with ProfileContext("render"):
        if options.minify:
            return _render_minified(value, options)
        return _render_indented(value, options, 0)
