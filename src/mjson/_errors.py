"""
Error types raised while turning JSON text into a value tree.

Both lexing and parsing fail fast: the first problem aborts the whole
operation and surfaces as one of the exceptions below, carrying the
offending position so callers can point users at the bad input.
"""

from typing import TypeAlias

Position: TypeAlias = int


class JSONDecodeError(ValueError):
    """
    Handles JSON decoding failures with position and context information.

    Error state containing position, line/column numbers, and surrounding
    context to help users identify and fix JSON syntax issues.
    """

    def __init__(self, msg: str, doc: str = "", pos: Position = 0) -> None:
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        if not isinstance(pos, int) or pos < 0:
            raise ValueError("pos must be a non-negative integer")

        self.msg = msg
        self.doc = doc
        self.pos = pos

        # Compute line and column numbers from position
        self.lineno = doc.count("\n", 0, pos) + 1 if doc else 1
        self.colno = pos - doc.rfind("\n", 0, pos) if doc else pos + 1

        super().__init__(f"{msg} at line {self.lineno}, column {self.colno}")

    def __reduce__(self) -> tuple[type, tuple[str, str, Position]]:
        return type(self), (self.msg, self.doc, self.pos)


class LexError(JSONDecodeError):
    """Raised when characters cannot be grouped into a valid token."""


class ParseError(JSONDecodeError):
    """Raised when the token stream does not follow the JSON grammar."""
