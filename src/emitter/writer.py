"""
Indent-aware text buffer used by the generator to assemble Go source.

`CodeWriter` is deliberately small: raw writes, line writes that prefix the
current indent, and an explicit indent stack. A writer can be pooled and
reused across generations, but it must be `reset()` first so that neither text
nor indent depth leaks from one run into the next.
"""

from __future__ import annotations

import io
from typing import Union

INDENT_UNIT = "\t"

Part = Union[str, bytes, bool, int, float]


def _to_text(part: Part) -> str:
    if isinstance(part, str):
        return part
    if isinstance(part, bytes):
        return part.decode("utf-8")
    # bool before int: bool is an int subclass.
    if isinstance(part, bool):
        return "true" if part else "false"
    if isinstance(part, (int, float)):
        return str(part)
    raise TypeError(f"Cannot write value of type {type(part).__name__}")


class CodeWriter:
    """Accumulates generated text under a mutable indent depth."""

    def __init__(self) -> None:
        self._buffer = io.StringIO()
        self._depth = 0

    @property
    def depth(self) -> int:
        return self._depth

    def write(self, text: Part) -> None:
        """Append text without indent or newline."""
        self._buffer.write(_to_text(text))

    def write_indent(self) -> None:
        self._buffer.write(INDENT_UNIT * self._depth)

    def write_line(self, *parts: Part) -> None:
        """Write the indent, each part, then a single newline."""
        self.write_indent()
        for part in parts:
            self._buffer.write(_to_text(part))
        self._buffer.write("\n")

    def indent(self) -> None:
        self._depth += 1

    def dedent(self) -> None:
        if self._depth > 0:
            self._depth -= 1

    def reset(self) -> None:
        """Drop all content and clear the indent."""
        self._buffer = io.StringIO()
        self._depth = 0

    def getvalue(self) -> str:
        return self._buffer.getvalue()

    def to_bytes(self) -> bytes:
        return self.getvalue().encode("utf-8")


__all__ = ["CodeWriter", "INDENT_UNIT"]
