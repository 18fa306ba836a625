"""
Front-end integration stitching together SDL parsing and lowering.

`run_frontend` accepts raw SDL text, parses it with graphql-core and, when the
parse succeeds, lowers the result into the `Document` model the generator
consumes. The document is named after the basename of `source_name`, which
later determines the generated file name.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath
from typing import List, Optional

from document import Document
from parser import ParseResult, parse_sdl

from .lowering import LoweringResult, lower_document


@dataclass(frozen=True)
class FrontEndResult:
    """Combined output from the parsing and lowering pipeline."""

    parse: ParseResult
    lowering: Optional[LoweringResult]

    @property
    def document(self) -> Optional[Document]:
        return self.lowering.document if self.lowering else None

    @property
    def diagnostics(self) -> List[str]:
        """Lowering diagnostics; syntax errors live on `parse.errors`."""
        return list(self.lowering.diagnostics) if self.lowering else []


def run_frontend(
    source: str,
    *,
    source_name: str = "<input>",
    tolerant: bool = True,
) -> FrontEndResult:
    """
    Parse and lower GraphQL SDL input.

    Args:
        source: Raw SDL text.
        source_name: Identifier used in diagnostics, e.g. file path.
        tolerant: Forwarded to the parser; when True syntax errors are collected.

    Returns:
        FrontEndResult with the parse output and, if parsing succeeded, the
        lowered document.
    """
    parse_result = parse_sdl(source, source_name=source_name, tolerant=tolerant)

    lowering: Optional[LoweringResult] = None
    if parse_result.ast is not None:
        lowering = lower_document(parse_result.ast, name=PurePath(source_name).name)

    return FrontEndResult(parse=parse_result, lowering=lowering)


__all__ = ["FrontEndResult", "run_frontend"]
