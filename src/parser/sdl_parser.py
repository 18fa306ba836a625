"""
GraphQL SDL parsing built on top of `graphql-core`.

`parse_sdl` returns the graphql-core `DocumentNode` together with metadata
about the parse run. graphql-core stops at the first syntax error, so in
tolerant mode a failed parse yields a result with no AST and one error carrying
the reported location; strict callers get the `GraphQLSyntaxError` itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from graphql import GraphQLSyntaxError, Source, parse
from graphql.language import DocumentNode


@dataclass(frozen=True)
class ParseError:
    """A syntax problem reported by graphql-core."""

    description: str
    line: Optional[int]
    column: Optional[int]


@dataclass(frozen=True)
class ParseResult:
    """Aggregate of the output AST plus metadata about the parse run."""

    ast: Optional[DocumentNode]
    errors: List[ParseError]
    source_name: str


def parse_sdl(
    source: str,
    *,
    source_name: str = "<input>",
    tolerant: bool = True,
) -> ParseResult:
    """
    Parse GraphQL SDL text into a graphql-core document.

    Args:
        source: Raw SDL text.
        source_name: Label used for diagnostics, e.g. the file path.
        tolerant: When True, syntax errors are returned instead of raised.

    Returns:
        ParseResult containing the AST (or None) and any syntax errors.

    Raises:
        GraphQLSyntaxError: If parsing fails and `tolerant` is False.
    """
    try:
        document = parse(Source(source, source_name))
    except GraphQLSyntaxError as exc:
        if not tolerant:
            raise
        line = column = None
        if exc.locations:
            line = exc.locations[0].line
            column = exc.locations[0].column
        return ParseResult(
            ast=None,
            errors=[ParseError(description=exc.message, line=line, column=column)],
            source_name=source_name,
        )

    return ParseResult(
        ast=document,
        errors=[],
        source_name=source_name,
    )


__all__ = ["ParseError", "ParseResult", "parse_sdl"]
