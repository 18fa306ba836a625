"""Interfaces for parsing GraphQL SDL source."""

from .sdl_parser import ParseError, ParseResult, parse_sdl

__all__ = ["ParseError", "ParseResult", "parse_sdl"]
