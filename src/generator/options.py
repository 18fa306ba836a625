"""
Resolution of Go generator options.

Three sources are merged, lowest precedence first: the built-in defaults, a
document-level `@go(...)` directive, and the JSON blob handed to the generator
by its caller (usually the CLI `--options` flag). The directive takes a single
object argument, for example::

    extend schema @go(options: {package: "api", descriptions: true})

Any malformed value aborts generation before a single byte is emitted.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from document import BasicLiteral, Document, Literal, ObjectLiteral

DIRECTIVE_NAME = "go"
DEFAULT_PACKAGE = "main"

# strconv.ParseBool accepts exactly these spellings.
_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


class OptionError(ValueError):
    """Raised when generator options cannot be decoded."""


@dataclass(frozen=True)
class GeneratorOptions:
    package: str = DEFAULT_PACKAGE
    descriptions: bool = False


def parse_bool(text: str) -> bool:
    if text in _TRUE_WORDS:
        return True
    if text in _FALSE_WORDS:
        return False
    raise OptionError(f"invalid boolean value: {text!r}")


def _basic_text(key: str, value: Literal) -> str:
    if not isinstance(value, BasicLiteral):
        raise OptionError(f"option {key!r} must be a scalar value")
    return value.raw


def _apply_directive(options: GeneratorOptions, document: Document) -> GeneratorOptions:
    for directive in document.directives:
        if directive.name != DIRECTIVE_NAME:
            continue
        if not directive.args:
            break

        value = directive.args[0].value
        if not isinstance(value, ObjectLiteral):
            raise OptionError(f"@{DIRECTIVE_NAME} expects a single object argument")

        for item in value.fields:
            if item.key == "package":
                options = replace(options, package=_basic_text(item.key, item.value))
            elif item.key == "descriptions":
                flag = parse_bool(_basic_text(item.key, item.value))
                options = replace(options, descriptions=flag)
    return options


def _lookup(payload: Dict[str, Any], name: str) -> Optional[str]:
    """Find the payload key for an option: exact match first, then case-insensitive."""
    if name in payload:
        return name
    for key in payload:
        if key.lower() == name:
            return key
    return None


def _apply_blob(options: GeneratorOptions, blob: str) -> GeneratorOptions:
    try:
        payload = json.loads(blob)
    except json.JSONDecodeError as exc:
        raise OptionError(f"invalid options: {exc}") from exc

    if payload is None:
        return options
    if not isinstance(payload, dict):
        raise OptionError(
            f"invalid options: expected a JSON object, got {type(payload).__name__}"
        )

    key = _lookup(payload, "package")
    if key is not None and payload[key] is not None:
        if not isinstance(payload[key], str):
            raise OptionError("invalid options: 'package' must be a string")
        options = replace(options, package=payload[key])

    key = _lookup(payload, "descriptions")
    if key is not None and payload[key] is not None:
        if not isinstance(payload[key], bool):
            raise OptionError("invalid options: 'descriptions' must be a boolean")
        options = replace(options, descriptions=payload[key])

    return options


def resolve_options(document: Document, blob: str = "") -> GeneratorOptions:
    """
    Build the effective options for one generation run.

    Precedence: invocation blob over document directive over defaults.
    """
    options = _apply_directive(GeneratorOptions(), document)
    if blob:
        options = _apply_blob(options, blob)

    package = options.package
    if package.startswith('"""'):
        raise OptionError("package name must be a regular string, not a block string")
    # String literals from the directive arrive with their quotes.
    if len(package) >= 2 and package[0] == '"' and package[-1] == '"':
        package = package[1:-1]
    if not package:
        raise OptionError("package name must not be empty")
    return replace(options, package=package)


__all__ = [
    "DEFAULT_PACKAGE",
    "DIRECTIVE_NAME",
    "GeneratorOptions",
    "OptionError",
    "parse_bool",
    "resolve_options",
]
