"""graphql-go source generation for lowered GraphQL documents."""

from .core import (
    GENERATOR_NAME,
    Generator,
    GeneratorError,
    IMPORT_PATH,
    SOURCE_EXTENSION,
    generate_source,
)
from .declarations import DeclarationEmitter
from .options import GeneratorOptions, OptionError, parse_bool, resolve_options
from .printers import format_type, format_value, print_type, print_value, type_identifier

__all__ = [
    "DeclarationEmitter",
    "GENERATOR_NAME",
    "Generator",
    "GeneratorError",
    "GeneratorOptions",
    "IMPORT_PATH",
    "OptionError",
    "SOURCE_EXTENSION",
    "format_type",
    "format_value",
    "generate_source",
    "parse_bool",
    "print_type",
    "print_value",
    "resolve_options",
    "type_identifier",
]
