"""
Recursive printers for type references and literal values.

Both printers write straight into a `CodeWriter` so nested expressions are
emitted in one pass; `format_type` / `format_value` are conveniences that
render into a scratch writer and return the text.
"""

from __future__ import annotations

from document import (
    BasicLiteral,
    ListLiteral,
    ListType,
    Literal,
    NamedType,
    NonNullType,
    ObjectLiteral,
    TypeRef,
)
from emitter import CodeWriter

LIBRARY = "graphql"
TYPE_SUFFIX = "Type"

BUILTIN_SCALARS = {
    "Int": f"{LIBRARY}.Int",
    "Float": f"{LIBRARY}.Float",
    "String": f"{LIBRARY}.String",
    "Boolean": f"{LIBRARY}.Boolean",
    "ID": f"{LIBRARY}.ID",
}


def type_identifier(name: str) -> str:
    """Name of the Go variable holding a generated declaration."""
    return name + TYPE_SUFFIX


def print_type(writer: CodeWriter, ref: TypeRef) -> None:
    if isinstance(ref, NamedType):
        writer.write(BUILTIN_SCALARS.get(ref.name) or type_identifier(ref.name))
    elif isinstance(ref, ListType):
        writer.write(f"{LIBRARY}.NewList(")
        print_type(writer, ref.of_type)
        writer.write(")")
    elif isinstance(ref, NonNullType):
        writer.write(f"{LIBRARY}.NewNonNull(")
        print_type(writer, ref.of_type)
        writer.write(")")
    else:
        raise TypeError(f"Unsupported type reference: {ref!r}")


def print_value(writer: CodeWriter, value: Literal) -> None:
    if isinstance(value, BasicLiteral):
        writer.write(value.raw)
    elif isinstance(value, ListLiteral):
        writer.write("[]interface{}{")
        for i, item in enumerate(value.values):
            if i:
                writer.write(", ")
            print_value(writer, item)
        writer.write("}")
    elif isinstance(value, ObjectLiteral):
        writer.write("{ ")
        last = len(value.fields) - 1
        for i, item in enumerate(value.fields):
            writer.write(item.key)
            writer.write(": ")
            print_value(writer, item.value)
            if i != last:
                writer.write(",")
            writer.write(" ")
        writer.write("}")
    else:
        raise TypeError(f"Unsupported literal: {value!r}")


def format_type(ref: TypeRef) -> str:
    writer = CodeWriter()
    print_type(writer, ref)
    return writer.getvalue()


def format_value(value: Literal) -> str:
    writer = CodeWriter()
    print_value(writer, value)
    return writer.getvalue()


__all__ = [
    "BUILTIN_SCALARS",
    "LIBRARY",
    "TYPE_SUFFIX",
    "format_type",
    "format_value",
    "print_type",
    "print_value",
    "type_identifier",
]
