"""
Emitters for the seven GraphQL declaration kinds.

Each `emit_*` method writes the constructor call that follows
`var <Name>Type = graphql.` in the generated file, ending with the closing
`})` line. Descriptions are only emitted when requested and non-empty.
Resolver callbacks are written as placeholder stubs marked TODO; the generated
file is meant to be edited by hand afterwards.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from document import (
    DirectiveSpec,
    EnumSpec,
    FieldDefinition,
    InputSpec,
    InputValue,
    InterfaceSpec,
    ObjectSpec,
    ScalarSpec,
    UnionSpec,
)
from emitter import CodeWriter

from .printers import print_type, print_value, type_identifier

SERIALIZE_STUB = "Serialize: func(value interface{}) interface{} { return nil }, // TODO"
RESOLVE_STUB = (
    "Resolve: func(p graphql.ResolveParams) (interface{}, error) { return nil, nil }, // TODO"
)
RESOLVE_TYPE_STUB = (
    "ResolveType: func(p graphql.ResolveParams) *graphql.Object { return nil }, // TODO"
)


def description_text(doc: Optional[str]) -> str:
    """Doc text with its trailing line terminator removed."""
    if not doc:
        return ""
    return doc[:-1] if doc.endswith("\n") else doc


class DeclarationEmitter:
    """Writes declaration constructors into a shared `CodeWriter`."""

    def __init__(self, writer: CodeWriter):
        self.writer = writer

    # ------------------------------------------------------------ helpers

    def _description(self, descriptions: bool, doc: Optional[str]) -> None:
        if not descriptions:
            return
        text = description_text(doc)
        if text:
            self.writer.write_line('Description: "', text, '",')

    def _open(self, constructor: str, name: str) -> None:
        self.writer.write_line(constructor, "{")
        self.writer.indent()
        self.writer.write_line('Name: "', name, '",')

    def _close(self) -> None:
        self.writer.dedent()
        self.writer.write_line("})")

    def _inline_list(self, label: str, items: Sequence[str]) -> None:
        """One item stays on the label line, several get a line each."""
        if not items:
            return
        if len(items) == 1:
            self.writer.write_line(label, "{ ", items[0], " },")
            return
        self.writer.write_line(label, "{")
        self.writer.indent()
        for item in items:
            self.writer.write_line(item, ",")
        self.writer.dedent()
        self.writer.write_line("},")

    def _typed_entry(self, value: InputValue, descriptions: bool) -> None:
        w = self.writer
        w.write_indent()
        w.write("Type: ")
        print_type(w, value.type)
        w.write(",\n")

        if value.default is not None:
            w.write_indent()
            w.write("DefaultValue: ")
            print_value(w, value.default)
            w.write(",\n")

        self._description(descriptions, value.doc)

    def _args(self, args: Iterable[InputValue], descriptions: bool) -> None:
        w = self.writer
        w.write_line("Args: graphql.FieldConfigArgument{")
        w.indent()
        for arg in args:
            w.write_line('"', arg.name, '": &graphql.ArgumentConfig{')
            w.indent()
            self._typed_entry(arg, descriptions)
            w.dedent()
            w.write_line("},")
        w.dedent()
        w.write_line("},")

    def _fields(
        self, fields: Iterable[FieldDefinition], descriptions: bool, *, resolve: bool
    ) -> None:
        w = self.writer
        w.write_line("Fields: graphql.Fields{")
        w.indent()
        for field in fields:
            w.write_line('"', field.name, '": &graphql.Field{')
            w.indent()

            w.write_indent()
            w.write("Type: ")
            print_type(w, field.type)
            w.write(",\n")

            if field.args:
                self._args(field.args, descriptions)
            if resolve:
                w.write_line(RESOLVE_STUB)
            self._description(descriptions, field.doc)

            w.dedent()
            w.write_line("},")
        w.dedent()
        w.write_line("},")

    # ----------------------------------------------------------- emitters

    def emit_scalar(
        self, name: str, descriptions: bool, doc: Optional[str], spec: ScalarSpec
    ) -> None:
        self._open("NewScalar(graphql.ScalarConfig", name)
        self._description(descriptions, doc)
        self.writer.write_line(SERIALIZE_STUB)
        self._close()

    def emit_object(
        self, name: str, descriptions: bool, doc: Optional[str], spec: ObjectSpec
    ) -> None:
        self._open("NewObject(graphql.ObjectConfig", name)
        self._inline_list(
            "Interfaces: []*graphql.Interface",
            [type_identifier(iface) for iface in spec.interfaces],
        )
        self._fields(spec.fields, descriptions, resolve=True)
        self._description(descriptions, doc)
        self._close()

    def emit_interface(
        self, name: str, descriptions: bool, doc: Optional[str], spec: InterfaceSpec
    ) -> None:
        self._open("NewInterface(graphql.InterfaceConfig", name)
        self._fields(spec.fields, descriptions, resolve=False)
        self._description(descriptions, doc)
        self._close()

    def emit_union(
        self, name: str, descriptions: bool, doc: Optional[str], spec: UnionSpec
    ) -> None:
        self._open("NewUnion(graphql.UnionConfig", name)
        self._inline_list(
            "Types: []*graphql.Object",
            [type_identifier(member) for member in spec.members],
        )
        self.writer.write_line(RESOLVE_TYPE_STUB)
        self._description(descriptions, doc)
        self._close()

    def emit_enum(
        self, name: str, descriptions: bool, doc: Optional[str], spec: EnumSpec
    ) -> None:
        w = self.writer
        self._open("NewEnum(graphql.EnumConfig", name)
        self._description(descriptions, doc)

        w.write_line("Values: graphql.EnumValueConfigMap{")
        w.indent()
        for value in spec.values:
            w.write_line('"', value.name, '": &graphql.EnumValueConfig{')
            w.indent()
            w.write_line('Value: "', value.name, '",')
            self._description(descriptions, value.doc)
            w.dedent()
            w.write_line("},")
        w.dedent()
        w.write_line("},")

        self._close()

    def emit_input(
        self, name: str, descriptions: bool, doc: Optional[str], spec: InputSpec
    ) -> None:
        w = self.writer
        self._open("NewInputObject(graphql.InputObjectConfig", name)

        w.write_line("Fields: graphql.InputObjectFieldConfigMap{")
        w.indent()
        for field in spec.fields:
            w.write_line('"', field.name, '": &graphql.InputObjectFieldConfig{')
            w.indent()
            self._typed_entry(field, descriptions)
            w.dedent()
            w.write_line("},")
        w.dedent()
        w.write_line("},")

        self._description(descriptions, doc)
        self._close()

    def emit_directive(
        self, name: str, descriptions: bool, doc: Optional[str], spec: DirectiveSpec
    ) -> None:
        self._open("NewDirective(graphql.DirectiveConfig", name)
        self._description(descriptions, doc)
        self._inline_list(
            "Locations: []string", [f'"{loc}"' for loc in spec.locations]
        )
        if spec.args:
            self._args(spec.args, descriptions)
        self._close()


__all__ = [
    "DeclarationEmitter",
    "RESOLVE_STUB",
    "RESOLVE_TYPE_STUB",
    "SERIALIZE_STUB",
    "description_text",
]
