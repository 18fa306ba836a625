"""
Lowering of graphql-core AST nodes into the generator's `Document` model.

Only type-system definitions are lowered, in source order. Directives applied
to the `schema` definition or to `extend schema` become the document-level
directives the generator reads its options from. Basic literal values keep
their exact source text so quoting and escaping survive untouched.

Constructs the generator has no output for (operations, fragments, type
extensions, interfaces implementing interfaces) are reported as diagnostics
and skipped rather than failing the whole document.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import List, Optional, Tuple

from graphql.language import ast as gql
from graphql.language.location import get_location

from document import (
    Argument,
    BasicLiteral,
    Declaration,
    DirectiveAnnotation,
    DirectiveSpec,
    Document,
    EnumSpec,
    EnumValue,
    FieldDefinition,
    InputSpec,
    InputValue,
    InterfaceSpec,
    ListLiteral,
    ListType,
    Literal,
    LiteralKind,
    NamedType,
    NonNullType,
    ObjectLiteral,
    ObjectLiteralField,
    ObjectSpec,
    RootOperation,
    ScalarSpec,
    SchemaSpec,
    TypeRef,
    UnionSpec,
)
from logconfig import get_logger

SCHEMA_DECLARATION_NAME = "schema"

logger = get_logger("frontend")


class LoweringError(RuntimeError):
    """Raised when a graphql-core node has a shape the model cannot express."""

    def __init__(self, message: str, node: Optional[gql.Node] = None):
        super().__init__(f"{message}{_format_location(node)}")
        self.node = node


@dataclass(frozen=True)
class LoweringResult:
    document: Document
    diagnostics: List[str]


def _format_location(node: Optional[gql.Node]) -> str:
    loc = getattr(node, "loc", None)
    if loc is None or loc.source is None:
        return ""
    position = get_location(loc.source, loc.start)
    return f" (line {position.line}, column {position.column})"


def _doc(node: gql.Node) -> Optional[str]:
    description = getattr(node, "description", None)
    return description.value if description is not None else None


def _raw_text(node: gql.ValueNode) -> Optional[str]:
    loc = node.loc
    if loc is None or loc.source is None:
        return None
    return loc.source.body[loc.start : loc.end]


class Lowerer:
    """Visitor converting graphql-core definitions into declarations."""

    def __init__(self, *, name: str):
        self.name = name
        self.diagnostics: List[str] = []
        self._declarations: List[Declaration] = []
        self._directives: List[DirectiveAnnotation] = []

    def _warn(self, message: str, node: Optional[gql.Node] = None) -> None:
        self.diagnostics.append(f"{message}{_format_location(node)}")

    # -------------------------------------------------------------- entry

    def lower_document(self, node: gql.DocumentNode) -> Document:
        for definition in node.definitions:
            handler = getattr(self, f"_lower_{definition.kind}", None)
            if handler is None:
                self._warn(f"Skipping unsupported definition: {definition.kind}", definition)
                continue
            handler(definition)
        logger.debug(
            "lowered %s: %d declarations, %d document directives",
            self.name,
            len(self._declarations),
            len(self._directives),
        )
        return Document(
            name=self.name,
            declarations=tuple(self._declarations),
            directives=tuple(self._directives),
        )

    # -------------------------------------------------------- definitions

    def _add(self, node: gql.TypeSystemDefinitionNode, spec) -> None:
        self._declarations.append(
            Declaration(name=node.name.value, spec=spec, doc=_doc(node))
        )

    def _lower_schema_definition(self, node: gql.SchemaDefinitionNode) -> None:
        self._directives.extend(self._lower_directives(node.directives))
        root_operations = tuple(
            RootOperation(operation=op.operation.value, type_name=op.type.name.value)
            for op in node.operation_types or ()
        )
        self._declarations.append(
            Declaration(
                name=SCHEMA_DECLARATION_NAME,
                spec=SchemaSpec(root_operations=root_operations),
                doc=_doc(node),
            )
        )

    def _lower_schema_extension(self, node: gql.SchemaExtensionNode) -> None:
        if node.operation_types:
            self._warn("Ignoring operation types in schema extension", node)
        self._directives.extend(self._lower_directives(node.directives))

    def _lower_scalar_type_definition(self, node: gql.ScalarTypeDefinitionNode) -> None:
        self._add(node, ScalarSpec())

    def _lower_object_type_definition(self, node: gql.ObjectTypeDefinitionNode) -> None:
        spec = ObjectSpec(
            fields=self._lower_fields(node.fields),
            interfaces=tuple(iface.name.value for iface in node.interfaces or ()),
        )
        self._add(node, spec)

    def _lower_interface_type_definition(
        self, node: gql.InterfaceTypeDefinitionNode
    ) -> None:
        if node.interfaces:
            self._warn(
                f"Interface {node.name.value} implements interfaces; ignoring them", node
            )
        self._add(node, InterfaceSpec(fields=self._lower_fields(node.fields)))

    def _lower_union_type_definition(self, node: gql.UnionTypeDefinitionNode) -> None:
        members = tuple(member.name.value for member in node.types or ())
        self._add(node, UnionSpec(members=members))

    def _lower_enum_type_definition(self, node: gql.EnumTypeDefinitionNode) -> None:
        values = tuple(
            EnumValue(name=value.name.value, doc=_doc(value)) for value in node.values or ()
        )
        self._add(node, EnumSpec(values=values))

    def _lower_input_object_type_definition(
        self, node: gql.InputObjectTypeDefinitionNode
    ) -> None:
        self._add(node, InputSpec(fields=self._lower_input_values(node.fields)))

    def _lower_directive_definition(self, node: gql.DirectiveDefinitionNode) -> None:
        spec = DirectiveSpec(
            locations=tuple(loc.value for loc in node.locations or ()),
            args=self._lower_input_values(node.arguments) or None,
        )
        self._add(node, spec)

    # ------------------------------------------------------------- pieces

    def _lower_fields(self, fields) -> Tuple[FieldDefinition, ...]:
        return tuple(
            FieldDefinition(
                name=field.name.value,
                type=self._lower_type(field.type),
                args=self._lower_input_values(field.arguments) or None,
                doc=_doc(field),
            )
            for field in fields or ()
        )

    def _lower_input_values(self, values) -> Tuple[InputValue, ...]:
        return tuple(
            InputValue(
                name=value.name.value,
                type=self._lower_type(value.type),
                default=(
                    self._lower_value(value.default_value)
                    if value.default_value is not None
                    else None
                ),
                doc=_doc(value),
            )
            for value in values or ()
        )

    def _lower_directives(self, directives) -> List[DirectiveAnnotation]:
        annotations: List[DirectiveAnnotation] = []
        for directive in directives or ():
            args = tuple(
                Argument(name=arg.name.value, value=self._lower_value(arg.value))
                for arg in directive.arguments or ()
            )
            annotations.append(
                DirectiveAnnotation(name=directive.name.value, args=args or None)
            )
        return annotations

    def _lower_type(self, node: gql.TypeNode) -> TypeRef:
        if isinstance(node, gql.NamedTypeNode):
            return NamedType(node.name.value)
        if isinstance(node, gql.ListTypeNode):
            return ListType(self._lower_type(node.type))
        if isinstance(node, gql.NonNullTypeNode):
            return NonNullType(self._lower_type(node.type))
        raise LoweringError(f"Unsupported type node: {node.kind}", node)

    def _lower_value(self, node: gql.ValueNode) -> Literal:
        if isinstance(node, gql.ListValueNode):
            return ListLiteral(tuple(self._lower_value(item) for item in node.values))
        if isinstance(node, gql.ObjectValueNode):
            return ObjectLiteral(
                tuple(
                    ObjectLiteralField(key=item.name.value, value=self._lower_value(item.value))
                    for item in node.fields
                )
            )

        raw = _raw_text(node)
        if isinstance(node, gql.IntValueNode):
            return BasicLiteral(LiteralKind.INT, raw or node.value)
        if isinstance(node, gql.FloatValueNode):
            return BasicLiteral(LiteralKind.FLOAT, raw or node.value)
        if isinstance(node, gql.StringValueNode):
            return BasicLiteral(
                LiteralKind.STRING, raw or json.dumps(node.value, ensure_ascii=False)
            )
        if isinstance(node, gql.BooleanValueNode):
            return BasicLiteral(LiteralKind.BOOLEAN, raw or ("true" if node.value else "false"))
        if isinstance(node, gql.NullValueNode):
            return BasicLiteral(LiteralKind.NULL, raw or "null")
        if isinstance(node, gql.EnumValueNode):
            return BasicLiteral(LiteralKind.ENUM, raw or node.value)
        raise LoweringError(f"Unsupported value node: {node.kind}", node)


def lower_document(node: gql.DocumentNode, *, name: str) -> LoweringResult:
    """Lower a parsed graphql-core document and collect diagnostics."""
    lowerer = Lowerer(name=name)
    document = lowerer.lower_document(node)
    return LoweringResult(document=document, diagnostics=lowerer.diagnostics)


__all__ = ["LoweringError", "LoweringResult", "Lowerer", "lower_document"]
