"""Closed, read-only model of a GraphQL type-system document."""

from .nodes import (
    Argument,
    BasicLiteral,
    Declaration,
    DeclarationSpec,
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

__all__ = [
    "Argument",
    "BasicLiteral",
    "Declaration",
    "DeclarationSpec",
    "DirectiveAnnotation",
    "DirectiveSpec",
    "Document",
    "EnumSpec",
    "EnumValue",
    "FieldDefinition",
    "InputSpec",
    "InputValue",
    "InterfaceSpec",
    "ListLiteral",
    "ListType",
    "Literal",
    "LiteralKind",
    "NamedType",
    "NonNullType",
    "ObjectLiteral",
    "ObjectLiteralField",
    "ObjectSpec",
    "RootOperation",
    "ScalarSpec",
    "SchemaSpec",
    "TypeRef",
    "UnionSpec",
]
