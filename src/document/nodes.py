"""
Node types describing a parsed GraphQL type-system document.

The generator consumes these values read-only. Every recursive shape (type
references, literals, declaration specs) is a closed set of frozen dataclasses
so the printers can dispatch with `isinstance` and fail loudly on anything
outside the set. Sequences are stored as tuples; their order is the order the
constructs appeared in the source and is preserved all the way to the output.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union


# ----------------------------------------------------------------- type refs


@dataclass(frozen=True)
class NamedType:
    name: str


@dataclass(frozen=True)
class ListType:
    of_type: "TypeRef"


@dataclass(frozen=True)
class NonNullType:
    """Non-null wrapper; never wraps another NonNullType."""

    of_type: "TypeRef"


TypeRef = Union[NamedType, ListType, NonNullType]


# ------------------------------------------------------------------ literals


class LiteralKind(str, Enum):
    INT = "int"
    FLOAT = "float"
    STRING = "string"
    BOOLEAN = "boolean"
    NULL = "null"
    ENUM = "enum"


@dataclass(frozen=True)
class BasicLiteral:
    """A scalar literal; `raw` is the source text, already quoted and escaped."""

    kind: LiteralKind
    raw: str


@dataclass(frozen=True)
class ListLiteral:
    values: Tuple["Literal", ...] = ()


@dataclass(frozen=True)
class ObjectLiteralField:
    key: str
    value: "Literal"


@dataclass(frozen=True)
class ObjectLiteral:
    fields: Tuple[ObjectLiteralField, ...] = ()

    def get(self, key: str) -> Optional["Literal"]:
        for item in self.fields:
            if item.key == key:
                return item.value
        return None


Literal = Union[BasicLiteral, ListLiteral, ObjectLiteral]


# ------------------------------------------------------------ field shapes


@dataclass(frozen=True)
class InputValue:
    """An argument or an input-object field."""

    name: str
    type: TypeRef
    default: Optional[Literal] = None
    doc: Optional[str] = None


@dataclass(frozen=True)
class FieldDefinition:
    """A field of an object or interface type."""

    name: str
    type: TypeRef
    args: Optional[Tuple[InputValue, ...]] = None
    doc: Optional[str] = None


@dataclass(frozen=True)
class EnumValue:
    name: str
    doc: Optional[str] = None


@dataclass(frozen=True)
class RootOperation:
    """One `query: Query` style entry of a schema declaration."""

    operation: str
    type_name: str


# ------------------------------------------------------- declaration specs


@dataclass(frozen=True)
class ScalarSpec:
    pass


@dataclass(frozen=True)
class ObjectSpec:
    fields: Tuple[FieldDefinition, ...] = ()
    interfaces: Tuple[str, ...] = ()


@dataclass(frozen=True)
class InterfaceSpec:
    fields: Tuple[FieldDefinition, ...] = ()


@dataclass(frozen=True)
class UnionSpec:
    members: Tuple[str, ...] = ()


@dataclass(frozen=True)
class EnumSpec:
    values: Tuple[EnumValue, ...] = ()


@dataclass(frozen=True)
class InputSpec:
    fields: Tuple[InputValue, ...] = ()


@dataclass(frozen=True)
class DirectiveSpec:
    locations: Tuple[str, ...] = ()
    args: Optional[Tuple[InputValue, ...]] = None


@dataclass(frozen=True)
class SchemaSpec:
    root_operations: Tuple[RootOperation, ...] = ()


DeclarationSpec = Union[
    ScalarSpec,
    ObjectSpec,
    InterfaceSpec,
    UnionSpec,
    EnumSpec,
    InputSpec,
    DirectiveSpec,
    SchemaSpec,
]


@dataclass(frozen=True)
class Declaration:
    """A single top-level construct; names are unique within a document."""

    name: str
    spec: DeclarationSpec
    doc: Optional[str] = None


# ---------------------------------------------------------------- document


@dataclass(frozen=True)
class Argument:
    name: str
    value: Literal


@dataclass(frozen=True)
class DirectiveAnnotation:
    """A directive applied to the document itself, e.g. `@go(...)`."""

    name: str
    args: Optional[Tuple[Argument, ...]] = None


@dataclass(frozen=True)
class Document:
    name: str
    declarations: Tuple[Declaration, ...] = ()
    directives: Tuple[DirectiveAnnotation, ...] = ()

    @property
    def schema(self) -> Optional[Declaration]:
        """The schema declaration, if the document has one."""
        for decl in self.declarations:
            if isinstance(decl.spec, SchemaSpec):
                return decl
        return None


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
