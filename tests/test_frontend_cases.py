import pytest
from graphql import GraphQLSyntaxError

from document import (
    BasicLiteral,
    DirectiveSpec,
    EnumSpec,
    InputSpec,
    InterfaceSpec,
    ListLiteral,
    ListType,
    LiteralKind,
    NamedType,
    NonNullType,
    ObjectLiteral,
    ObjectSpec,
    RootOperation,
    ScalarSpec,
    SchemaSpec,
    UnionSpec,
)
from frontend import run_frontend
from parser import parse_sdl


def _lower(source, name="test.graphql"):
    result = run_frontend(source, source_name=name)
    assert result.parse.errors == []
    assert result.document is not None
    return result


def _decl(document, name):
    for decl in document.declarations:
        if decl.name == name:
            return decl
    raise AssertionError(f"Declaration {name} not found")


def test_declarations_keep_source_order():
    result = _lower(
        """
        scalar Time
        schema { query: Query }
        type Query { now: Time }
        union U = Query
        enum E { A }
        input I { a: Int }
        interface N { id: ID }
        directive @d on FIELD
        """
    )
    document = result.document
    assert [decl.name for decl in document.declarations] == [
        "Time", "schema", "Query", "U", "E", "I", "N", "d",
    ]
    kinds = [type(decl.spec) for decl in document.declarations]
    assert kinds == [
        ScalarSpec, SchemaSpec, ObjectSpec, UnionSpec, EnumSpec, InputSpec,
        InterfaceSpec, DirectiveSpec,
    ]
    assert document.schema is document.declarations[1]
    assert result.diagnostics == []


def test_document_name_is_basename():
    result = _lower("scalar A", name="/tmp/schemas/api.graphql")
    assert result.document.name == "api.graphql"


def test_type_references_are_nested():
    document = _lower("type Q { f: [[String!]]! }").document
    field = _decl(document, "Q").spec.fields[0]
    assert field.type == NonNullType(ListType(ListType(NonNullType(NamedType("String")))))
    assert field.args is None


def test_object_interfaces_args_and_descriptions():
    document = _lower(
        '''
        "A droid."
        type Droid implements Node & Character {
          "Friends."
          friends("Page size." first: Int = 10): [Character]
        }
        '''
    ).document
    droid = _decl(document, "Droid")
    assert droid.doc == "A droid."
    assert droid.spec.interfaces == ("Node", "Character")

    friends = droid.spec.fields[0]
    assert friends.doc == "Friends."
    (arg,) = friends.args
    assert arg.name == "first"
    assert arg.doc == "Page size."
    assert arg.default == BasicLiteral(LiteralKind.INT, "10")


def test_literals_keep_source_text():
    document = _lower(
        r'''
        input I {
          s: String = "say \"hi\""
          f: Float = 1.50
          b: Boolean = true
          n: String = null
          e: Color = RED
          l: [Int] = [1, 2, 3]
          o: Meta = {a: 1, b: ["x"]}
        }
        '''
    ).document
    defaults = {field.name: field.default for field in _decl(document, "I").spec.fields}

    assert defaults["s"] == BasicLiteral(LiteralKind.STRING, r'"say \"hi\""')
    assert defaults["f"] == BasicLiteral(LiteralKind.FLOAT, "1.50")
    assert defaults["b"] == BasicLiteral(LiteralKind.BOOLEAN, "true")
    assert defaults["n"] == BasicLiteral(LiteralKind.NULL, "null")
    assert defaults["e"] == BasicLiteral(LiteralKind.ENUM, "RED")
    assert defaults["l"] == ListLiteral(
        tuple(BasicLiteral(LiteralKind.INT, raw) for raw in ("1", "2", "3"))
    )
    obj = defaults["o"]
    assert isinstance(obj, ObjectLiteral)
    assert [item.key for item in obj.fields] == ["a", "b"]
    assert obj.get("b") == ListLiteral((BasicLiteral(LiteralKind.STRING, '"x"'),))


def test_schema_root_operations_and_document_directives():
    document = _lower(
        """
        schema @go(options: {package: "api"}) {
          mutation: M
          query: Q
        }
        extend schema @go(options: {descriptions: true})
        """
    ).document
    assert document.schema.spec.root_operations == (
        RootOperation("mutation", "M"),
        RootOperation("query", "Q"),
    )
    assert [directive.name for directive in document.directives] == ["go", "go"]
    options = document.directives[0].args[0].value
    assert options.get("package") == BasicLiteral(LiteralKind.STRING, '"api"')


def test_directive_definition():
    document = _lower(
        '"Cache it." directive @cached(ttl: Int = 60) on FIELD_DEFINITION | OBJECT'
    ).document
    cached = _decl(document, "cached")
    assert cached.doc == "Cache it."
    assert cached.spec.locations == ("FIELD_DEFINITION", "OBJECT")
    assert [arg.name for arg in cached.spec.args] == ["ttl"]


def test_directive_definition_without_args():
    document = _lower("directive @flag on QUERY").document
    assert _decl(document, "flag").spec.args is None


def test_enum_values_and_union_members():
    document = _lower(
        """
        enum Episode { "First." NEWHOPE EMPIRE }
        union Search = Droid | Human
        """
    ).document
    values = _decl(document, "Episode").spec.values
    assert [(value.name, value.doc) for value in values] == [
        ("NEWHOPE", "First."),
        ("EMPIRE", None),
    ]
    assert _decl(document, "Search").spec.members == ("Droid", "Human")


def test_unsupported_definitions_become_diagnostics():
    result = _lower(
        """
        query Q { a }
        extend type Query { b: Int }
        interface A implements B { id: ID }
        type Query { a: Int }
        """
    )
    assert [decl.name for decl in result.document.declarations] == ["A", "Query"]
    assert len(result.diagnostics) == 3
    assert result.diagnostics[0].startswith("Skipping unsupported definition: operation_definition")
    assert "(line 2, column 9)" in result.diagnostics[0]
    assert "implements interfaces" in result.diagnostics[2]


def test_syntax_error_is_reported_in_tolerant_mode():
    result = run_frontend("type Query {", source_name="broken.graphql")
    assert result.document is None
    assert result.diagnostics == []
    (error,) = result.parse.errors
    assert error.line == 1
    assert error.description


def test_syntax_error_is_raised_in_strict_mode():
    with pytest.raises(GraphQLSyntaxError):
        parse_sdl("type Query {", tolerant=False)


def test_parse_result_metadata():
    result = parse_sdl("scalar A", source_name="a.graphql")
    assert result.source_name == "a.graphql"
    assert result.errors == []
    assert result.ast is not None
