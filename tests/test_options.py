import pytest

from document import (
    Argument,
    BasicLiteral,
    DirectiveAnnotation,
    Document,
    ListLiteral,
    LiteralKind,
    ObjectLiteral,
    ObjectLiteralField,
)
from generator import GeneratorOptions, OptionError, parse_bool, resolve_options


def _go_directive(**fields):
    literal = ObjectLiteral(
        tuple(
            ObjectLiteralField(key=key, value=BasicLiteral(LiteralKind.STRING, raw))
            for key, raw in fields.items()
        )
    )
    return DirectiveAnnotation(name="go", args=(Argument(name="options", value=literal),))


def _doc(*directives):
    return Document(name="test.graphql", directives=tuple(directives))


def test_defaults_without_directive_or_blob():
    assert resolve_options(_doc()) == GeneratorOptions(package="main", descriptions=False)


def test_directive_sets_package_and_descriptions():
    options = resolve_options(_doc(_go_directive(package='"api"', descriptions="true")))
    assert options.package == "api"
    assert options.descriptions is True


def test_directive_without_arguments_keeps_defaults():
    options = resolve_options(
        _doc(DirectiveAnnotation(name="go"), _go_directive(package='"ignored"'))
    )
    assert options.package == "main"


def test_other_directives_are_ignored():
    other = DirectiveAnnotation(
        name="ts", args=(Argument(name="x", value=ObjectLiteral()),)
    )
    assert resolve_options(_doc(other)).package == "main"


def test_blob_overrides_directive():
    document = _doc(_go_directive(package='"api"', descriptions="false"))
    options = resolve_options(document, '{"package": "cli", "descriptions": true}')
    assert options == GeneratorOptions(package="cli", descriptions=True)


def test_blob_only_overrides_present_fields():
    document = _doc(_go_directive(package='"api"'))
    options = resolve_options(document, '{"descriptions": true}')
    assert options == GeneratorOptions(package="api", descriptions=True)


def test_blob_keys_match_case_insensitively():
    options = resolve_options(_doc(), '{"Package": "x", "DESCRIPTIONS": true, "extra": 1}')
    assert options == GeneratorOptions(package="x", descriptions=True)


def test_blob_null_values_keep_previous():
    options = resolve_options(_doc(), '{"package": null}')
    assert options.package == "main"
    assert resolve_options(_doc(), "null").package == "main"


def test_blob_package_quotes_are_stripped():
    assert resolve_options(_doc(), '{"package": "\\"quoted\\""}').package == "quoted"


@pytest.mark.parametrize(
    "blob",
    [
        "{not json",
        "[1, 2]",
        '{"descriptions": "yes"}',
        '{"package": 7}',
        '{"package": ""}',
    ],
)
def test_malformed_blob_raises_option_error(blob):
    with pytest.raises(OptionError):
        resolve_options(_doc(), blob)


def test_directive_bad_boolean_raises_option_error():
    with pytest.raises(OptionError):
        resolve_options(_doc(_go_directive(descriptions="maybe")))


def test_directive_non_object_argument_raises_option_error():
    directive = DirectiveAnnotation(
        name="go",
        args=(Argument(name="options", value=BasicLiteral(LiteralKind.STRING, '"x"')),),
    )
    with pytest.raises(OptionError):
        resolve_options(_doc(directive))


def test_directive_block_string_package_raises_option_error():
    with pytest.raises(OptionError):
        resolve_options(_doc(_go_directive(package='"""api"""')))


def test_directive_composite_option_value_raises_option_error():
    literal = ObjectLiteral((ObjectLiteralField(key="package", value=ListLiteral()),))
    directive = DirectiveAnnotation(name="go", args=(Argument(name="o", value=literal),))
    with pytest.raises(OptionError):
        resolve_options(_doc(directive))


@pytest.mark.parametrize("text", ["1", "t", "T", "TRUE", "true", "True"])
def test_parse_bool_true_spellings(text):
    assert parse_bool(text) is True


@pytest.mark.parametrize("text", ["0", "f", "F", "FALSE", "false", "False"])
def test_parse_bool_false_spellings(text):
    assert parse_bool(text) is False


@pytest.mark.parametrize("text", ["", "yes", "tRuE", '"true"'])
def test_parse_bool_rejects_other_text(text):
    with pytest.raises(OptionError):
        parse_bool(text)
