"""
Driver turning a lowered GraphQL `Document` into a Go source file.

Output layout, in order: the package header and graphql-go import, a
`Schema` variable when the document declares a schema, one `var <Name>Type`
per remaining declaration in document order, and finally an `init` function
that assembles the schema from its root operations. The generated `init`
panics if graphql-go rejects the schema; that happens when the Go program
runs, never here.

A `Generator` owns one pooled `CodeWriter`. `generate` holds the instance lock
for the whole call and resets the writer first, so a single generator can
serve sequential or concurrent callers without mixing their output.
"""

from __future__ import annotations

import threading
from typing import Callable, Dict

from document import (
    Declaration,
    DirectiveSpec,
    Document,
    EnumSpec,
    InputSpec,
    InterfaceSpec,
    ObjectSpec,
    ScalarSpec,
    SchemaSpec,
    UnionSpec,
)
from emitter import CodeWriter, OutputSink, output_filename
from logconfig import get_logger

from .declarations import DeclarationEmitter
from .options import GeneratorOptions, OptionError, resolve_options
from .printers import LIBRARY, type_identifier

GENERATOR_NAME = "go"
SOURCE_EXTENSION = ".go"
IMPORT_PATH = "github.com/graphql-go/graphql"

ROOT_OPERATION_FIELDS = {
    "query": "Query",
    "mutation": "Mutation",
    "subscription": "Subscription",
}

logger = get_logger("generator")


class GeneratorError(RuntimeError):
    """Raised when generation fails for a document."""

    def __init__(self, doc_name: str, message: str, generator_name: str = GENERATOR_NAME):
        super().__init__(
            f"{generator_name} generator failed for document {doc_name!r}: {message}"
        )
        self.doc_name = doc_name
        self.generator_name = generator_name
        self.message = message


class Generator:
    """Generates graphql-go source for GraphQL documents."""

    name = GENERATOR_NAME

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._writer = CodeWriter()
        self._emitter = DeclarationEmitter(self._writer)

    # ------------------------------------------------------------- public

    def generate(self, document: Document, options: str = "", *, sink: OutputSink) -> str:
        """
        Generate Go source for `document` and write it to `sink`.

        Args:
            document: Lowered, already validated document.
            options: JSON option overrides; empty keeps document/default options.
            sink: Destination opened with the derived `<name>.go` filename.

        Returns:
            The filename the output was written under.

        Raises:
            GeneratorError: If the options are malformed or the sink fails.
        """
        with self._lock:
            source = self._render_locked(document, options)
            filename = output_filename(document.name, SOURCE_EXTENSION)
            data = source.encode("utf-8")
            try:
                with sink.open(filename) as handle:
                    handle.write(data)
            except Exception as exc:
                # Sinks are caller-supplied; any failure they raise is wrapped.
                raise GeneratorError(document.name, str(exc)) from exc
            logger.debug("wrote %d bytes to %s", len(data), filename)
            return filename

    def render(self, document: Document, options: str = "") -> str:
        """Return the generated source without handing it to a sink."""
        with self._lock:
            return self._render_locked(document, options)

    # ------------------------------------------------------------ driving

    def _render_locked(self, document: Document, options: str) -> str:
        self._writer.reset()
        try:
            resolved = resolve_options(document, options)
        except OptionError as exc:
            raise GeneratorError(document.name, str(exc)) from exc
        logger.debug(
            "generating %s (package=%s, descriptions=%s)",
            document.name,
            resolved.package,
            resolved.descriptions,
        )

        self._write_header(resolved)
        schema = document.schema
        if schema is not None:
            self._writer.write_line(f"var Schema {LIBRARY}.Schema")
            self._writer.write_line()

        declarations = [
            decl for decl in document.declarations if not isinstance(decl.spec, SchemaSpec)
        ]
        last = len(declarations) - 1
        for i, decl in enumerate(declarations):
            self._write_declaration(decl, resolved)
            if i != last:
                self._writer.write_line()

        if schema is not None:
            self._write_schema_init(schema)

        source = self._writer.getvalue()
        self._writer.reset()
        return source

    def _write_header(self, options: GeneratorOptions) -> None:
        w = self._writer
        w.write(f"package {options.package}\n\n")
        w.write(f'import "{IMPORT_PATH}"\n\n')

    def _write_declaration(self, decl: Declaration, options: GeneratorOptions) -> None:
        handler = self._dispatch.get(type(decl.spec))
        if handler is None:
            raise TypeError(f"Unsupported declaration {decl.name!r}: {decl.spec!r}")
        self._writer.write(f"var {type_identifier(decl.name)} = {LIBRARY}.")
        handler(decl.name, options.descriptions, decl.doc, decl.spec)

    def _write_schema_init(self, schema: Declaration) -> None:
        w = self._writer
        w.write_line()
        w.write_line("func init() {")
        w.indent()

        w.write_line("var err error")
        w.write_line(f"Schema, err = {LIBRARY}.NewSchema({LIBRARY}.SchemaConfig{{")
        w.indent()
        for op in schema.spec.root_operations:
            w.write_line(
                ROOT_OPERATION_FIELDS[op.operation], ": ", type_identifier(op.type_name), ","
            )
        w.dedent()
        w.write_line("})")

        w.write_line("if err != nil {")
        w.indent()
        w.write_line("panic(err)")
        w.dedent()
        w.write_line("}")

        w.dedent()
        w.write_line("}")

    @property
    def _dispatch(self) -> Dict[type, Callable[..., None]]:
        return {
            ScalarSpec: self._emitter.emit_scalar,
            ObjectSpec: self._emitter.emit_object,
            InterfaceSpec: self._emitter.emit_interface,
            UnionSpec: self._emitter.emit_union,
            EnumSpec: self._emitter.emit_enum,
            InputSpec: self._emitter.emit_input,
            DirectiveSpec: self._emitter.emit_directive,
        }


def generate_source(document: Document, options: str = "") -> str:
    """Convenience wrapper rendering one document with a throwaway generator."""
    return Generator().render(document, options)


__all__ = [
    "GENERATOR_NAME",
    "Generator",
    "GeneratorError",
    "IMPORT_PATH",
    "SOURCE_EXTENSION",
    "generate_source",
]
