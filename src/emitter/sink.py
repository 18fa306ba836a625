"""
Output sinks the generator writes finished source into.

The generator never touches the filesystem itself; it asks a sink to open a
named output and writes the bytes it assembled. `DirectorySink` is what the CLI
uses, `MemorySink` keeps everything in a dict for tests and embedding callers.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import BinaryIO, ContextManager, Dict, Protocol, Union


class OutputSink(Protocol):
    def open(self, filename: str) -> ContextManager[BinaryIO]:
        ...


def output_filename(doc_name: str, extension: str = ".go") -> str:
    """
    Replace the last extension of a document name, e.g. `api.graphql` -> `api.go`.

    The extension starts at the last dot of the final path element, a leading
    dot included, so `.graphql` becomes `.go`.
    """
    base = doc_name.rfind("/") + 1
    dot = doc_name.rfind(".", base)
    stem = doc_name[:dot] if dot != -1 else doc_name
    return stem + extension


class DirectorySink:
    """Writes each output to a file beneath `root`."""

    def __init__(self, root: Union[str, Path]):
        self.root = Path(root)

    def open(self, filename: str) -> BinaryIO:
        path = self.root / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        return path.open("wb")


class _MemoryFile(io.BytesIO):
    def __init__(self, sink: "MemorySink", filename: str):
        super().__init__()
        self._sink = sink
        self._filename = filename

    def close(self) -> None:
        if not self.closed:
            self._sink.outputs[self._filename] = self.getvalue()
        super().close()


class MemorySink:
    """Collects outputs in memory, keyed by filename, once they are closed."""

    def __init__(self) -> None:
        self.outputs: Dict[str, bytes] = {}

    def open(self, filename: str) -> BinaryIO:
        return _MemoryFile(self, filename)

    def text(self, filename: str) -> str:
        return self.outputs[filename].decode("utf-8")


__all__ = ["DirectorySink", "MemorySink", "OutputSink", "output_filename"]
