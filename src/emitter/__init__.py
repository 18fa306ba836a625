"""Text buffer and output sinks used when emitting generated source."""

from .sink import DirectorySink, MemorySink, OutputSink, output_filename
from .writer import INDENT_UNIT, CodeWriter

__all__ = [
    "CodeWriter",
    "DirectorySink",
    "INDENT_UNIT",
    "MemorySink",
    "OutputSink",
    "output_filename",
]
