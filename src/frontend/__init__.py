"""Front-end pipeline: SDL parsing and lowering into the document model."""

from .lowering import LoweringError, LoweringResult, Lowerer, lower_document
from .pipeline import FrontEndResult, run_frontend

__all__ = [
    "FrontEndResult",
    "LoweringError",
    "LoweringResult",
    "Lowerer",
    "lower_document",
    "run_frontend",
]
