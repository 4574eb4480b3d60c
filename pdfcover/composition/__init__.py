from pdfcover.composition.engine import CompositionEngine, build_engine
from pdfcover.composition.models import CompositionJob, CompositionResult, SourceDocument

__all__ = [
    "CompositionEngine",
    "CompositionJob",
    "CompositionResult",
    "SourceDocument",
    "build_engine",
]
