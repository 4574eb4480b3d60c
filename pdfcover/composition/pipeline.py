from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from pdfcover.composition.base import PdfHandle
from pdfcover.composition.models import CompositionJob


@dataclass(slots=True)
class CompositionContext:
    job: CompositionJob
    sources: list[PdfHandle] = field(default_factory=list)
    output: PdfHandle | None = None
    page_count: int = 0
    pages_painted: int = 0
    output_bytes: bytes = b""
    error_message: str = ""


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: CompositionContext) -> CompositionContext:
        raise NotImplementedError
