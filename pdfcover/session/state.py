import uuid
from pathlib import Path

from pdfcover.composition.models import CompositionJob, SourceDocument
from pdfcover.rectangles.models import StyleOptions
from pdfcover.rectangles.rectangle_model import RectangleModel
from pdfcover.session.file_loader import FileLoader
from pdfcover.session.models import OutputRecord


class SessionState:
    """Uploads, rectangles and fallback text for one editing session.

    The UI (or a manifest) writes here; composition only reads snapshots
    produced by :meth:`build_job`.
    """

    def __init__(
        self,
        default_style: StyleOptions | None = None,
        file_loader: FileLoader | None = None,
    ) -> None:
        self.rectangles = RectangleModel(default_style)
        self.fallback_text = ""
        self.reference_page_size: tuple[float, float] | None = None
        self.recent_outputs: list[OutputRecord] = []
        self.in_flight = False
        self._documents: list[SourceDocument] = []
        self._file_loader = file_loader if file_loader is not None else FileLoader()

    @property
    def documents(self) -> tuple[SourceDocument, ...]:
        return tuple(self._documents)

    def add_document(self, data: bytes, display_name: str) -> SourceDocument:
        document = SourceDocument(id=str(uuid.uuid4()), display_name=display_name, data=data)
        self._documents.append(document)
        return document

    def load_document(self, path: Path | str) -> SourceDocument:
        document = self._file_loader.load(path)
        self._documents.append(document)
        return document

    def remove_document(self, document_id: str) -> bool:
        for index, document in enumerate(self._documents):
            if document.id == document_id:
                del self._documents[index]
                return True
        return False

    def build_job(self, preview_scale: float) -> CompositionJob:
        return CompositionJob(
            documents=self.documents,
            rectangles=self.rectangles.snapshot(),
            fallback_text=self.fallback_text,
            preview_scale=preview_scale,
            reference_page_size=self.reference_page_size,
        )

    def record_output(self, record: OutputRecord) -> None:
        self.recent_outputs.insert(0, record)
