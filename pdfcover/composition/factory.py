from pdfcover.composition.base import BasePdfBackend
from pdfcover.composition.pymupdf_backend import PyMuPdfBackend
from pdfcover.config.settings import Settings


class PdfBackendFactory:
    """Creates the configured PDF composition backend."""

    BACKENDS: dict[str, type[PyMuPdfBackend]] = {
        "pymupdf": PyMuPdfBackend,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfBackend:
        backend = settings.pdf_backend.lower()
        backend_cls = cls.BACKENDS.get(backend)
        if backend_cls is None:
            raise ValueError(
                f"Unknown PDF backend '{backend}'. Choose from: {list(cls.BACKENDS)}"
            )
        return backend_cls(font_name=settings.font_name)
