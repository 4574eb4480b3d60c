import uuid
from pathlib import Path

from pdfcover.composition.models import SourceDocument


class FileLoader:
    """Reads a PDF from disk into a SourceDocument."""

    def __init__(self, base_dir: Path | None = None) -> None:
        self._base_dir = base_dir

    def load(self, path: Path | str) -> SourceDocument:
        """Read file bytes; the document is named after the file.

        Relative paths resolve against ``base_dir`` when one is set.

        Raises:
            FileNotFoundError: if nothing exists at the resolved path.
        """
        resolved = self._resolve_path(Path(path))
        if not resolved.is_file():
            raise FileNotFoundError(f"File not found: {resolved}")
        return SourceDocument(
            id=str(uuid.uuid4()),
            display_name=resolved.name,
            data=resolved.read_bytes(),
        )

    def _resolve_path(self, path: Path) -> Path:
        if self._base_dir is not None and not path.is_absolute():
            return self._base_dir / path
        return path
