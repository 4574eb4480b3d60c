class CompositionError(Exception):
    """Base exception for all composition failures."""


class UserInputError(CompositionError):
    """Raised when a job lacks documents, or lacks both rectangles and fallback text."""


class DocumentParseError(CompositionError):
    """Raised when a source document cannot be opened as a PDF."""


class CompositionInProgressError(CompositionError):
    """Raised when a run is requested while another one is still in flight."""
