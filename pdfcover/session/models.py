from dataclasses import dataclass
from datetime import datetime

from pdfcover.composition.models import CompositionResult


@dataclass(frozen=True)
class OutputRecord:
    """Entry in the session's recent-outputs list."""

    filename: str
    page_count: int
    size_bytes: int
    created_at: datetime


@dataclass(frozen=True)
class RunOutcome:
    """Result of one user-triggered composition run."""

    ok: bool
    result: CompositionResult | None = None
    message: str = ""
