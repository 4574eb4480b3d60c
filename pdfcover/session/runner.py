from datetime import datetime, timezone

from pdfcover.composition.engine import CompositionEngine
from pdfcover.composition.exceptions import (
    CompositionError,
    CompositionInProgressError,
    DocumentParseError,
    UserInputError,
)
from pdfcover.config.settings import Settings
from pdfcover.logging.logger import Log
from pdfcover.session.models import OutputRecord, RunOutcome
from pdfcover.session.state import SessionState


class ComposeRunner:
    """Run one composition for a session and turn failures into user messages."""

    def __init__(self, engine: CompositionEngine, settings: Settings) -> None:
        self._engine = engine
        self._settings = settings

    def run(self, session: SessionState) -> RunOutcome:
        """Compose the session's current documents and rectangles exactly once."""
        try:
            self._acquire(session)
        except CompositionInProgressError as exc:
            Log.warning(str(exc))
            return RunOutcome(ok=False, message=str(exc))
        try:
            job = session.build_job(self._settings.preview_scale)
            result = self._engine.compose(job)
        except CompositionError as exc:
            return RunOutcome(ok=False, message=self._user_message(exc))
        finally:
            session.in_flight = False

        session.record_output(
            OutputRecord(
                filename=result.filename,
                page_count=result.page_count,
                size_bytes=len(result.data),
                created_at=datetime.now(timezone.utc),
            )
        )
        Log.info(f"Produced {result.filename} with {result.page_count} pages")
        return RunOutcome(ok=True, result=result, message=f"Created {result.filename}")

    def _acquire(self, session: SessionState) -> None:
        if session.in_flight:
            raise CompositionInProgressError("A composition is already running")
        session.in_flight = True

    def _user_message(self, exc: CompositionError) -> str:
        if isinstance(exc, UserInputError):
            return str(exc)
        if isinstance(exc, DocumentParseError):
            return f"Could not read a document, nothing was produced: {exc}"
        return f"Composition failed: {exc}"
