import argparse
import json
from pathlib import Path

from pdfcover.composition.engine import build_engine
from pdfcover.config.settings import Settings
from pdfcover.inspection.base import BasePdfInspector
from pdfcover.inspection.exceptions import InspectionError
from pdfcover.inspection.factory import PdfInspectorFactory
from pdfcover.logging.logger import Log
from pdfcover.manifest import ManifestValidationError, validate_and_build
from pdfcover.rectangles.models import StyleOptions
from pdfcover.session.file_loader import FileLoader
from pdfcover.session.runner import ComposeRunner
from pdfcover.session.state import SessionState


def default_style(settings: Settings) -> StyleOptions:
    return StyleOptions(
        padding=settings.default_padding,
        radius=settings.default_radius,
        font_size=settings.default_font_size,
        color=settings.default_color,
    )


def load_session(manifest_path: Path, settings: Settings) -> SessionState:
    """Populate a session from a JSON manifest, the way the editor UI would.

    Raises:
        ManifestValidationError: if the manifest is malformed.
        FileNotFoundError: if a listed document does not exist.
    """
    try:
        raw = json.loads(manifest_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ManifestValidationError(f"Manifest is not valid JSON: {exc}") from exc
    style = default_style(settings)
    manifest = validate_and_build(raw, default_style=style)

    session = SessionState(
        default_style=style,
        file_loader=FileLoader(base_dir=manifest_path.parent),
    )
    for document_path in manifest.documents:
        session.load_document(document_path)
    for item in manifest.rectangles:
        rectangle = session.rectangles.add_rectangle(item.bounds, item.style)
        session.rectangles.set_rectangle_text(rectangle.id, item.text)
    session.fallback_text = manifest.fallback_text
    session.reference_page_size = manifest.reference_page_size
    return session


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Merge PDFs and cover preview-drawn rectangles with replacement text."
    )
    parser.add_argument("manifest", type=Path, help="Path to the JSON job manifest")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for the merged PDF (defaults to OUTPUT_DIR)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point: settings -> session from manifest -> compose -> write output."""
    args = _parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    try:
        session = load_session(args.manifest, settings)
    except (ManifestValidationError, FileNotFoundError, ValueError) as exc:
        Log.error(f"Cannot load manifest {args.manifest}: {exc}")
        return 1

    try:
        inspector = PdfInspectorFactory.create(settings)
    except ValueError as exc:
        Log.error(f"Invalid inspection settings: {exc}")
        return 1

    runner = ComposeRunner(build_engine(settings), settings)
    outcome = runner.run(session)
    if not outcome.ok or outcome.result is None:
        Log.error(outcome.message)
        return 1

    output_dir = args.output_dir if args.output_dir is not None else Path(settings.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / outcome.result.filename
    output_path.write_bytes(outcome.result.data)
    Log.info(f"Wrote {output_path}")

    _log_summary(inspector, outcome.result.data)
    return 0


def _log_summary(inspector: BasePdfInspector, pdf_bytes: bytes) -> None:
    try:
        pages = inspector.inspect(pdf_bytes)
    except InspectionError as exc:
        Log.warning(f"Output written but could not be inspected: {exc}")
        return
    for number, page in enumerate(pages, start=1):
        Log.info(
            f"Page {number}: {page.width:.0f}x{page.height:.0f}pt, "
            f"{len(page.boxes)} covers"
        )


if __name__ == "__main__":
    raise SystemExit(main())
