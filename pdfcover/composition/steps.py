from pdfcover.composition.base import BasePdfBackend
from pdfcover.composition.exceptions import UserInputError
from pdfcover.composition.geometry import PageTransform
from pdfcover.composition.pipeline import CompositionContext, PipelineStep
from pdfcover.composition.planner import plan_page
from pdfcover.logging.logger import Log

SCALE_MODES = ("preview", "per_page")


class ValidateJobStep(PipelineStep):
    def run(self, context: CompositionContext) -> CompositionContext:
        job = context.job
        if not job.documents:
            raise UserInputError("No documents to compose")
        if not job.rectangles and not job.fallback_text:
            raise UserInputError("No rectangles or fallback text provided")
        if job.preview_scale <= 0:
            raise UserInputError(f"Preview scale must be positive, got {job.preview_scale}")
        Log.info(
            f"Composing {len(job.documents)} documents with "
            f"{len(job.rectangles)} rectangles"
        )
        return context


class LogFailureStep(PipelineStep):
    def run(self, context: CompositionContext) -> CompositionContext:
        Log.error(f"Composition failed: {context.error_message}")
        return context


class LoadDocumentsStep(PipelineStep):
    def __init__(self, backend: BasePdfBackend) -> None:
        self._backend = backend

    def run(self, context: CompositionContext) -> CompositionContext:
        for document in context.job.documents:
            context.sources.append(self._backend.open_source(document))
            Log.info(f"Loaded {len(document.data)} bytes", document=document.display_name)
        return context


class MergePagesStep(PipelineStep):
    def __init__(self, backend: BasePdfBackend) -> None:
        self._backend = backend

    def run(self, context: CompositionContext) -> CompositionContext:
        context.output = self._backend.new_output()
        for source in context.sources:
            context.page_count += self._backend.append_pages(context.output, source)
        Log.info(
            f"Merged {context.page_count} pages from {len(context.sources)} documents"
        )
        return context


class PaintPagesStep(PipelineStep):
    def __init__(self, backend: BasePdfBackend, scale_mode: str = "preview") -> None:
        if scale_mode not in SCALE_MODES:
            raise ValueError(
                f"Unknown scale mode '{scale_mode}'. Choose from: {list(SCALE_MODES)}"
            )
        self._backend = backend
        self._scale_mode = scale_mode

    def run(self, context: CompositionContext) -> CompositionContext:
        if context.output is None:
            raise ValueError("CompositionContext.output must be set before painting")
        job = context.job
        if not job.rectangles:
            Log.info("No rectangles to paint, keeping plain merge")
            return context
        sizes = self._backend.page_sizes(context.output)
        reference = self._reference_size(job.reference_page_size, sizes)
        for page_index, (width, height) in enumerate(sizes):
            transform = PageTransform(
                page_width=width,
                page_height=height,
                preview_scale=job.preview_scale,
                reference_width=reference[0] if reference else None,
                reference_height=reference[1] if reference else None,
            )
            operations = plan_page(transform, job.rectangles, job.fallback_text)
            self._backend.paint(context.output, page_index, operations)
            context.pages_painted += 1
        Log.info(
            f"Painted {len(job.rectangles)} rectangles on {context.pages_painted} pages"
        )
        return context

    def _reference_size(
        self,
        requested: tuple[float, float] | None,
        sizes: list[tuple[float, float]],
    ) -> tuple[float, float] | None:
        if self._scale_mode == "preview":
            return None
        # Rectangles are drawn on the first page of the first document unless told otherwise.
        return requested if requested is not None else sizes[0]


class SerializeStep(PipelineStep):
    def __init__(self, backend: BasePdfBackend) -> None:
        self._backend = backend

    def run(self, context: CompositionContext) -> CompositionContext:
        if context.output is None:
            raise ValueError("CompositionContext.output must be set before serialization")
        context.output_bytes = self._backend.serialize(context.output)
        Log.info(f"Serialized {len(context.output_bytes)} bytes")
        return context
