from pdfcover.composition.base import BasePdfBackend
from pdfcover.composition.factory import PdfBackendFactory
from pdfcover.composition.models import CompositionJob, CompositionResult
from pdfcover.composition.pipeline import CompositionContext, PipelineStep
from pdfcover.composition.steps import (
    LoadDocumentsStep,
    LogFailureStep,
    MergePagesStep,
    PaintPagesStep,
    SerializeStep,
    ValidateJobStep,
)
from pdfcover.config.settings import Settings


class CompositionEngine:
    """Runs the composition pipeline for one job.

    Pipeline: validate -> load -> merge -> paint -> serialize.
    Any step failure runs the failure step and re-raises; no bytes are
    returned for a failed job.
    """

    def __init__(
        self,
        steps: list[PipelineStep],
        backend: BasePdfBackend,
        output_filename: str = "merged-replaced.pdf",
        failed_step: PipelineStep | None = None,
    ) -> None:
        self._steps = steps
        self._backend = backend
        self._output_filename = output_filename
        self._failed_step = failed_step

    def compose(self, job: CompositionJob) -> CompositionResult:
        context = CompositionContext(job=job)
        try:
            for step in self._steps:
                context = step.run(context)
        except Exception as exc:
            context.error_message = str(exc)
            if self._failed_step is not None:
                self._failed_step.run(context)
            raise
        finally:
            self._release(context)
        return CompositionResult(
            data=context.output_bytes,
            filename=self._output_filename,
            page_count=context.page_count,
            pages_painted=context.pages_painted,
        )

    def _release(self, context: CompositionContext) -> None:
        handles = [*context.sources]
        if context.output is not None:
            handles.append(context.output)
        for handle in handles:
            self._backend.close(handle)


def build_engine(settings: Settings) -> CompositionEngine:
    """Build a CompositionEngine wired to the configured backend."""
    backend = PdfBackendFactory.create(settings)
    steps: list[PipelineStep] = [
        ValidateJobStep(),
        LoadDocumentsStep(backend=backend),
        MergePagesStep(backend=backend),
        PaintPagesStep(backend=backend, scale_mode=settings.scale_mode.lower()),
        SerializeStep(backend=backend),
    ]
    return CompositionEngine(
        steps=steps,
        backend=backend,
        output_filename=settings.output_filename,
        failed_step=LogFailureStep(),
    )
