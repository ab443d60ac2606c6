"""
Document Compilation Module

Runs the three renderers over one resume record and publishes the result to
the latest-document store.

Pipeline:
    ResumeData -> LaTeX source -> PDF data URI
                               -> HTML preview (data + LaTeX source)
"""

import time
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from jinja2 import TemplateNotFound

from quire.contexts.rendering.document_store import LatestDocumentStore
from quire.contexts.rendering.exceptions import PipelineUnavailableError, RenderInvariantError
from quire.contexts.rendering.logger import (
    _log_debug,
    log_compilation_result,
    log_compilation_start,
)
from quire.contexts.rendering.pdf_encoder import encode_pdf
from quire.contexts.templating.defaults import get_sample_resume
from quire.contexts.templating.html_generator import render_preview_html
from quire.contexts.templating.latex_generator import render_latex
from quire.contexts.templating.resume_data_structure import ResumeData
from quire.contexts.templating.template_registry import TemplateRegistry, get_default_registry
from quire.utils.timestamp import now_iso


@dataclass(frozen=True)
class RenderedDocument:
    """
    Result of compiling one resume.

    Attributes:
        latex_source: Escaped LaTeX source text
        preview_html: HTML preview fragment (safe to treat as trusted markup)
        pdf_data_uri: data:application/pdf;base64,... URI of the single-page PDF
        generated_at: ISO 8601 timestamp of the compile
        latex_length: Number of characters in latex_source
    """

    latex_source: str
    preview_html: str
    pdf_data_uri: str
    generated_at: str
    latex_length: int

    def to_payload(self) -> Dict[str, Any]:
        """Output record returned to callers of the pipeline."""
        return {
            "previewHtml": self.preview_html,
            "pdfUrl": self.pdf_data_uri,
            "metadata": {
                "generatedAt": self.generated_at,
                "latexLength": self.latex_length,
            },
        }


def _require_output(stage: str, output: str) -> str:
    if not output:
        raise RenderInvariantError(f"{stage} produced no output for validated input")
    return output


class DocumentCompiler:
    """
    Composes the LaTeX, PDF and HTML renderers into one RenderedDocument.

    Compilation is synchronous and holds no state besides the store it was
    given, so one compiler can be shared across threads.
    """

    def __init__(
        self,
        store: LatestDocumentStore,
        template_registry: Optional[TemplateRegistry] = None,
    ):
        """
        Args:
            store: Slot that receives every successfully compiled document
            template_registry: Template source (default: bundled templates)

        Raises:
            PipelineUnavailableError: If the template directory is missing
        """
        self.store = store
        try:
            self.template_registry = template_registry or get_default_registry()
        except FileNotFoundError as e:
            raise PipelineUnavailableError(f"Rendering templates unavailable: {e}") from e

    def compile(self, data: ResumeData) -> RenderedDocument:
        """
        Compile a validated resume and store the result.

        All-or-nothing: if any stage fails the exception propagates and the
        store keeps its previous document.

        Args:
            data: Validated resume record

        Returns:
            The new RenderedDocument (also written to the store)

        Raises:
            PipelineUnavailableError: If a bundled template is missing
            RenderInvariantError: If a renderer returns empty output
            TemplateRenderError: If a template fails while rendering
        """
        log_compilation_start(data.name)
        start_time = time.perf_counter()

        try:
            latex = _require_output("LaTeX renderer", render_latex(data, self.template_registry))
            pdf_data_uri = _require_output("PDF encoder", encode_pdf(latex))
            html = _require_output(
                "HTML renderer", render_preview_html(data, latex, self.template_registry)
            )
        except TemplateNotFound as e:
            raise PipelineUnavailableError(f"Rendering template missing: {e.name}") from e

        document = RenderedDocument(
            latex_source=latex,
            preview_html=html,
            pdf_data_uri=pdf_data_uri,
            generated_at=now_iso(),
            latex_length=len(latex),
        )

        log_compilation_result(data.name, document, time.perf_counter() - start_time)
        self.store.put(document)
        return document

    def compile_payload(self, payload: Mapping[str, Any]) -> RenderedDocument:
        """
        Validate raw input, then compile it.

        Raises:
            ResumeValidationError: If the input is rejected (nothing is rendered)
        """
        return self.compile(ResumeData.from_dict(payload))

    def seed(self) -> RenderedDocument:
        """Compile the bundled sample resume so the store is never empty."""
        _log_debug("Seeding latest-document store with sample resume")
        return self.compile_payload(get_sample_resume())


def compile_resume(
    payload: Mapping[str, Any], store: Optional[LatestDocumentStore] = None
) -> RenderedDocument:
    """
    One-shot helper: validate and compile a raw resume mapping.

    Args:
        payload: Raw resume input (camelCase keys)
        store: Store to publish to (default: a fresh, private store)

    Returns:
        RenderedDocument
    """
    compiler = DocumentCompiler(store if store is not None else LatestDocumentStore())
    return compiler.compile_payload(payload)
