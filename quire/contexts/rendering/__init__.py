"""
Rendering Context

Responsibilities:
- Encodes LaTeX source as a minimal single-page PDF data URI
- Composes LaTeX, PDF and HTML output into one RenderedDocument
- Publishes the most recent document to an explicitly owned store
- Validates generated PDFs structurally

Owns: PDF byte layout, compilation, latest-document store
Never: Escapes resume fields for LaTeX or HTML (see templating context)
"""

from quire.contexts.rendering.compiler import DocumentCompiler, RenderedDocument, compile_resume
from quire.contexts.rendering.document_store import LatestDocumentStore
from quire.contexts.rendering.exceptions import PipelineUnavailableError, RenderInvariantError
from quire.contexts.rendering.pdf_encoder import build_pdf, decode_data_uri, encode_pdf

__all__ = [
    "DocumentCompiler",
    "LatestDocumentStore",
    "PipelineUnavailableError",
    "RenderInvariantError",
    "RenderedDocument",
    "build_pdf",
    "compile_resume",
    "decode_data_uri",
    "encode_pdf",
]
