"""
HTML Generator

Renders the HTML preview fragment for a resume and the standalone page served
to readers of the latest document.

This is the sanitization boundary: every interpolated value, including the
raw LaTeX source shown in the collapsible block, passes through HTML entity
escaping before the fragment is handed to a consumer as trusted markup.
"""

from typing import TYPE_CHECKING, Optional

from markupsafe import Markup

from quire.contexts.templating.logger import _log_debug
from quire.contexts.templating.resume_data_structure import ResumeData
from quire.contexts.templating.template_registry import (
    HTML,
    TemplateRegistry,
    get_default_registry,
)

if TYPE_CHECKING:
    from quire.contexts.rendering.compiler import RenderedDocument


def render_preview_html(
    data: ResumeData,
    latex_source: str,
    template_registry: Optional[TemplateRegistry] = None,
) -> str:
    """
    Render the HTML preview fragment.

    Args:
        data: Validated resume record
        latex_source: LaTeX source generated for the same record; shown
            verbatim (HTML-escaped from its raw characters)
        template_registry: Registry to load templates from (default: bundled)

    Returns:
        HTML fragment rooted at <div class="resume">
    """
    registry = template_registry or get_default_registry()
    html = registry.render(
        HTML, "preview.html.jinja", resume=data, latex_source=str(latex_source)
    )
    _log_debug(f"Rendered preview HTML ({len(html)} chars)")
    return html


def render_widget_page(
    document: "RenderedDocument", template_registry: Optional[TemplateRegistry] = None
) -> str:
    """
    Render the full page shown by the latest-document reader.

    Wraps the already-escaped preview with a download link for the PDF.
    """
    registry = template_registry or get_default_registry()
    return registry.render(
        HTML,
        "widget_page.html.jinja",
        preview_html=Markup(document.preview_html),
        pdf_url=document.pdf_data_uri,
    )
