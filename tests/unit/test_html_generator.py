"""Unit tests for HTML preview generation."""

import pytest
from markupsafe import Markup

from quire.contexts.rendering.compiler import RenderedDocument
from quire.contexts.templating.defaults import get_sample_resume
from quire.contexts.templating.html_generator import render_preview_html, render_widget_page
from quire.contexts.templating.latex_generator import render_latex
from quire.contexts.templating.resume_data_structure import ResumeData


def _render(payload):
    data = ResumeData.from_dict(payload)
    return render_preview_html(data, render_latex(data))


@pytest.mark.unit
def test_sample_resume_sections():
    html = _render(get_sample_resume())

    assert '<div class="resume">' in html
    assert "<h1>Ada Lovelace</h1>" in html
    assert "<p>Mathematical Analyst</p>" in html
    assert '<p class="muted">ada@example.com</p>' in html
    assert "<h2>Summary</h2>" in html
    assert "<p><strong>Skills:</strong> Analytical Thinking, Algorithms, Technical Writing</p>" in html
    assert "<h3>Contributor at Analytical Engines</h3>" in html
    assert '<p class="muted">1833 – 1843</p>' in html
    assert "<li>Documented computation methods for complex sequences</li>" in html
    assert "<summary>View LaTeX source</summary>" in html


@pytest.mark.unit
def test_absent_sections_omitted():
    html = _render(
        {
            "name": "Ada Lovelace",
            "experience": [{"company": "Analytical Engines", "role": "Contributor"}],
        }
    )

    assert "<h1>Ada Lovelace</h1>" in html
    assert "<h3>Contributor at Analytical Engines</h3>" in html
    assert "Summary</h2>" not in html
    assert "Skills:" not in html
    assert "<ul>" not in html
    assert 'class="muted"' not in html


@pytest.mark.unit
def test_script_never_unescaped():
    """Injected markup is escaped both in the fields and in the embedded LaTeX."""
    html = _render(
        {
            "name": "<script>alert('x')</script>",
            "summary": '"quoted" & <b>bold</b>',
            "experience": [{"company": "<i>Co</i>", "role": "R", "achievements": ["<img src=x>"]}],
        }
    )

    assert "<script>" not in html
    assert "<b>" not in html
    assert "<i>" not in html
    assert "<img" not in html
    assert "<h1>&lt;script&gt;alert(&#39;x&#39;)&lt;/script&gt;</h1>" in html
    assert "&quot;quoted&quot; &amp; &lt;b&gt;bold&lt;/b&gt;" in html


@pytest.mark.unit
def test_latex_source_embedded_with_html_escaping_only():
    """The LaTeX block is HTML-escaped from its raw characters, not re-LaTeX-escaped."""
    data = ResumeData.from_dict({"name": "R&D <Lab>"})
    latex = render_latex(data)
    html = render_preview_html(data, latex)

    assert latex == "\\textbf{R\\&D <Lab>}\n"
    assert "<pre>\\textbf{R\\&amp;D &lt;Lab&gt;}\n</pre>" in html


@pytest.mark.unit
def test_widget_page_embeds_preview_and_download_link():
    document = RenderedDocument(
        latex_source="x",
        preview_html="<div>&lt;b&gt;</div>",
        pdf_data_uri="data:application/pdf;base64,JVBERi0xLjQ=",
        generated_at="2025-01-01T00:00:00+00:00",
        latex_length=1,
    )

    page = render_widget_page(document)

    assert page == (
        "<html><body><div>&lt;b&gt;</div>"
        '<p><a href="data:application/pdf;base64,JVBERi0xLjQ=" download="resume.pdf">'
        "Download PDF</a></p></body></html>"
    )


@pytest.mark.unit
def test_markup_fields_are_escaped():
    """Fields arriving as markupsafe.Markup are escaped like any other text."""
    html = _render(
        {
            "name": Markup("<script>alert(1)</script>"),
            "experience": [{"company": Markup("<i>Co</i>"), "role": "R", "achievements": [Markup("<img src=x>")]}],
        }
    )

    assert "<script>" not in html
    assert "<i>" not in html
    assert "<img" not in html
    assert "<h1>&lt;script&gt;alert(1)&lt;/script&gt;</h1>" in html


@pytest.mark.unit
def test_markup_latex_source_is_escaped():
    data = ResumeData.from_dict({"name": "Ada"})
    html = render_preview_html(data, Markup("<script>x</script>"))

    assert "<pre>&lt;script&gt;x&lt;/script&gt;</pre>" in html
