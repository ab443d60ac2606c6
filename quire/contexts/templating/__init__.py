"""
Templating Context

Responsibilities:
- Validates raw resume input into the ResumeData model
- Generates escaped LaTeX source from resume data
- Generates the HTML preview fragment (with embedded LaTeX source)

Owns: resume data model, escaping of resume fields, Jinja2 templates
Never: Produces binary output (see rendering context)
"""

from quire.contexts.templating.html_generator import render_preview_html, render_widget_page
from quire.contexts.templating.latex_generator import render_latex
from quire.contexts.templating.resume_data_structure import Experience, ResumeData

__all__ = [
    "Experience",
    "ResumeData",
    "render_latex",
    "render_preview_html",
    "render_widget_page",
]
