"""
LaTeX Generator

Converts a validated ResumeData into escaped LaTeX source text.

The source is never compiled here; it is embedded in the PDF content stream
and shown in the HTML preview as-is.
"""

from typing import List, Optional

from quire.contexts.templating.logger import _log_debug
from quire.contexts.templating.resume_data_structure import ResumeData
from quire.contexts.templating.template_registry import (
    LATEX,
    TemplateRegistry,
    get_default_registry,
)

# Blocks (header and each section) are separated by exactly one blank line
BLOCK_SEPARATOR = "\n\n"


class ResumeToLaTeXConverter:
    """Converts ResumeData to LaTeX source, one template per section."""

    def __init__(self, template_registry: Optional[TemplateRegistry] = None):
        self.template_registry = template_registry or get_default_registry()

    def _render(self, template_name: str, **context) -> str:
        return self.template_registry.render(LATEX, template_name, **context).rstrip("\n")

    def generate_header(self, data: ResumeData) -> str:
        """
        Bolded name, then headline and email on new lines when present.

        Returns:
            LaTeX header block without a trailing newline
        """
        return self._render(
            "header.tex.jinja", name=data.name, headline=data.headline, email=data.email
        )

    def generate_summary(self, data: ResumeData) -> str:
        return self._render("summary.tex.jinja", summary=data.summary)

    def generate_skills(self, data: ResumeData) -> str:
        return self._render("skills.tex.jinja", skills=data.skills)

    def generate_experience(self, data: ResumeData) -> str:
        """
        Experience section: one "\\textbf{role} at company" entry per job, with
        an optional date range line and an optional itemize of achievements.
        """
        return self._render("experience.tex.jinja", experience=data.experience)

    def generate_document(self, data: ResumeData) -> str:
        """
        Generate the full LaTeX source.

        Sections appear in fixed order (Summary, Skills, Experience) and only
        when backed by data; a missing section leaves no heading behind.

        Args:
            data: Validated resume record

        Returns:
            LaTeX source ending with a single newline
        """
        blocks: List[str] = [self.generate_header(data)]

        if data.summary is not None:
            blocks.append(self.generate_summary(data))
        if data.skills:
            blocks.append(self.generate_skills(data))
        if data.experience:
            blocks.append(self.generate_experience(data))

        _log_debug(f"Generated LaTeX with {len(blocks) - 1} section(s)")
        return BLOCK_SEPARATOR.join(blocks) + "\n"


def render_latex(data: ResumeData, template_registry: Optional[TemplateRegistry] = None) -> str:
    """Render resume data to LaTeX source text."""
    return ResumeToLaTeXConverter(template_registry).generate_document(data)
