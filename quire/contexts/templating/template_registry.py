"""
Template Registry

Loads and caches the Jinja2 templates used to generate LaTeX source and the
HTML preview. Each output format has its own environment whose `finalize` hook
applies that format's escaping dialect to every interpolated value, so a
template cannot emit resume data unescaped.
"""

from functools import lru_cache
from pathlib import Path
from typing import Dict, Tuple

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateError, TemplateNotFound
from markupsafe import Markup

from quire.contexts.templating.exceptions import TemplateRenderError
from quire.utils.escaping import escape_html, escape_latex

TEMPLATES_PATH = Path(__file__).parent / "templates"

LATEX = "latex"
HTML = "html"


def _finalize_latex(value) -> str:
    return escape_latex(str(value))


def _finalize_html(value) -> str:
    # Markup marks fragments this package already escaped (e.g., a rendered preview)
    if isinstance(value, Markup):
        return str(value)
    return escape_html(str(value))


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 templates per output dialect.

    Templates live in templates/{dialect}/. LaTeX templates use custom
    delimiters to avoid conflicts with LaTeX syntax:
    - Variable: <<< var >>>
    - Block: <%% block %%>
    - Comment: <# comment #>
    """

    def __init__(self, templates_path: Path = TEMPLATES_PATH):
        """
        Initialize the template registry.

        Args:
            templates_path: Base directory holding latex/ and html/ template folders

        Raises:
            FileNotFoundError: If the template directory does not exist
        """
        if not templates_path.is_dir():
            raise FileNotFoundError(f"Template directory not found: {templates_path}")

        self.templates_path = templates_path
        self._cache: Dict[Tuple[str, str], Template] = {}

        self.environments: Dict[str, Environment] = {
            LATEX: Environment(
                loader=FileSystemLoader(str(templates_path / LATEX)),
                variable_start_string="<<<",
                variable_end_string=">>>",
                block_start_string="<%%",
                block_end_string="%%>",
                comment_start_string="<#",
                comment_end_string="#>",
                trim_blocks=True,
                lstrip_blocks=True,
                keep_trailing_newline=False,
                autoescape=False,
                undefined=StrictUndefined,
                finalize=_finalize_latex,
            ),
            HTML: Environment(
                loader=FileSystemLoader(str(templates_path / HTML)),
                trim_blocks=True,
                lstrip_blocks=True,
                keep_trailing_newline=False,
                # Escaping is done by finalize with our own dialect
                autoescape=False,
                undefined=StrictUndefined,
                finalize=_finalize_html,
            ),
        }

    def get_template(self, dialect: str, name: str) -> Template:
        """
        Get a template by dialect and file name, loading and caching it if necessary.

        Args:
            dialect: "latex" or "html"
            name: Template file name (e.g., "header.tex.jinja")

        Returns:
            Jinja2 Template object

        Raises:
            KeyError: If the dialect is unknown
            TemplateNotFound: If the template file doesn't exist
        """
        key = (dialect, name)
        if key not in self._cache:
            self._cache[key] = self.environments[dialect].get_template(name)
        return self._cache[key]

    def render(self, dialect: str, template_name: str, **context) -> str:
        """
        Render a template with the given context.

        The template is named by template_name so that resume fields such as
        `name` can be passed as context.

        Raises:
            TemplateNotFound: If the template file doesn't exist
            TemplateRenderError: If Jinja2 fails while rendering
        """
        template = self.get_template(dialect, template_name)
        try:
            return template.render(**context)
        except TemplateNotFound:
            raise
        except TemplateError as e:
            raise TemplateRenderError(
                "Failed to render template", template_name=f"{dialect}/{template_name}", original_error=e
            ) from e

    def get_template_path(self, dialect: str, name: str) -> Path:
        """Get the file path of a template without loading it."""
        return self.templates_path / dialect / name

    def is_cached(self, dialect: str, name: str) -> bool:
        return (dialect, name) in self._cache

    def clear_cache(self) -> None:
        self._cache.clear()


@lru_cache(maxsize=1)
def get_default_registry() -> TemplateRegistry:
    """Shared registry over the bundled templates."""
    return TemplateRegistry()
