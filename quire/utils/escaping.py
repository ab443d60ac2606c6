"""
Escaping dialects for the three output formats.

Each dialect is independent: LaTeX escaping is applied to resume fields, HTML
escaping to resume fields and to the raw LaTeX source, PDF escaping to the
LaTeX source placed in the content stream. Dialects are never composed.
"""

import re
from typing import Dict, Tuple

# LaTeX metacharacters and their escaped forms
LATEX_ESCAPES: Dict[str, str] = {
    "\\": r"\textbackslash{}",
    "%": r"\%",
    "&": r"\&",
    "#": r"\#",
    "_": r"\_",
    "{": r"\{",
    "}": r"\}",
    "$": r"\$",
    "^": r"\^{}",
}

# Ordered: ampersand must come first so entities are not re-escaped
HTML_ESCAPES: Tuple[Tuple[str, str], ...] = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)

# Ordered: backslash must come first so the escapes for parentheses survive
PDF_STRING_ESCAPES: Tuple[Tuple[str, str], ...] = (
    ("\\", "\\\\"),
    ("(", "\\("),
    (")", "\\)"),
)

_LATEX_PATTERN = re.compile("|".join(re.escape(char) for char in LATEX_ESCAPES))


def escape_latex(value: str) -> str:
    r"""
    Escape LaTeX metacharacters in plain text.

    Substitution is done in a single pass so the backslashes and braces that
    an escape introduces are never escaped again (``\`` becomes
    ``\textbackslash{}``, not ``\textbackslash\{\}``).

    Example:
        >>> escape_latex("R&D_50%")
        'R\\&D\\_50\\%'
    """
    return _LATEX_PATTERN.sub(lambda match: LATEX_ESCAPES[match.group(0)], value)


def escape_html(value: str) -> str:
    """
    Escape text for safe inclusion in HTML element content and attribute values.

    Example:
        >>> escape_html('<a href="x">')
        '&lt;a href=&quot;x&quot;&gt;'
    """
    for char, replacement in HTML_ESCAPES:
        value = value.replace(char, replacement)
    return value


def escape_pdf_string(value: str) -> str:
    """Escape text for a PDF literal string: backslash, then parentheses."""
    for char, replacement in PDF_STRING_ESCAPES:
        value = value.replace(char, replacement)
    return value
