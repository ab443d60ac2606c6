"""
Shared utilities for Quire.

Common functionality used across contexts:
- Escaping dialects (LaTeX, HTML, PDF literal strings)
- Logger setup
- Timestamps
"""

from quire.utils.escaping import escape_html, escape_latex, escape_pdf_string
from quire.utils.timestamp import now, now_iso

__all__ = ["escape_html", "escape_latex", "escape_pdf_string", "now", "now_iso"]
