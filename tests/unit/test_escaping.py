"""
Unit tests for the escaping dialects.

Tests quire.utils.escaping: LaTeX, HTML and PDF literal-string escaping.
"""

import pytest

from quire.utils.escaping import LATEX_ESCAPES, escape_html, escape_latex, escape_pdf_string


class TestEscapeLatex:
    """Tests for escape_latex function."""

    @pytest.mark.unit
    @pytest.mark.parametrize("char, expected", sorted(LATEX_ESCAPES.items()))
    def test_each_metacharacter(self, char, expected):
        """Every LaTeX metacharacter maps to its escaped form."""
        assert escape_latex(char) == expected

    @pytest.mark.unit
    def test_backslash_is_not_re_escaped(self):
        """Braces introduced by the backslash escape are left alone."""
        assert escape_latex("a\\b") == r"a\textbackslash{}b"

    @pytest.mark.unit
    def test_mixed_text(self):
        assert escape_latex("R&D_50% {x}") == r"R\&D\_50\% \{x\}"

    @pytest.mark.unit
    def test_plain_and_non_ascii_text_unchanged(self):
        assert escape_latex("Zoë Ångström - 数据") == "Zoë Ångström - 数据"

    @pytest.mark.unit
    def test_html_characters_untouched(self):
        """LaTeX dialect knows nothing about HTML."""
        assert escape_latex("<b>'x'</b>") == "<b>'x'</b>"


class TestEscapeHtml:
    """Tests for escape_html function."""

    @pytest.mark.unit
    def test_script_tag(self):
        assert escape_html("<script>alert('x')</script>") == (
            "&lt;script&gt;alert(&#39;x&#39;)&lt;/script&gt;"
        )

    @pytest.mark.unit
    def test_ampersand_escaped_first(self):
        """Entities produced by later substitutions are not double-escaped."""
        assert escape_html('"<&>"') == "&quot;&lt;&amp;&gt;&quot;"

    @pytest.mark.unit
    def test_latex_characters_untouched(self):
        assert escape_html(r"\textbf{x} 50\%") == r"\textbf{x} 50\%"


class TestEscapePdfString:
    """Tests for escape_pdf_string function."""

    @pytest.mark.unit
    def test_parentheses(self):
        assert escape_pdf_string("f(x)") == r"f\(x\)"

    @pytest.mark.unit
    def test_backslash_escaped_before_parentheses(self):
        """A backslash before a parenthesis yields two escapes, not three."""
        assert escape_pdf_string("\\(") == "\\\\\\("

    @pytest.mark.unit
    def test_latex_source(self):
        assert escape_pdf_string(r"\textbf{Ada}") == r"\\textbf{Ada}"
