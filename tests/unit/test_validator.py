"""Unit tests for structural PDF validation."""

import pytest

from quire.contexts.rendering.pdf_encoder import build_pdf, encode_pdf
from quire.contexts.rendering.validator import (
    parse_xref_offsets,
    validate_data_uri,
    validate_pdf_bytes,
)


@pytest.mark.unit
def test_generated_pdf_is_valid():
    result = validate_pdf_bytes(build_pdf("\\textbf{Ada Lovelace}\n"))

    assert result.is_valid, result.issues
    assert result.page_count == 1


@pytest.mark.unit
def test_validate_data_uri():
    assert validate_data_uri(encode_pdf("hello")).is_valid


@pytest.mark.unit
def test_detects_wrong_stream_length():
    pdf = build_pdf("hello")
    declared = b"/Length %d" % len(b"BT /F1 12 Tf 72 720 Td (hello) Tj ET")
    corrupted = pdf.replace(declared, declared[:-1] + b"0", 1)

    result = validate_pdf_bytes(corrupted)

    assert not result.is_valid
    assert any("Length" in issue for issue in result.issues)


@pytest.mark.unit
def test_detects_misplaced_object():
    """Object 2 moved by one byte while every other offset stays put."""
    pdf = build_pdf("hello")
    corrupted = pdf.replace(b"2 0 obj\n<< /Type /Pages", b" 2 0 obj\n<< /Type/Pages", 1)
    assert len(corrupted) == len(pdf)

    result = validate_pdf_bytes(corrupted)

    assert not result.is_valid
    assert [issue for issue in result.issues if "does not point at object" in issue] == [
        f"xref offset {parse_xref_offsets(pdf)[2]} does not point at object 2"
    ]


@pytest.mark.unit
def test_detects_missing_header_and_eof():
    pdf = build_pdf("hello")
    result = validate_pdf_bytes(pdf[1:-1])

    assert "Missing %PDF-1.4 header" in result.issues
    assert "File does not end with %%EOF" in result.issues


@pytest.mark.unit
def test_parse_xref_offsets_requires_startxref():
    with pytest.raises(ValueError):
        parse_xref_offsets(b"%PDF-1.4\nnot a pdf")
