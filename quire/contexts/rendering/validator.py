"""
Structural PDF validation.

Checks a generated PDF at the byte level (header, cross-reference offsets,
startxref, stream length, end-of-file marker) and then opens it with PyPDF2 to
confirm a standard reader accepts it.
"""

import io
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from PyPDF2 import PdfReader

from quire.contexts.rendering.pdf_encoder import PDF_HEADER, decode_data_uri

XREF_HEADER_PATTERN = re.compile(rb"xref\n0 (\d+)\n")
XREF_ENTRY_PATTERN = re.compile(rb"(\d{10}) (\d{5}) ([fn]) \n")
STARTXREF_PATTERN = re.compile(rb"startxref\n(\d+)\n%%EOF$")
STREAM_PATTERN = re.compile(rb"<< /Length (\d+) >>\nstream\n")

XREF_ENTRY_SIZE = 20


@dataclass
class ValidationResult:
    """
    Result of PDF validation.

    Attributes:
        is_valid: Whether the file passed every check
        issues: Description of each failed check
        page_count: Pages reported by PyPDF2 (None if it could not open the file)
    """

    is_valid: bool
    issues: List[str] = field(default_factory=list)
    page_count: Optional[int] = None


def parse_xref_offsets(pdf_bytes: bytes) -> Dict[int, int]:
    """
    Read the in-use entries of the cross-reference table that startxref points at.

    Returns:
        Mapping of object number to byte offset

    Raises:
        ValueError: If no well-formed xref section is found
    """
    startxref = STARTXREF_PATTERN.search(pdf_bytes)
    if startxref is None:
        raise ValueError("Missing startxref")

    header = XREF_HEADER_PATTERN.match(pdf_bytes, int(startxref.group(1)))
    if header is None:
        raise ValueError("No xref section at the startxref offset")

    count = int(header.group(1))
    offsets = {}
    position = header.end()
    for number in range(count):
        entry = XREF_ENTRY_PATTERN.fullmatch(pdf_bytes, position, position + XREF_ENTRY_SIZE)
        if entry is None:
            raise ValueError(f"Malformed xref entry for object {number}")
        if entry.group(3) == b"n":
            offsets[number] = int(entry.group(1))
        position += XREF_ENTRY_SIZE
    return offsets


def _check_structure(pdf_bytes: bytes) -> List[str]:
    issues = []

    if not pdf_bytes.startswith(PDF_HEADER):
        issues.append("Missing %PDF-1.4 header")
    if not pdf_bytes.endswith(b"%%EOF"):
        issues.append("File does not end with %%EOF")

    startxref = STARTXREF_PATTERN.search(pdf_bytes)
    if startxref is None:
        issues.append("Missing startxref")
    else:
        xref_offset = int(startxref.group(1))
        if pdf_bytes[xref_offset:xref_offset + 4] != b"xref":
            issues.append(f"startxref {xref_offset} does not point at the xref keyword")

    offsets = {}
    if startxref is not None:
        try:
            offsets = parse_xref_offsets(pdf_bytes)
        except ValueError as e:
            issues.append(str(e))

    for number, offset in sorted(offsets.items()):
        if not pdf_bytes.startswith(b"%d 0 obj" % number, offset):
            issues.append(f"xref offset {offset} does not point at object {number}")

    # The first stream dictionary is the content stream object; later matches would be page text
    stream = STREAM_PATTERN.search(pdf_bytes)
    if stream is None:
        issues.append("Missing content stream")
    else:
        declared = int(stream.group(1))
        if not pdf_bytes.startswith(b"\nendstream", stream.end() + declared):
            issues.append(f"Stream /Length {declared} does not match the stream body")

    return issues


def validate_pdf_bytes(pdf_bytes: bytes) -> ValidationResult:
    """
    Validate a PDF produced by the encoder.

    Args:
        pdf_bytes: Raw PDF file content

    Returns:
        ValidationResult with every issue found
    """
    issues = _check_structure(pdf_bytes)

    page_count = None
    try:
        reader = PdfReader(io.BytesIO(pdf_bytes))
        page_count = len(reader.pages)
    except Exception as e:
        issues.append(f"PyPDF2 could not read the file: {e}")

    if page_count is not None and page_count != 1:
        issues.append(f"Expected 1 page, found {page_count}")

    return ValidationResult(is_valid=not issues, issues=issues, page_count=page_count)


def validate_data_uri(data_uri: str) -> ValidationResult:
    """Validate the PDF carried by a data URI."""
    return validate_pdf_bytes(decode_data_uri(data_uri))
