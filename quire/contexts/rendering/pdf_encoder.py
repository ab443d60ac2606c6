"""
Minimal PDF Encoder

Builds a single-page PDF 1.4 file that shows the LaTeX source as one line of
Helvetica text, and wraps it as a base64 data URI.

File layout:
    %PDF-1.4
    1 0 obj  Catalog
    2 0 obj  Pages
    3 0 obj  Page (MediaBox 612x792, font resource /F1)
    4 0 obj  Content stream
    5 0 obj  Font (Type1 Helvetica, not embedded)
    xref / trailer / startxref / %%EOF

Every byte offset in the cross-reference table, the startxref value and the
stream /Length are read off the bytes already written, never computed from
character counts.
"""

import base64
from typing import List

from quire.contexts.rendering.logger import _log_debug
from quire.utils.escaping import escape_pdf_string

PDF_HEADER = b"%PDF-1.4\n"
PDF_MIME_TYPE = "application/pdf"
DATA_URI_PREFIX = f"data:{PDF_MIME_TYPE};base64,"

# US Letter in points
PAGE_WIDTH = 612
PAGE_HEIGHT = 792

FONT_NAME = "Helvetica"
FONT_SIZE = 12
TEXT_ORIGIN = (72, 720)

# Entry 0 heads the free list; every entry is exactly 20 bytes
XREF_FREE_HEAD = b"0000000000 65535 f \n"


class PdfByteWriter:
    """
    Append-only byte buffer that records where each indirect object starts.

    Objects must be added in order starting at 1; the recorded offsets then
    index directly into the cross-reference table.
    """

    def __init__(self):
        self.buffer = bytearray()
        self.offsets: List[int] = []

    @property
    def position(self) -> int:
        """Number of bytes written so far."""
        return len(self.buffer)

    def write(self, data: bytes) -> None:
        self.buffer.extend(data)

    def add_object(self, number: int, body: bytes) -> None:
        """
        Write "N 0 obj\\n<body>\\nendobj\\n" and record its starting offset.

        Args:
            number: Object number (must be the next in sequence)
            body: Object content between the obj/endobj keywords
        """
        assert number == len(self.offsets) + 1, (
            f"PDF objects must be numbered sequentially: expected {len(self.offsets) + 1}, got {number}"
        )
        self.offsets.append(self.position)
        self.write(b"%d 0 obj\n" % number + body + b"\nendobj\n")

    def write_xref_and_trailer(self, root: int = 1) -> None:
        """Write the cross-reference section, trailer and end-of-file marker."""
        xref_offset = self.position
        size = len(self.offsets) + 1

        self.write(b"xref\n0 %d\n" % size)
        self.write(XREF_FREE_HEAD)
        for offset in self.offsets:
            self.write(b"%010d 00000 n \n" % offset)

        self.write(b"trailer\n<< /Size %d /Root %d 0 R >>\n" % (size, root))
        self.write(b"startxref\n%d\n%%%%EOF" % xref_offset)

    def getvalue(self) -> bytes:
        return bytes(self.buffer)


def build_content_stream(text: str) -> bytes:
    """
    Content stream placing the text with a single Tj at a fixed origin.

    The text is not wrapped or paginated; long input runs off the page but the
    file stays valid.
    """
    x, y = TEXT_ORIGIN
    content = f"BT /F1 {FONT_SIZE} Tf {x} {y} Td ({escape_pdf_string(text)}) Tj ET"
    return content.encode("utf-8")


def build_pdf(latex_source: str) -> bytes:
    """
    Build the raw PDF file for the given LaTeX source.

    Args:
        latex_source: Text to place on the page

    Returns:
        Complete PDF bytes starting with %PDF-1.4 and ending with %%EOF
    """
    stream = build_content_stream(latex_source)

    writer = PdfByteWriter()
    writer.write(PDF_HEADER)
    writer.add_object(1, b"<< /Type /Catalog /Pages 2 0 R >>")
    writer.add_object(2, b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>")
    writer.add_object(
        3,
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 %d %d] /Contents 4 0 R "
        b"/Resources << /Font << /F1 5 0 R >> >> >>" % (PAGE_WIDTH, PAGE_HEIGHT),
    )
    writer.add_object(4, b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream")
    writer.add_object(5, b"<< /Type /Font /Subtype /Type1 /BaseFont /%s >>" % FONT_NAME.encode())
    writer.write_xref_and_trailer(root=1)

    pdf_bytes = writer.getvalue()
    _log_debug(f"Built PDF: {len(pdf_bytes)} bytes, content stream {len(stream)} bytes")
    return pdf_bytes


def to_data_uri(pdf_bytes: bytes) -> str:
    """Wrap PDF bytes as an RFC 2397 base64 data URI."""
    return DATA_URI_PREFIX + base64.b64encode(pdf_bytes).decode("ascii")


def decode_data_uri(data_uri: str) -> bytes:
    """
    Decode a PDF data URI back into raw bytes.

    Raises:
        ValueError: If the URI is not a base64 application/pdf data URI
    """
    if not data_uri.startswith(DATA_URI_PREFIX):
        raise ValueError(f"Not a base64 {PDF_MIME_TYPE} data URI")
    return base64.b64decode(data_uri[len(DATA_URI_PREFIX):], validate=True)


def encode_pdf(latex_source: str) -> str:
    """Encode LaTeX source as a single-page PDF data URI."""
    return to_data_uri(build_pdf(latex_source))
