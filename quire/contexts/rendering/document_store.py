"""
Latest Document Store

Single-slot holder for the most recently compiled document. Constructed
explicitly and handed to whichever component compiles or serves documents;
its lifetime is the caller's.

Replacing the slot is one reference assignment, so readers see either the old
document or the new one, never a mix. Overlapping compiles are last-write-wins:
a caller must not assume the slot holds the result of its own call.
"""

from typing import TYPE_CHECKING, Optional

from quire.contexts.rendering.exceptions import PipelineUnavailableError

if TYPE_CHECKING:
    from quire.contexts.rendering.compiler import RenderedDocument


class LatestDocumentStore:
    """Holds at most one RenderedDocument; each put replaces the previous one."""

    def __init__(self, document: Optional["RenderedDocument"] = None):
        self._document = document

    def put(self, document: "RenderedDocument") -> None:
        self._document = document

    def latest(self) -> Optional["RenderedDocument"]:
        """Current document, or None if nothing was stored yet."""
        return self._document

    def require_latest(self) -> "RenderedDocument":
        """
        Current document for readers that cannot handle an empty slot.

        Raises:
            PipelineUnavailableError: If nothing was stored yet
        """
        document = self._document
        if document is None:
            raise PipelineUnavailableError("No document has been compiled yet")
        return document

    def clear(self) -> None:
        self._document = None
