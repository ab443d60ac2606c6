"""Exceptions raised by the rendering pipeline."""


class PipelineUnavailableError(RuntimeError):
    """
    Raised when the pipeline cannot be invoked at all.

    Examples: bundled templates are missing, or a reader asks for the latest
    document before anything was stored.
    """


class RenderInvariantError(AssertionError):
    """
    Raised when a renderer produced no output for validated input.

    This indicates a bug, not a bad request. It is never caught inside the
    pipeline and should not be handled as a recoverable error by callers.
    """
