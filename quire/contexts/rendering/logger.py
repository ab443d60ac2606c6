"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from quire.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, verbose: bool = False) -> Path:
    """
    Setup logger for rendering context.

    Args:
        log_dir: Directory for this rendering session
        verbose: Show DEBUG messages on the console

    Returns:
        Path to log file

    Example:
        from quire.contexts.rendering.logger import setup_rendering_logger, _log_info

        log_file = setup_rendering_logger(log_dir)
        _log_info("Starting compilation...")
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        console_level="DEBUG" if verbose else "INFO",
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_compilation_start(resume_name: str) -> None:
    """Log start of compilation with context."""
    _log_debug(f"Starting compilation: {resume_name}")


def log_compilation_result(resume_name: str, document, elapsed_time: float) -> None:
    """
    Log a finished compilation.

    Args:
        resume_name: Name from the resume header
        document: RenderedDocument from DocumentCompiler.compile()
        elapsed_time: Time taken to compile, in seconds
    """
    _log_debug(
        f"Compiled {resume_name}: {document.latex_length} LaTeX chars, "
        f"{len(document.pdf_data_uri)} char data URI ({elapsed_time:.3f}s)"
    )


def log_validation_result(label: str, result) -> None:
    """
    Log a PDF validation result.

    Args:
        label: File name or identifier being validated
        result: ValidationResult from validate_pdf_bytes()
    """
    if result.is_valid:
        _log_success(f"{label}: valid PDF ({result.page_count} page(s))")
    else:
        _log_error(f"{label}: {len(result.issues)} issue(s)")
        for i, issue in enumerate(result.issues, 1):
            _log_error(f"  Issue {i}: {issue}")
