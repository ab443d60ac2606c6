"""
Session logging for quire scripts.

One call configures loguru with a DEBUG file sink inside the session directory
and a colorized console sink, then writes a header recording how the session
was started. Library modules never configure sinks; they log through the
prefixed wrappers in contexts/{context}/logger.py.
"""

import sys
from pathlib import Path

from loguru import logger

from quire import __version__

CONSOLE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"

LEVEL_COLORS = {
    "WARNING": "<white>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: dict = None,
    console_level: str = "INFO",
) -> Path:
    """
    Route loguru output to <log_dir>/<context_name>.log and the console.

    Args:
        context_name: Session kind, used as the log file stem (e.g., "render")
        log_dir: Directory for this session, created if missing
        extra_provenance: Extra lines for the session header
        console_level: Lowest level echoed to stdout; the file always gets DEBUG

    Returns:
        Path to the session log file
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    log_provenance(extra_provenance)
    return log_file


def log_provenance(extra_context: dict = None) -> None:
    """Write the session header: quire version, command line and interpreter."""
    logger.info("=" * 80)
    logger.info(f"quire {__version__}")
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]}")

    for key, value in (extra_context or {}).items():
        logger.info(f"{key}: {value}")

    logger.info("=" * 80)
