"""
Session logger setup for ResumeForge (Tier 1, detailed logging).

A session log starts with a provenance header recording which ResumeForge
build ran, how it was invoked, and which storage and data overrides were in
effect. Context-specific wrappers live in contexts/{context}/logger.py.
"""

import os
import sys
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

from resumeforge import __version__

load_dotenv()

# Default level colors for console output
LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}

# Environment overrides worth recording in every session header
PROVENANCE_ENV_VARS = (
    "RESUMEFORGE_DB_PATH",
    "TEMPLATE_DEFAULTS_PATH",
    "SPACING_PRESETS_PATH",
    "TEMPLATE_CATALOG_PATH",
)

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: dict = None,
    level_colors: dict = None,
) -> Path:
    """
    Start a logging session for a context.

    Replaces any existing loguru handlers with a DEBUG file log at
    {log_dir}/{context_name}.log and an INFO console log, then writes the
    provenance header to both.

    Args:
        context_name: Context identifier, also the log file stem (e.g., "custom")
        log_dir: Directory for this logging session (created if missing)
        extra_provenance: Additional key-value pairs for the provenance header
        level_colors: Override default level colors (e.g., {"INFO": "<cyan>"})

    Returns:
        Path to log file

    Example:
        log_file = setup_logger(
            context_name="custom",
            log_dir=Path("outs/logs/customize_20251114_123456"),
            extra_provenance={"Template": "modern-1", "Resume": 7},
        )
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()

    colors = {**LEVEL_COLORS, **(level_colors or {})}
    for level_name, color in colors.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=LOG_FORMAT, level="DEBUG")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level="INFO", colorize=True)

    log_provenance(extra_provenance)

    return log_file


def provenance_fields() -> dict:
    """Standard provenance header fields for the running ResumeForge session."""
    fields = {
        "ResumeForge": __version__,
        "Command": " ".join(sys.argv),
        "Working directory": Path.cwd(),
        "Python": sys.version.split()[0],
    }
    for name in PROVENANCE_ENV_VARS:
        value = os.getenv(name)
        if value:
            fields[name] = value
    return fields


def log_provenance(extra_context: dict = None) -> None:
    """
    Log the ResumeForge session header to the current logger.

    Records the package version, the command line, working directory and
    Python version, plus any database or data-file paths overridden through
    the environment, so a customization log can be traced back to the data
    it ran against. Session-specific fields (active template, resume) come
    from extra_context.

    Args:
        extra_context: Additional key-value pairs to log after the standard fields
    """
    logger.info("=" * 80)
    for key, value in {**provenance_fields(), **(extra_context or {})}.items():
        logger.info(f"{key}: {value}")
    logger.info("=" * 80)
