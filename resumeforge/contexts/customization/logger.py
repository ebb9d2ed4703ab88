"""
Customization context logger.

Provides logging interface for the customization context with automatic [custom] prefix.
All customization modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from resumeforge.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[custom]"


def setup_customization_logger(log_dir: Path, template_id: str = None) -> Path:
    """
    Setup logger for the customization context.

    Args:
        log_dir: Directory for this customization session
        template_id: Active template, recorded in the provenance header

    Returns:
        Path to log file
    """
    extra = {"Template": template_id} if template_id else None
    return _setup_logger(context_name="custom", log_dir=log_dir, extra_provenance=extra)


# Wrapper functions with automatic [custom] prefix


def _log_info(message: str) -> None:
    """Log info message with [custom] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [custom] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [custom] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [custom] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [custom] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level customization-specific logging helpers


def log_load_result(resume_id, template_id: str, outcome: str, error: Exception = None) -> None:
    """
    Log how a saved configuration load resolved.

    Args:
        resume_id: Resume whose config was requested
        template_id: Active template (supplies the defaults)
        outcome: "restored", "not_found", "failed" or "superseded"
        error: Underlying error when outcome is "failed"
    """
    if outcome == "restored":
        _log_success(f"Restored saved configuration for resume {resume_id} ({template_id})")
    elif outcome == "not_found":
        _log_info(f"No saved configuration for resume {resume_id}; using {template_id} defaults")
    elif outcome == "superseded":
        _log_debug(f"Discarded stale configuration load for resume {resume_id}")
    else:
        _log_warning(
            f"Failed to load configuration for resume {resume_id}; using {template_id} defaults"
        )
        if error:
            _log_warning(f"  Error: {error}")


def log_save_result(resume_id, success: bool, error: Exception = None) -> None:
    """Log the outcome of a configuration save."""
    if success:
        _log_success(f"Saved configuration for resume {resume_id}")
    else:
        _log_error(f"Failed to save configuration for resume {resume_id}")
        if error:
            _log_error(f"  Error: {error}")
