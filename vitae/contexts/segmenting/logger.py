"""
Segmenting context logger.

Provides logging interface for segmenting context with automatic [segment] prefix.
All segmenting modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

from vitae.utils.logger import setup_logger as _setup_logger

if TYPE_CHECKING:
    from vitae.contexts.segmenting.segmenter import SegmentationResult

CONTEXT_PREFIX = "[segment]"


def setup_segmenting_logger(log_dir: Path, input_path: Path) -> Path:
    """
    Setup logger for segmenting context.

    The provenance header records the input file and, when it exists, its size.

    Args:
        log_dir: Directory for this segmenting session
        input_path: Text file being segmented

    Returns:
        Path to log file
    """
    provenance = {"Input": input_path}
    if input_path.is_file():
        provenance["Input size"] = f"{input_path.stat().st_size} bytes"
    else:
        provenance["Input size"] = "missing"

    return _setup_logger(context_name="segment", log_dir=log_dir, provenance=provenance)


# Wrapper functions with automatic [segment] prefix


def _log_info(message: str) -> None:
    """Log info message with [segment] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [segment] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [segment] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [segment] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [segment] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level segmenting-specific logging helpers


def log_segmentation_start(input_path: Path, log_file: Path) -> None:
    """Log start of segmentation with context."""
    _log_info(f"Starting to segment {input_path.name}")
    _log_info(f"Log file: {log_file}")
    _log_debug(f"Source: {input_path}")


def log_segmentation_result(result: "SegmentationResult", elapsed_time: float) -> None:
    """
    Log segmentation result with per-section counts.

    Args:
        result: SegmentationResult from segment_file()
        elapsed_time: Time taken
    """
    name = result.input_path.name if result.input_path else "<unknown>"

    if not result.success:
        _log_error(f"Failed to segment {name} ({elapsed_time:.2f}s)")
        if result.error:
            _log_error(f"  Error: {result.error}")
        return

    record = result.record
    _log_debug(f"  Summary: {len(record.summary)} chars")
    _log_debug(f"  Experience entries: {len(record.experience)}")
    _log_debug(f"  Education entries: {len(record.education)}")
    _log_debug(f"  Skills: {len(record.skills)}")
    _log_debug(f"  Other: {len(record.other)} chars")

    if not (record.summary or record.experience or record.education or record.skills):
        _log_warning("No resume sections recognized; all text landed in 'other'")

    _log_success(f"{name}: segmentation succeeded ({elapsed_time:.2f}s)")
    if result.output_path:
        _log_info(f"  Output: {result.output_path}")
