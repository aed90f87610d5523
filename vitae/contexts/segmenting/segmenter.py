"""
Resume text segmenter.

Main module of the Segmenting context.

This module exports:
- segment: pure, single-pass text -> ResumeRecord
- segment_file: orchestration over a plain-text file (logging, optional YAML output)
"""

import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from vitae.contexts.segmenting.accumulators import ParserCursor, dispatch_line
from vitae.contexts.segmenting.line_patterns import classify_header
from vitae.contexts.segmenting.logger import (
    _log_debug,
    log_segmentation_result,
    log_segmentation_start,
    setup_segmenting_logger,
)
from vitae.contexts.segmenting.normalizer import normalize_lines
from vitae.contexts.segmenting.record import ResumeRecord, save_record
from vitae.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))


def segment(text: str) -> ResumeRecord:
    """
    Segment resume text into a structured record.

    Walks the normalized lines once. Header lines switch the active section and
    are otherwise discarded; every other line goes to the active section's
    accumulator. In-progress experience/education entries are flushed at the end.

    Never raises: text with no recognizable structure ends up in `other`, and
    empty text gives an empty record.

    Args:
        text: Plain resume text (e.g., output of a PDF text extractor)

    Returns:
        ResumeRecord
    """
    record = ResumeRecord()
    cursor = ParserCursor()

    for line in normalize_lines(text or ""):
        section = classify_header(line)
        if section is not None:
            cursor.section = section
            continue
        dispatch_line(line, cursor, record)

    cursor.flush_all(record)
    return record


@dataclass
class SegmentationResult:
    """Result from segment_file() orchestration function."""

    success: bool
    input_path: Optional[Path] = None
    output_path: Optional[Path] = None
    record: Optional[ResumeRecord] = None
    error: Optional[str] = None
    time_s: float = 0.0
    log_dir: Optional[Path] = None


def segment_file(
    input_path: Path,
    output_path: Optional[Path] = None,
    log_dir: Optional[Path] = None,
) -> SegmentationResult:
    """
    Segment a plain-text resume file with logging and optional YAML output.

    I/O failures are reported through the result rather than raised.

    Args:
        input_path: UTF-8 text file holding extracted resume text
        output_path: Optional .yaml destination for the record
        log_dir: Directory for this run's log. Defaults to LOGS_PATH/segment_<timestamp>

    Returns:
        SegmentationResult with the record, paths and timing
    """
    start_time = time.time()
    input_path = Path(input_path)

    if log_dir is None:
        log_dir = LOGS_PATH / f"segment_{now()}"
    log_file = setup_segmenting_logger(log_dir, input_path)
    log_segmentation_start(input_path, log_file)

    result = SegmentationResult(success=False, input_path=input_path, log_dir=log_dir)

    try:
        text = input_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        result.error = f"Could not read {input_path}: {e}"
        result.time_s = time.time() - start_time
        log_segmentation_result(result, result.time_s)
        return result

    _log_debug(f"Read {len(text)} characters")
    result.record = segment(text)

    if output_path is not None:
        try:
            result.output_path = save_record(result.record, Path(output_path))
        except OSError as e:
            result.error = f"Could not write {output_path}: {e}"
            result.time_s = time.time() - start_time
            log_segmentation_result(result, result.time_s)
            return result

    result.success = True
    result.time_s = time.time() - start_time
    log_segmentation_result(result, result.time_s)
    return result
