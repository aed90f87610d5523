"""
Loguru sinks for per-run log directories.

A run gets one directory holding `<context>.log` with every DEBUG+ message,
while the console shows INFO+ only. Each log opens with a provenance header
(command, working directory, interpreter, package version, plus whatever the
calling context knows about its input) so a log file can be read on its own.
Context-specific wrappers live in contexts/{context}/logger.py.
"""

import sys
from pathlib import Path
from typing import Any, Mapping, Optional

from loguru import logger

from vitae import __version__

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "<level>{level: <7}</level> | <level>{message}</level>"


def setup_logger(
    context_name: str,
    log_dir: Path,
    provenance: Optional[Mapping[str, Any]] = None,
) -> Path:
    """
    Point loguru at a fresh run directory and write the provenance header.

    Replaces any sinks added by an earlier run in the same process.

    Args:
        context_name: Context identifier, used as the log file stem (e.g., "segment")
        log_dir: Directory for this run (created if missing)
        provenance: Extra header lines, e.g. {"Input": Path("resume.txt")}

    Returns:
        Path to log file
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level="INFO", colorize=True)

    log_provenance(provenance or {})

    return log_file


def log_provenance(provenance: Mapping[str, Any]) -> None:
    """Write the run header: invocation details first, then the caller's fields."""
    header = {
        "Command": " ".join(sys.argv),
        "Working directory": Path.cwd(),
        "Python": sys.version.split()[0],
        "vitae": __version__,
        **provenance,
    }
    width = max(len(key) for key in header)

    logger.info("=" * 80)
    for key, value in header.items():
        logger.info(f"{key + ':':<{width + 1}} {value}")
    logger.info("=" * 80)
