"""Logging configuration: brief console output plus per-session rotating log files"""
import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path

SESSION_LOGS_KEPT = 5
MAX_LOG_BYTES = 10 * 1024 * 1024  # 10MB


def _prune_session_logs(log_path: Path, keep: int) -> None:
    """Delete old session logs so that `keep` remain once the new one is created."""
    sessions = sorted(log_path.parent.glob(f"{log_path.stem}_*.log"), reverse=True)  # Newest first
    for old_log in sessions[keep - 1:]:
        try:
            old_log.unlink()
        except OSError:
            pass  # Another process may still hold it


def setup_logging(
    log_file: str = "logs/transcript-search.log",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG
) -> Path:
    """
    Configure root logging with two destinations:
    - Console: brief `LEVEL: message` lines (INFO by default)
    - File: detailed lines with logger name and line number (DEBUG by default)

    Each process start writes a new timestamped session file next to
    `log_file` (e.g. logs/transcript-search_20250105_093000.log); only the
    last 5 sessions are kept, and a session file rotates at 10MB.

    Args:
        log_file: Base path of the log file
        console_level: Console logging level
        file_level: File logging level

    Returns:
        Path of this session's log file
    """
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    _prune_session_logs(log_path, SESSION_LOGS_KEPT)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    session_log = log_path.parent / f"{log_path.stem}_{timestamp}.log"

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Filter in handlers
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))

    file_handler = RotatingFileHandler(
        session_log,
        mode='a',
        maxBytes=MAX_LOG_BYTES,
        backupCount=10,
        encoding='utf-8'
    )
    file_handler.setLevel(file_level)
    file_handler.setFormatter(logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))

    root_logger.addHandler(console_handler)
    root_logger.addHandler(file_handler)

    # Keep third-party chatter out of the console (still in the file)
    for noisy in ("uvicorn.access", "httpx", "httpcore", "google_genai"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    logging.info(
        f"Logging configured: console={logging.getLevelName(console_level)}, "
        f"file={session_log} ({logging.getLevelName(file_level)})"
    )
    return session_log
