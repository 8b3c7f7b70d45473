from pathlib import Path
import logging
import sys
from typing import Optional
from datetime import datetime


def setup_logging(logs_dir: Optional[str | Path] = None, log_file_name: str = "server.log") -> logging.Logger:
    """Configure root logging to stderr and a file under `logs_dir`.

    Idempotent: calling multiple times won't add duplicate handlers.
    stdout is reserved for the stdio transport, so console output goes to stderr.
    Returns a module-level logger for callers to use.
    """
    if logs_dir is None:
        logs_dir = Path(__file__).resolve().parent.parent.parent / "logs"
    else:
        logs_dir = Path(logs_dir)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO)

    # formatter used by both handlers
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")

    # One file handler per process; each run writes to a timestamped file
    file_handler_exists = any(isinstance(h, logging.FileHandler) for h in root_logger.handlers)
    if not file_handler_exists:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        base = Path(log_file_name).stem
        ext = Path(log_file_name).suffix or ".log"
        log_file = logs_dir / f"{base}_{timestamp}{ext}"
        try:
            logs_dir.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(log_file, encoding="utf-8")
        except OSError:
            # Read-only install location: stderr only
            fh = None
        if fh is not None:
            fh.setFormatter(formatter)
            fh.setLevel(logging.INFO)
            root_logger.addHandler(fh)

    # Ensure a StreamHandler to stderr exists (don't duplicate)
    stream_stderr_exists = False
    for h in root_logger.handlers:
        if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler):
            if getattr(h, 'stream', None) is sys.stderr:
                stream_stderr_exists = True
                break

    if not stream_stderr_exists:
        sh = logging.StreamHandler(sys.stderr)
        sh.setFormatter(formatter)
        sh.setLevel(logging.INFO)
        root_logger.addHandler(sh)

    # Return a logger for the current module
    return logging.getLogger(__name__)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Helper to get a logger by name; falls back to module logger."""
    logger = logging.getLogger(name) if name else logging.getLogger(__name__)
    return logger
