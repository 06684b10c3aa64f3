"""Logging utilities with run id tracking."""

import json
import logging
import logging.handlers
import uuid

from pathlib import Path
from typing import Any, Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(
    name: str,
    log_dir: Optional[Union[str, Path]] = None,
    level: int = logging.INFO,
) -> logging.Logger:
    """Setup logger with console and, optionally, rotating file handlers."""
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT)

    if log_dir is not None:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        # Rotating file handler (30MB max, 5 backups)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path / "flow-log-tagger.log",
            maxBytes=30 * 1024 * 1024,  # 30MB
            backupCount=5,
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger


def generate_run_id() -> str:
    """Generate unique run ID."""
    return str(uuid.uuid4())[:8]


def log_run_start(logger: logging.Logger, run_id: str, **kwargs: Any) -> None:
    """Log run start with parameters."""
    logger.info(f"Run {run_id} started - {kwargs}")


def log_run_end(
    logger: logging.Logger, run_id: str, success: bool, **kwargs: Any
) -> None:
    """Log run completion."""
    status = "SUCCESS" if success else "FAILED"
    log_data = {"run_id": run_id, "status": status, **kwargs}
    logger.info(f"Run {run_id} {status} - {json.dumps(log_data, default=str)}")
