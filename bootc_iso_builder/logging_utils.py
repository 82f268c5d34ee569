from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import List

DEFAULT_LOG_PATH = "/var/log/bootc-iso-builder.log"
FALLBACK_LOG_NAME = "bootc-iso-builder.log"

FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(threadName)s]: %(message)s"
CONSOLE_FORMAT = "%(message)s"

# Chatty third-party loggers that would bury the command log at DEBUG.
QUIET_LOGGERS = ("urllib3", "requests")


class _BelowLevel(logging.Filter):
    def __init__(self, level: int):
        super().__init__()
        self.level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.level


def _open_file_handler(log_path: str) -> logging.FileHandler:
    try:
        Path(os.path.dirname(log_path) or ".").mkdir(parents=True, exist_ok=True)
        return logging.FileHandler(log_path)
    except OSError:
        # Privileged build containers often mount /var/log read-only.
        return logging.FileHandler(str(Path.cwd() / FALLBACK_LOG_NAME))


def configure_logging(
    log_path: str = DEFAULT_LOG_PATH,
    console_level: int = logging.INFO,
    also_console: bool = True,
) -> str:
    """Route build output to the terminal and the build log.

    - The log file records everything at DEBUG with timestamps and the
      worker thread name, so interleaved ISO/payload acquisition can be
      told apart.
    - The console shows bare progress lines ("Fetching ISO...",
      "Done fetching ISO!") on stdout and warnings/errors on stderr.
      ``console_level`` (``--verbose``) affects only the console.

    Calling it again only adjusts the console level. Returns the log file
    path actually in use.
    """

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    consoles: List[logging.Handler] = getattr(root, "_bootc_iso_consoles", None) or []
    if getattr(root, "_bootc_iso_log_path", None):
        if consoles:
            consoles[0].setLevel(console_level)
        return root._bootc_iso_log_path  # type: ignore[attr-defined]

    file_handler = _open_file_handler(log_path)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z"))
    root.addHandler(file_handler)

    if also_console:
        progress = logging.StreamHandler(sys.stdout)
        progress.addFilter(_BelowLevel(logging.WARNING))
        problems = logging.StreamHandler(sys.stderr)
        for h in (progress, problems):
            h.setFormatter(logging.Formatter(CONSOLE_FORMAT))
            root.addHandler(h)
        progress.setLevel(console_level)
        problems.setLevel(logging.WARNING)
        consoles = [progress, problems]

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    root._bootc_iso_consoles = consoles  # type: ignore[attr-defined]
    root._bootc_iso_log_path = file_handler.baseFilename  # type: ignore[attr-defined]

    logging.getLogger(__name__).debug(
        "Logging initialized (requested=%s, actual=%s)", log_path, file_handler.baseFilename
    )
    return file_handler.baseFilename
