from __future__ import annotations

import logging
import platform
import shutil
from pathlib import Path
from typing import Iterable

from ..errors import MissingCommandError, OutputExistsError, PreflightError

logger = logging.getLogger(__name__)


def require_commands(names: Iterable[str]) -> None:
    for name in names:
        found = shutil.which(name)
        if not found:
            raise MissingCommandError(name)
        logger.debug("Found %s at %s", name, found)


def ensure_root_dir(root_dir: Path) -> None:
    if not root_dir.is_dir():
        raise PreflightError(f"could not change to {root_dir}: not a directory")


def ensure_loop_support(marker: Path) -> None:
    """Mastering needs loop devices; the control node only exists when privileged."""

    if not marker.exists():
        raise PreflightError(
            f"loop support failed: {marker} missing. Are you in a privileged container?"
        )


def ensure_arch(expected: str) -> str:
    arch = platform.machine().strip()
    if arch != expected:
        raise PreflightError(f"must run on {expected} (got {arch})")
    return arch


def ensure_absent(path: Path) -> None:
    if path.exists():
        raise OutputExistsError(str(path))
