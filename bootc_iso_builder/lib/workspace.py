from __future__ import annotations

import logging
import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from ..errors import StagingError

logger = logging.getLogger(__name__)


@contextmanager
def temporary_workspace(prefix: str = "bootc-iso-") -> Iterator[Path]:
    """Create a private scratch directory and remove it on every exit path."""

    work_dir = Path(tempfile.mkdtemp(prefix=prefix))
    logger.info("Created workspace %s", work_dir)
    try:
        yield work_dir
    finally:
        shutil.rmtree(work_dir, ignore_errors=True)
        if work_dir.exists():
            logger.warning("Could not fully remove workspace %s", work_dir)
        else:
            logger.info("Removed workspace %s", work_dir)


def stage_file(src: Path, work_dir: Path, role: str) -> Path:
    """Copy src to <work_dir>/<role>/<name>; one subdirectory per input."""

    dst = work_dir / role / src.name
    try:
        dst.parent.mkdir(exist_ok=True)
        shutil.copy2(src, dst)
    except OSError as e:
        raise StagingError(f"failed to stage {src} into {work_dir}: {e}") from e
    logger.debug("Staged %s -> %s", src, dst)
    return dst
