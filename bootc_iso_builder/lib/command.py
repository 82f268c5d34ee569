from __future__ import annotations

import logging
import os
import shlex
import subprocess
from dataclasses import dataclass
from typing import Mapping, Sequence

from ..errors import CommandError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CmdResult:
    argv: list[str]
    returncode: int
    stdout: str
    stderr: str


def _fmt_argv(argv: Sequence[str]) -> str:
    return " ".join(shlex.quote(a) for a in argv)


def run_cmd(
    argv: Sequence[str],
    *,
    check: bool = True,
    capture: bool = True,
    env: Mapping[str, str] | None = None,
    cwd: str | None = None,
) -> CmdResult:
    """Run an external tool.

    - The argv is always logged.
    - capture=True keeps stdout/stderr (logged at DEBUG); capture=False lets
      long-running tools like mkksiso write straight to the terminal.
    - check=True turns a non-zero exit into CommandError.
    """

    argv_list = [str(a) for a in argv]
    logger.info("CMD %s", _fmt_argv(argv_list))

    pipe = subprocess.PIPE if capture else None
    p = subprocess.run(
        argv_list,
        text=True,
        stdout=pipe,
        stderr=pipe,
        cwd=cwd,
        env=dict(os.environ, **(env or {})),
    )
    stdout = p.stdout or ""
    stderr = p.stderr or ""

    if stdout:
        logger.debug("STDOUT %s", stdout.strip())
    if stderr:
        logger.debug("STDERR %s", stderr.strip())

    if check and p.returncode != 0:
        raise CommandError(argv_list, p.returncode, stderr)

    return CmdResult(argv=argv_list, returncode=p.returncode, stdout=stdout, stderr=stderr)
