from __future__ import annotations

import shlex
from typing import Optional


class IsoBuilderError(RuntimeError):
    """Base class for every failure the CLI reports with exit status 1."""


class ConfigError(IsoBuilderError):
    pass


class FatalError(IsoBuilderError):
    """Environment or command failure with no meaningful continuation."""


class MissingCommandError(FatalError):
    def __init__(self, name: str):
        super().__init__(f"Required command {name} not found in PATH")
        self.name = name


class OutputExistsError(FatalError):
    def __init__(self, path: str):
        super().__init__(f"output ISO {path} already exists")
        self.path = path


class StagingError(FatalError):
    pass


class CommandError(FatalError):
    def __init__(self, argv: list[str], returncode: int, stderr: str = ""):
        msg = f"Command failed ({returncode}): {shlex.join(argv)}"
        if stderr.strip():
            msg += f"\n{stderr.strip()}"
        super().__init__(msg)
        self.argv = argv
        self.returncode = returncode
        self.stderr = stderr


class PreflightError(IsoBuilderError):
    pass


class AcquisitionError(IsoBuilderError):
    """A failed acquisition, labelled with the phase it happened in."""

    def __init__(self, phase: str, cause: Optional[BaseException] = None):
        msg = phase if cause is None else f"{phase}: {cause}"
        super().__init__(msg)
        self.phase = phase
        self.cause = cause


class KickstartError(IsoBuilderError):
    pass
