from __future__ import annotations

import logging
from pathlib import Path

from ..build_config import BuildConfig
from ..lib.preflight import (
    ensure_absent,
    ensure_arch,
    ensure_loop_support,
    ensure_root_dir,
    require_commands,
)
from ..request import BuildRequest

logger = logging.getLogger(__name__)


class PreflightStep:
    step_id = "10_preflight"

    def __init__(self, cfg: BuildConfig):
        self.cfg = cfg

    def run(self, request: BuildRequest) -> BuildRequest:
        require_commands(self.cfg.required_commands)
        ensure_root_dir(request.root_dir)
        ensure_loop_support(Path(self.cfg.loop_control))
        arch = ensure_arch(self.cfg.arch)
        ensure_absent(request.output_path)
        logger.info("Preflight ok (arch=%s, output=%s)", arch, request.output_path)
        return request
