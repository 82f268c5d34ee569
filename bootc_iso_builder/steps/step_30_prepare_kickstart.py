from __future__ import annotations

import dataclasses
import logging

from ..build_config import BuildConfig
from ..errors import KickstartError
from ..lib.kickstart import render_kickstart
from ..request import BuildRequest

logger = logging.getLogger(__name__)


class PrepareKickstartStep:
    """Pick the kickstart: explicit path, then an existing default, then a generated one."""

    step_id = "30_prepare_kickstart"

    def __init__(self, cfg: BuildConfig):
        self.cfg = cfg

    def run(self, request: BuildRequest) -> BuildRequest:
        logger.info("Preparing kickstart...")
        if request.kickstart_path is not None:
            return request

        default = request.root_dir / self.cfg.kickstart_filename
        if default.exists():
            logger.info("Using existing %s", default)
            return dataclasses.replace(request, kickstart_path=default)

        logger.info("Generating default %s", default.name)
        content = render_kickstart(
            kernel_args=request.kernel_args,
            root_password=self.cfg.root_password,
            network_device=self.cfg.network_device,
            boot_nic=self.cfg.boot_nic,
        )
        try:
            default.write_text(content, encoding="utf-8")
        except OSError as e:
            raise KickstartError(f"failed to write {default}: {e}") from e
        return dataclasses.replace(request, kickstart_path=default)
