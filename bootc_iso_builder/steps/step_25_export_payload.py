from __future__ import annotations

import logging
import shutil
from pathlib import Path

from ..build_config import BuildConfig
from ..errors import AcquisitionError
from ..lib.command import run_cmd
from ..request import BuildRequest

logger = logging.getLogger(__name__)


class ExportPayloadStep:
    step_id = "25_export_payload"
    field = "payload_dir"

    def __init__(self, cfg: BuildConfig):
        self.cfg = cfg

    def run(self, request: BuildRequest) -> Path:
        if not request.bootc_image:
            raise AcquisitionError("bootc image reference is required (-u/--bootc_image)")

        payload_dir = request.payload_dir
        logger.info("Saving bootc image to %s", payload_dir)
        if payload_dir.exists():
            shutil.rmtree(payload_dir)

        run_cmd(
            [
                "skopeo",
                "copy",
                f"--override-arch={self.cfg.oci_arch}",
                f"docker://{request.bootc_image}",
                f"oci:{payload_dir}:latest",
            ]
        )
        return payload_dir
