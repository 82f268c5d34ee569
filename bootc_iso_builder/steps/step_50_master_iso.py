from __future__ import annotations

import logging

from ..errors import StagingError
from ..lib.command import run_cmd
from ..lib.preflight import ensure_absent
from ..request import BuildRequest

logger = logging.getLogger(__name__)


class MasterIsoStep:
    step_id = "50_master_iso"

    def run(self, request: BuildRequest) -> BuildRequest:
        if request.work_dir is None:
            raise StagingError("inputs must be staged before mastering")

        # Never overwrite; a failed mkksiso leaves its partial output for inspection.
        ensure_absent(request.output_path)

        logger.info("Generating ISO...")
        run_cmd(
            [
                "mkksiso",
                "--ks",
                str(request.kickstart_path),
                "-a",
                str(request.payload_dir),
                "-c",
                request.kernel_args,
                str(request.base_image_path),
                str(request.output_path),
            ],
            capture=False,
        )
        logger.info("Wrote %s", request.output_path)
        return request
