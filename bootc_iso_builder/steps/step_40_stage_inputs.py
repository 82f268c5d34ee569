from __future__ import annotations

import dataclasses
import logging
from pathlib import Path

from ..errors import StagingError
from ..lib.workspace import stage_file
from ..request import BuildRequest

logger = logging.getLogger(__name__)


class StageInputsStep:
    step_id = "40_stage_inputs"

    def __init__(self, work_dir: Path):
        self.work_dir = work_dir

    def run(self, request: BuildRequest) -> BuildRequest:
        if request.base_image_path is None or request.kickstart_path is None:
            raise StagingError("input ISO and kickstart must be resolved before staging")

        logger.info(
            "Copying input iso: %s and kickstart: %s into %s...",
            request.base_image_path,
            request.kickstart_path,
            self.work_dir,
        )
        return dataclasses.replace(
            request,
            base_image_path=stage_file(request.base_image_path, self.work_dir, "base"),
            kickstart_path=stage_file(request.kickstart_path, self.work_dir, "ks"),
            work_dir=self.work_dir,
        )
