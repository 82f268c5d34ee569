from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import List

from .build_config import BuildConfig
from .lib.parallel import AcquisitionTask, run_all
from .lib.workspace import temporary_workspace
from .request import BuildRequest
from .steps import (
    ExportPayloadStep,
    FetchBaseImageStep,
    MasterIsoStep,
    PrepareKickstartStep,
    PreflightStep,
    StageInputsStep,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    request: BuildRequest
    ran_steps: List[str]


def acquire_inputs(cfg: BuildConfig, request: BuildRequest) -> BuildRequest:
    """Fetch the base ISO and export the payload concurrently.

    Each acquirer resolves one field; both always run to completion.
    """

    iso_step = FetchBaseImageStep(cfg)
    payload_step = ExportPayloadStep(cfg)
    tasks = [
        AcquisitionTask(
            name=payload_step.field,
            fn=lambda: payload_step.run(request),
            done_message="Done preparing container image!",
            failure_label="container image preparation failed",
        ),
        AcquisitionTask(
            name=iso_step.field,
            fn=lambda: iso_step.run(request),
            done_message="Done fetching ISO!",
            failure_label="ISO preparation failed",
        ),
    ]
    logger.info("Fetching ISO...")
    resolved = run_all(tasks)
    return dataclasses.replace(request, **resolved)


def run_pipeline(*, cfg: BuildConfig, request: BuildRequest) -> PipelineResult:
    ran: List[str] = []

    request = PreflightStep(cfg).run(request)
    ran.append(PreflightStep.step_id)

    request = acquire_inputs(cfg, request)
    ran.extend([FetchBaseImageStep.step_id, ExportPayloadStep.step_id])

    request = PrepareKickstartStep(cfg).run(request)
    ran.append(PrepareKickstartStep.step_id)

    logger.info("Making tmp dir...")
    with temporary_workspace() as work_dir:
        request = StageInputsStep(work_dir).run(request)
        ran.append(StageInputsStep.step_id)

        request = MasterIsoStep().run(request)
        ran.append(MasterIsoStep.step_id)

    logger.info("Done.")
    return PipelineResult(request=dataclasses.replace(request, work_dir=None), ran_steps=ran)
