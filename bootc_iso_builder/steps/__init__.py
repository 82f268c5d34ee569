from .step_10_preflight import PreflightStep
from .step_20_fetch_base_image import FetchBaseImageStep
from .step_25_export_payload import ExportPayloadStep
from .step_30_prepare_kickstart import PrepareKickstartStep
from .step_40_stage_inputs import StageInputsStep
from .step_50_master_iso import MasterIsoStep

__all__ = [
    "PreflightStep",
    "FetchBaseImageStep",
    "ExportPayloadStep",
    "PrepareKickstartStep",
    "StageInputsStep",
    "MasterIsoStep",
]
