from __future__ import annotations

import argparse
import logging
from typing import Optional

from .build_config import load_build_config
from .errors import IsoBuilderError
from .logging_utils import DEFAULT_LOG_PATH, configure_logging
from .pipeline import PipelineResult, run_pipeline
from .request import BuildRequest

logger = logging.getLogger(__name__)


DEFAULT_BUILD_CONFIG = "build_config.yaml"


def run(
    *,
    config_path: Optional[str],
    input_iso: str,
    output_iso: str,
    kickstart: str,
    bootc_image: str,
    kernel_args: Optional[str],
    rhel_version: Optional[str],
) -> PipelineResult:
    """Build one ISO. Raises IsoBuilderError on any failure."""

    cfg = load_build_config(
        config_path or DEFAULT_BUILD_CONFIG,
        required=config_path is not None,
    )
    request = BuildRequest.from_inputs(
        root_dir=cfg.root_dir,
        output_iso=output_iso,
        input_iso=input_iso,
        kickstart=kickstart,
        bootc_image=bootc_image,
        kernel_args=kernel_args if kernel_args is not None else cfg.kernel_args,
        rhel_version=rhel_version or cfg.rhel_version,
        payload_dir=cfg.payload_dir,
    )
    logger.debug("Build request: %s", request)
    return run_pipeline(cfg=cfg, request=request)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="bootc-iso-builder",
        description="Build a customized RHEL bootc ISO",
    )
    p.add_argument("-i", "--input_iso", default="", help="Path to input ISO")
    p.add_argument("-o", "--output_iso", default="output.iso", help="Path to output ISO")
    p.add_argument("-k", "--kickstart", default="", help="Path to kickstart file")
    p.add_argument("-u", "--bootc_image", default="", help="Bootc image reference")
    p.add_argument("-a", "--kernel_args", default=None, help="Kernel arguments")
    p.add_argument("-v", "--rhel_version", default=None, help="RHEL ISO version (MAJOR.MINOR)")
    p.add_argument("--config", default=None, help=f"Build config YAML (default: {DEFAULT_BUILD_CONFIG} if present)")
    p.add_argument("--log", default=DEFAULT_LOG_PATH, help="Path to build log")
    p.add_argument("--verbose", action="store_true", help="Show debug output (commands, tool output) on the console")
    return p


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(log_path=args.log, console_level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        run(
            config_path=args.config,
            input_iso=args.input_iso,
            output_iso=args.output_iso,
            kickstart=args.kickstart,
            bootc_image=args.bootc_image,
            kernel_args=args.kernel_args,
            rhel_version=args.rhel_version,
        )
    except IsoBuilderError as e:
        logger.error("Error: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
