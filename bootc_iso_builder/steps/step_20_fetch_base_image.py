from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Tuple

from ..build_config import BuildConfig
from ..errors import AcquisitionError
from ..lib.net import download, fetch_text
from ..request import BuildRequest

logger = logging.getLogger(__name__)


def split_version(version: str) -> Tuple[str, str]:
    """Split "MAJOR.MINOR"; anything else is rejected."""

    bits = version.strip().split(".")
    if len(bits) != 2 or not all(bits):
        raise AcquisitionError("invalid RHEL version format: expected MAJOR.MINOR")
    return bits[0], bits[1]


def boot_iso_pattern(arch: str) -> re.Pattern[str]:
    return re.compile(r'href="([RHEL-]*[\d.\-]+' + re.escape(arch) + r'-boot\.iso)"')


def extract_iso_name(listing: str, arch: str) -> str | None:
    m = boot_iso_pattern(arch).search(listing)
    return m.group(1) if m else None


class FetchBaseImageStep:
    """Resolve the base boot ISO, downloading it from the nightly compose if needed."""

    step_id = "20_fetch_base_image"
    field = "base_image_path"

    def __init__(self, cfg: BuildConfig):
        self.cfg = cfg

    def listing_url(self, major: str, minor: str) -> str:
        return self.cfg.listing_url.format(major=major, minor=minor, arch=self.cfg.arch)

    def run(self, request: BuildRequest) -> Path:
        if request.base_image_path is not None:
            logger.info("Using supplied input ISO %s", request.base_image_path)
            return request.base_image_path

        major, minor = split_version(request.rhel_version)
        url = self.listing_url(major, minor)

        name = extract_iso_name(fetch_text(url, timeout=self.cfg.http_timeout), self.cfg.arch)
        if not name:
            raise AcquisitionError(f"failed to extract ISO file name from {url}")
        logger.info("Resolved base ISO %s", name)

        local = request.root_dir / name
        # Name match only; contents are not verified.
        if local.exists():
            logger.info("%s already present, skipping download", local)
        else:
            download(url + name, local, timeout=self.cfg.http_timeout)
        return local
