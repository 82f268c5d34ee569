from __future__ import annotations

import logging
import os
from pathlib import Path

import requests

logger = logging.getLogger(__name__)

USER_AGENT = "bootc-iso-builder"
CHUNK_SIZE = 1024 * 1024


def fetch_text(url: str, *, timeout: float = 60) -> str:
    """GET a URL and return the body as text."""

    logger.debug("Fetching %s", url)
    response = requests.get(url, headers={"User-Agent": USER_AGENT}, timeout=timeout)
    response.raise_for_status()
    return response.text


def download(url: str, dest: Path, *, timeout: float = 60) -> Path:
    """Stream a URL to dest.

    The body lands in ``<dest>.part`` first so an interrupted transfer never
    leaves a file under the final name.
    """

    partial = dest.with_name(dest.name + ".part")
    logger.info("Downloading %s -> %s", url, dest)
    with requests.get(url, headers={"User-Agent": USER_AGENT}, stream=True, timeout=timeout) as response:
        response.raise_for_status()
        with open(partial, "wb") as f:
            for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                if chunk:
                    f.write(chunk)
    os.replace(partial, dest)
    return dest
