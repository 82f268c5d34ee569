from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .errors import ConfigError

DEFAULT_KERNEL_ARGS = (
    "ip=192.168.0.2:::255.255.255.0::enp0s1f0:off "
    "netroot=iscsi:192.168.0.1::::iqn.e2000:acc acpi=force"
)
DEFAULT_RHEL_VERSION = "9.6"
SECTIONS = ("paths", "host", "base_image", "kickstart", "defaults")
DEFAULT_LISTING_URL = (
    "http://download.eng.bos.redhat.com/rhel-{major}/nightly/RHEL-{major}/"
    "latest-RHEL-{major}.{minor}/compose/BaseOS/{arch}/iso/"
)


@dataclass(frozen=True)
class BuildConfig:
    raw: Dict[str, Any]

    def _section(self, name: str) -> Dict[str, Any]:
        section = self.raw.get(name) or {}
        if not isinstance(section, dict):
            raise ConfigError(f"build config section '{name}' must be a mapping")
        return section

    @property
    def root_dir(self) -> str:
        return str(self._section("paths").get("root_dir") or "/workdir")

    @property
    def payload_dir(self) -> str:
        return str(self._section("paths").get("payload_dir") or "/tmp/container")

    @property
    def arch(self) -> str:
        return str(self._section("host").get("arch") or "aarch64")

    @property
    def oci_arch(self) -> str:
        return str(self._section("host").get("oci_arch") or "arm64")

    @property
    def loop_control(self) -> str:
        return str(self._section("host").get("loop_control") or "/dev/loop-control")

    @property
    def required_commands(self) -> List[str]:
        cmds = self._section("host").get("required_commands")
        if cmds is None:
            return ["mkksiso", "losetup", "skopeo"]
        if isinstance(cmds, str):
            return [cmds]
        if not isinstance(cmds, list):
            raise ConfigError("host.required_commands must be a list of command names")
        return [str(c) for c in cmds]

    @property
    def listing_url(self) -> str:
        return str(self._section("base_image").get("listing_url") or DEFAULT_LISTING_URL)

    @property
    def http_timeout(self) -> float:
        return float(self._section("base_image").get("timeout") or 60)

    @property
    def kickstart_filename(self) -> str:
        return str(self._section("kickstart").get("filename") or "kickstart.ks")

    @property
    def root_password(self) -> str:
        return str(self._section("kickstart").get("root_password") or "redhat")

    @property
    def network_device(self) -> str:
        return str(self._section("kickstart").get("network_device") or "enp0s1f0d1")

    @property
    def boot_nic(self) -> str:
        return str(self._section("kickstart").get("boot_nic") or "enp0s1f0")

    @property
    def kernel_args(self) -> str:
        return str(self._section("defaults").get("kernel_args") or DEFAULT_KERNEL_ARGS)

    @property
    def rhel_version(self) -> str:
        return str(self._section("defaults").get("rhel_version") or DEFAULT_RHEL_VERSION)


def load_build_config(path: Optional[str], *, required: bool = True) -> BuildConfig:
    """Load the YAML build config.

    A missing file is an error only when the caller asked for it explicitly;
    otherwise every property falls back to its built-in default.
    """

    if not path:
        return BuildConfig(raw={})

    p = Path(path)
    if not p.exists():
        if required:
            raise ConfigError(f"build config not found: {path}")
        return BuildConfig(raw={})

    if p.suffix.lower() not in {".yaml", ".yml"}:
        raise ConfigError("build config must be YAML")

    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid build config {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError("build config must contain a mapping/object")
    for name in SECTIONS:
        if not isinstance(raw.get(name) or {}, dict):
            raise ConfigError(f"build config section '{name}' must be a mapping")

    return BuildConfig(raw=raw)
