from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


def resolve_under(root_dir: Path, value: str | Path) -> Path:
    """Resolve a user-supplied path against the working root."""

    p = Path(value).expanduser()
    if p.is_absolute():
        return p
    return root_dir / p


@dataclass(frozen=True)
class BuildRequest:
    """One ISO build.

    Phases never mutate a request; they return a copy with the fields they
    resolved (``dataclasses.replace``).
    """

    root_dir: Path
    output_path: Path
    bootc_image: str
    kernel_args: str
    rhel_version: str
    payload_dir: Path
    base_image_path: Optional[Path] = None
    kickstart_path: Optional[Path] = None
    work_dir: Optional[Path] = None

    @classmethod
    def from_inputs(
        cls,
        *,
        root_dir: str,
        output_iso: str,
        input_iso: str = "",
        kickstart: str = "",
        bootc_image: str = "",
        kernel_args: str,
        rhel_version: str,
        payload_dir: str,
    ) -> "BuildRequest":
        root = Path(root_dir)
        return cls(
            root_dir=root,
            output_path=resolve_under(root, output_iso),
            bootc_image=bootc_image.strip(),
            kernel_args=kernel_args,
            rhel_version=rhel_version,
            payload_dir=Path(payload_dir),
            base_image_path=resolve_under(root, input_iso) if input_iso else None,
            kickstart_path=resolve_under(root, kickstart) if kickstart else None,
        )
