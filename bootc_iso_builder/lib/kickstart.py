from __future__ import annotations

from typing import List

# mkksiso -a places the payload directory at the root of the install media.
CONTAINER_REPO_URL = "/run/install/repo/container"


def render_kickstart(
    *,
    kernel_args: str,
    root_password: str = "redhat",
    network_device: str = "enp0s1f0d1",
    boot_nic: str = "enp0s1f0",
) -> str:
    """Render the default unattended kickstart for a bootc install.

    kernel_args is embedded verbatim in the bootloader --append directive.
    """

    lines: List[str] = [
        "# Root Password",
        f"rootpw {root_password}",
        "lang en_US.UTF-8",
        "timezone America/New_York --utc",
        "text",
        "eula --agreed",
        "skipx",
        "clearpart --all --initlabel",
        "autopart --type=lvm --noswap",
        f'bootloader --location=mbr --driveorder=sda --append="{kernel_args}"',
        f"network --bootproto=dhcp --device={network_device}",
        f"ostreecontainer --url={CONTAINER_REPO_URL} --transport=oci --no-signature-verification",
        "%post",
        "echo 'PermitRootLogin yes' >> /etc/ssh/sshd_config",
        "systemctl restart sshd.service",
        f"nmcli con modify {boot_nic} ipv4.never-default yes",
        "%end",
        "reboot",
    ]
    return "\n".join(lines) + "\n"
