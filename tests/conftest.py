import tempfile
from pathlib import Path
from types import SimpleNamespace

import pytest
import yaml

from bootc_iso_builder.build_config import BuildConfig
from bootc_iso_builder.lib import command, preflight, workspace
from bootc_iso_builder.request import BuildRequest


@pytest.fixture
def root_dir(tmp_path):
    d = tmp_path / "workdir"
    d.mkdir()
    return d


@pytest.fixture
def raw_config(tmp_path, root_dir):
    loop = tmp_path / "loop-control"
    loop.write_text("", encoding="utf-8")
    return {
        "paths": {
            "root_dir": str(root_dir),
            "payload_dir": str(tmp_path / "container"),
        },
        "host": {"arch": "aarch64", "loop_control": str(loop)},
        "base_image": {"listing_url": "http://compose.test/rhel-{major}/{major}.{minor}/{arch}/iso/"},
    }


@pytest.fixture
def cfg(raw_config):
    return BuildConfig(raw=raw_config)


@pytest.fixture
def config_file(tmp_path, raw_config):
    p = tmp_path / "build_config.yaml"
    p.write_text(yaml.safe_dump(raw_config), encoding="utf-8")
    return p


@pytest.fixture
def request_for(cfg):
    def make(**overrides):
        values = dict(
            root_dir=cfg.root_dir,
            output_iso="output.iso",
            bootc_image="quay.io/example/bootc:latest",
            kernel_args=cfg.kernel_args,
            rhel_version="9.6",
            payload_dir=cfg.payload_dir,
        )
        values.update(overrides)
        return BuildRequest.from_inputs(**values)

    return make


@pytest.fixture
def host_ok(monkeypatch):
    """Every tool is on PATH and the host is aarch64."""

    monkeypatch.setattr(preflight.shutil, "which", lambda name: f"/usr/bin/{name}")
    monkeypatch.setattr(preflight.platform, "machine", lambda: "aarch64")


@pytest.fixture
def fake_commands(monkeypatch):
    """Fake subprocess.run for skopeo and mkksiso.

    skopeo creates the OCI directory and mkksiso writes the output ISO.
    Set ``failures[name] = rc`` to make a tool exit non-zero.
    """

    state = SimpleNamespace(calls=[], failures={})

    def fake_run(argv, **kwargs):
        state.calls.append(list(argv))
        name = argv[0]
        rc = state.failures.get(name, 0)
        if rc == 0 and name == "skopeo":
            target = argv[-1][len("oci:"):].rsplit(":", 1)[0]
            Path(target).mkdir(parents=True)
            (Path(target) / "index.json").write_text("{}", encoding="utf-8")
        if rc == 0 and name == "mkksiso":
            Path(argv[-1]).write_bytes(b"ISO")
        return SimpleNamespace(returncode=rc, stdout="", stderr="boom" if rc else "")

    monkeypatch.setattr(command.subprocess, "run", fake_run)
    state.names = lambda: [c[0] for c in state.calls]
    return state


@pytest.fixture
def tracked_workspaces(monkeypatch, tmp_path):
    """Record every workspace directory created during the test."""

    created = []
    real_mkdtemp = tempfile.mkdtemp
    scratch = tmp_path / "scratch"
    scratch.mkdir()

    def mkdtemp(prefix=None):
        d = real_mkdtemp(prefix=prefix, dir=str(scratch))
        created.append(Path(d))
        return d

    monkeypatch.setattr(workspace.tempfile, "mkdtemp", mkdtemp)
    return created
