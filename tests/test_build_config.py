import pytest

from bootc_iso_builder.build_config import DEFAULT_KERNEL_ARGS, BuildConfig, load_build_config
from bootc_iso_builder.errors import ConfigError


def test_defaults_when_optional_file_missing(tmp_path):
    cfg = load_build_config(str(tmp_path / "absent.yaml"), required=False)
    assert cfg.root_dir == "/workdir"
    assert cfg.payload_dir == "/tmp/container"
    assert cfg.arch == "aarch64"
    assert cfg.oci_arch == "arm64"
    assert cfg.required_commands == ["mkksiso", "losetup", "skopeo"]
    assert cfg.kernel_args == DEFAULT_KERNEL_ARGS
    assert cfg.rhel_version == "9.6"


def test_explicit_missing_file_is_error(tmp_path):
    with pytest.raises(ConfigError):
        load_build_config(str(tmp_path / "absent.yaml"))


def test_loads_yaml(config_file, root_dir):
    cfg = load_build_config(str(config_file))
    assert cfg.root_dir == str(root_dir)


def test_rejects_non_mapping(tmp_path):
    p = tmp_path / "c.yaml"
    p.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_build_config(str(p))


def test_single_required_command_string():
    cfg = BuildConfig(raw={"host": {"required_commands": "mkksiso"}})
    assert cfg.required_commands == ["mkksiso"]


def test_required_commands_must_be_a_list():
    with pytest.raises(ConfigError, match="required_commands"):
        BuildConfig(raw={"host": {"required_commands": {"mkksiso": True}}}).required_commands


@pytest.mark.parametrize("body", ["paths: []\n", "host: aarch64\n", "kickstart: [a, b]\n"])
def test_rejects_non_mapping_section(tmp_path, body):
    p = tmp_path / "c.yaml"
    p.write_text(body, encoding="utf-8")
    with pytest.raises(ConfigError, match="must be a mapping"):
        load_build_config(str(p))


def test_section_checked_on_access():
    with pytest.raises(ConfigError):
        BuildConfig(raw={"paths": ["/workdir"]}).root_dir
