"""Tests for configuration loading."""

import pytest

from menagerie.config import DEFAULT_CONFIG_TOML, Config, _deep_merge, _find_project_root


def test_defaults_when_no_config_file(tmp_path):
    config = Config.load(tmp_path)
    assert config.log_level == "WARNING"
    assert config.release_at_exit is True
    assert config.config_dir == tmp_path / ".menagerie"


def test_user_config_overrides_defaults(tmp_path):
    config_dir = tmp_path / ".menagerie"
    config_dir.mkdir()
    (config_dir / "config.toml").write_text(
        '[logging]\nlevel = "debug"\n\n[demo]\nrelease_at_exit = false\n'
    )
    config = Config.load(tmp_path)
    assert config.log_level == "DEBUG"
    assert config.release_at_exit is False


def test_partial_user_config_keeps_other_defaults(tmp_path):
    config_dir = tmp_path / ".menagerie"
    config_dir.mkdir()
    (config_dir / "config.toml").write_text("[demo]\nrelease_at_exit = false\n")
    config = Config.load(tmp_path)
    assert config.log_level == "WARNING"
    assert config.release_at_exit is False


def test_default_toml_matches_defaults(tmp_path):
    config_dir = tmp_path / ".menagerie"
    config_dir.mkdir()
    (config_dir / "config.toml").write_text(DEFAULT_CONFIG_TOML)
    config = Config.load(tmp_path)
    assert config.log_level == "WARNING"
    assert config.release_at_exit is True


def test_malformed_toml_raises_value_error(tmp_path):
    config_dir = tmp_path / ".menagerie"
    config_dir.mkdir()
    (config_dir / "config.toml").write_text("[logging\nlevel = ")
    with pytest.raises(ValueError):
        Config.load(tmp_path)


def test_deep_merge_does_not_mutate_base():
    base = {"a": {"b": 1, "c": 2}}
    merged = _deep_merge(base, {"a": {"b": 5}})
    assert merged == {"a": {"b": 5, "c": 2}}
    assert base == {"a": {"b": 1, "c": 2}}


def test_find_project_root_walks_up(tmp_path):
    (tmp_path / ".menagerie").mkdir()
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert _find_project_root(nested) == tmp_path.resolve()


@pytest.mark.parametrize("value", ['"false"', '"true"', "0", "1"])
def test_non_bool_release_at_exit_is_rejected(tmp_path, value):
    config_dir = tmp_path / ".menagerie"
    config_dir.mkdir()
    (config_dir / "config.toml").write_text(f"[demo]\nrelease_at_exit = {value}\n")
    with pytest.raises(ValueError, match="release_at_exit"):
        Config.load(tmp_path)
