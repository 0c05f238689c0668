from __future__ import annotations

import logging

import pytest

from dive_log.config import ENV_LOG_FILE, ENV_LOG_LEVEL, load_config


def test_defaults_without_config_file(tmp_path) -> None:
    config = load_config(tmp_path, environ={})
    assert config.path is None
    assert config.logging.level == "WARNING"
    assert config.logging.level_number == logging.WARNING
    assert config.logging.file is None
    assert config.ui.mouse is False


def test_reads_config_file(tmp_path) -> None:
    (tmp_path / "dive-log.toml").write_text(
        '[logging]\nlevel = "debug"\nfile = "dive.log"\n\n[ui]\nmouse = true\n'
    )
    config = load_config(tmp_path, environ={})
    assert config.path == tmp_path / "dive-log.toml"
    assert config.logging.level == "DEBUG"
    assert config.logging.file == "dive.log"
    assert config.ui.mouse is True


def test_environment_overrides_file(tmp_path) -> None:
    (tmp_path / "dive-log.toml").write_text('[logging]\nlevel = "error"\n')
    config = load_config(
        tmp_path, environ={ENV_LOG_LEVEL: "info", ENV_LOG_FILE: "/tmp/other.log"}
    )
    assert config.logging.level == "INFO"
    assert config.logging.file == "/tmp/other.log"


def test_unknown_level_rejected(tmp_path) -> None:
    (tmp_path / "dive-log.toml").write_text('[logging]\nlevel = "loud"\n')
    with pytest.raises(ValueError, match="Unknown log level"):
        load_config(tmp_path, environ={})


def test_mouse_must_be_boolean(tmp_path) -> None:
    (tmp_path / "dive-log.toml").write_text('[ui]\nmouse = "yes"\n')
    with pytest.raises(ValueError, match="ui.mouse"):
        load_config(tmp_path, environ={})


def test_malformed_toml_is_a_value_error(tmp_path) -> None:
    (tmp_path / "dive-log.toml").write_text("[logging\n")
    with pytest.raises(ValueError, match="dive-log.toml"):
        load_config(tmp_path, environ={})
