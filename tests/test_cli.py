from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from dive_log.cli import configure_logging, main
from dive_log.navigation import OutcomeKind, SessionOutcome
from dive_log.ui.runner import RunUiResult

SCRIPT = """\
type Dive
tab
type Site
tab
type Today
right
type boat
tab
type ocean
tab
type 45
tab
type 18
tab
type 24
right
type 22
tab
type 6
tab
type wetsuit
tab
type {start}
tab
type 50
enter
"""


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DIVE_LOG_LOG_LEVEL", raising=False)
    monkeypatch.delenv("DIVE_LOG_LOG_FILE", raising=False)
    yield
    for handler in list(logging.getLogger("dive_log").handlers):
        logging.getLogger("dive_log").removeHandler(handler)
        handler.close()


def test_headless_script_prints_gas_remaining(tmp_path, capsys) -> None:
    script = tmp_path / "keys.txt"
    script.write_text(SCRIPT.format(start="150"))

    assert main(["--headless", "--script", str(script)]) == 0

    captured = capsys.readouterr()
    assert captured.out == "Gas remaining: 100\n"
    assert "Page 3 of 3" in captured.err


def test_headless_script_with_bad_gas_prints_nothing(tmp_path, capsys) -> None:
    script = tmp_path / "keys.txt"
    script.write_text(SCRIPT.format(start="abc"))

    assert main(["--script", str(script)]) == 0

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Submitted with error" in captured.err


def test_incomplete_script_exits_with_error(tmp_path, capsys) -> None:
    script = tmp_path / "keys.txt"
    script.write_text("tab\n")
    assert main(["--script", str(script), "--rich"]) == 1


def test_unknown_key_in_script_reports_error(tmp_path, capsys) -> None:
    script = tmp_path / "keys.txt"
    script.write_text("tab\nwarp\n")

    assert main(["--script", str(script)]) == 1
    assert "Error: line 2: unknown key 'warp'" in capsys.readouterr().err


def test_missing_script_file_reports_error(tmp_path, capsys) -> None:
    assert main(["--script", str(tmp_path / "nope.txt")]) == 1
    assert "Error:" in capsys.readouterr().err


def test_headless_requires_script() -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--headless"])
    assert excinfo.value.code == 2


def test_rich_requires_headless() -> None:
    with pytest.raises(SystemExit):
        main(["--rich"])


def test_tui_mode_uses_config_mouse_setting(tmp_path, capsys) -> None:
    (tmp_path / "dive-log.toml").write_text("[ui]\nmouse = true\n")
    result = RunUiResult(SessionOutcome(OutcomeKind.CANCELLED), exit_code=0)
    with patch("dive_log.cli.run_tui", return_value=result) as mock_run:
        assert main([]) == 0
    mock_run.assert_called_once_with(mouse=True)
    assert capsys.readouterr().out == ""


def test_tui_submission_prints_gas_remaining(capsys) -> None:
    result = RunUiResult(
        SessionOutcome(OutcomeKind.SUBMITTED, gas_remaining=-40), exit_code=0
    )
    with patch("dive_log.cli.run_tui", return_value=result):
        assert main([]) == 0
    assert capsys.readouterr().out == "Gas remaining: -40\n"


def test_configure_logging_writes_to_file(tmp_path) -> None:
    log_file = tmp_path / "dive.log"
    package_logger = configure_logging(logging.INFO, str(log_file), headless=False)
    logging.getLogger("dive_log.navigation").info("Gas remaining: %d", 100)
    for handler in package_logger.handlers:
        handler.flush()
    assert "Gas remaining: 100" in log_file.read_text()


def test_configure_logging_tui_without_file_is_silent() -> None:
    package_logger = configure_logging(logging.DEBUG, None, headless=False)
    assert len(package_logger.handlers) == 1
    assert isinstance(package_logger.handlers[0], logging.NullHandler)
