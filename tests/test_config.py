import pytest
from pydantic import ValidationError

from toyrobot.core.config import ShellSettings, get_settings, reset_settings


def test_defaults(monkeypatch):
    for key in ["SHELL_PROMPT", "SHELL_SHOW_BOARD", "SHELL_LOG_LIMIT", "LOG_LEVEL"]:
        monkeypatch.delenv(key, raising=False)

    settings = get_settings()
    assert settings.shell.prompt == "robot> "
    assert settings.shell.show_board is True
    assert settings.shell.log_limit == 100
    assert settings.logging.level == "WARNING"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SHELL_SHOW_BOARD", "false")
    monkeypatch.setenv("SHELL_LOG_LIMIT", "5")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = get_settings()
    assert settings.shell.show_board is False
    assert settings.shell.log_limit == 5
    assert settings.logging.level == "DEBUG"


def test_singleton():
    assert get_settings() is get_settings()
    first = get_settings()
    reset_settings()
    assert get_settings() is not first


def test_log_limit_must_be_positive(monkeypatch):
    monkeypatch.setenv("SHELL_LOG_LIMIT", "0")
    with pytest.raises(ValidationError):
        ShellSettings()


def test_login_shell_variable_is_not_a_section(monkeypatch):
    monkeypatch.setenv("SHELL", "/bin/bash")
    monkeypatch.setenv("LOGGING", "verbose")
    monkeypatch.delenv("SHELL_PROMPT", raising=False)

    settings = get_settings()
    assert settings.shell.prompt == "robot> "
    assert settings.logging.level in {"DEBUG", "INFO", "WARNING", "ERROR"}


def test_sections_read_dotenv_file(tmp_path, monkeypatch):
    for key in ["SHELL_SHOW_BOARD", "SHELL_LOG_LIMIT", "LOG_LEVEL"]:
        monkeypatch.delenv(key, raising=False)
    (tmp_path / ".env").write_text(
        "SHELL_SHOW_BOARD=false\nSHELL_LOG_LIMIT=7\nLOG_LEVEL=DEBUG\nUNRELATED_KEY=1\n",
        encoding="utf-8",
    )
    monkeypatch.chdir(tmp_path)

    settings = get_settings()
    assert settings.shell.show_board is False
    assert settings.shell.log_limit == 7
    assert settings.logging.level == "DEBUG"


def test_environment_beats_dotenv_file(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("SHELL_LOG_LIMIT=7\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SHELL_LOG_LIMIT", "3")

    assert get_settings().shell.log_limit == 3
