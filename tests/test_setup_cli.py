"""Tests for the interactive setup script."""

import pytest

from twilogram import setup_cli


VALUES = {
    "TWILIO_ACCOUNT_SID": "AC123",
    "TWILIO_AUTH_TOKEN": "secret",
    "DEEPGRAM_API_KEY": "dg",
    "PORT": "8080",
}


@pytest.fixture(autouse=True)
def prerequisites_present(monkeypatch):
    monkeypatch.setattr(setup_cli, "check_prerequisites", lambda: True)


def test_validate_reports_every_missing_key():
    values = dict(VALUES, TWILIO_AUTH_TOKEN="", DEEPGRAM_API_KEY="  ")

    with pytest.raises(ValueError, match="Missing required values for: TWILIO_AUTH_TOKEN, DEEPGRAM_API_KEY"):
        setup_cli.validate_env_values(values)


def test_validate_accepts_complete_values():
    setup_cli.validate_env_values(VALUES)


def test_render_env_file():
    assert setup_cli.render_env_file(VALUES) == (
        "TWILIO_ACCOUNT_SID=AC123\nTWILIO_AUTH_TOKEN=secret\nDEEPGRAM_API_KEY=dg\nPORT=8080\n"
    )


def test_setup_writes_env_file(tmp_path, monkeypatch):
    monkeypatch.setattr(setup_cli, "prompt_for_values", lambda: dict(VALUES))
    env_path = tmp_path / ".env"

    assert setup_cli.setup(env_path) == 0
    assert env_path.read_text(encoding="utf-8") == setup_cli.render_env_file(VALUES)


def test_setup_skips_existing_env_file(tmp_path, monkeypatch):
    def fail():
        raise AssertionError("should not prompt")

    monkeypatch.setattr(setup_cli, "prompt_for_values", fail)
    env_path = tmp_path / ".env"
    env_path.write_text("PORT=1\n", encoding="utf-8")

    assert setup_cli.setup(env_path) == 0
    assert env_path.read_text(encoding="utf-8") == "PORT=1\n"


def test_setup_aborts_on_missing_values(tmp_path, monkeypatch):
    monkeypatch.setattr(setup_cli, "prompt_for_values", lambda: dict(VALUES, DEEPGRAM_API_KEY=""))
    env_path = tmp_path / ".env"

    assert setup_cli.setup(env_path) == 1
    assert not env_path.exists()


def test_main_exits_with_setup_status(tmp_path, monkeypatch):
    monkeypatch.setattr(setup_cli, "prompt_for_values", lambda: dict(VALUES))

    with pytest.raises(SystemExit) as excinfo:
        setup_cli.main(["--env-file", str(tmp_path / ".env")])

    assert excinfo.value.code == 0
