import pytest
from _pytest.monkeypatch import MonkeyPatch

from contact_relay.settings import Settings


ENV = ["PORT", "SMTP_SERVER", "SMTP_PORT", "SMTP_EMAIL", "SMTP_PASSWORD"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: MonkeyPatch) -> None:
    for name in ENV:
        monkeypatch.delenv(name, raising=False)


def test__settings__from_env(monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("SMTP_SERVER", "smtp.example.com")
    monkeypatch.setenv("SMTP_PORT", "2525")
    monkeypatch.setenv("SMTP_EMAIL", "me@example.com")
    monkeypatch.setenv("SMTP_PASSWORD", "secret")

    config = Settings(_env_file=None)  # type: ignore

    assert config.port == 9000
    assert config.smtp_server == "smtp.example.com"
    assert config.smtp_port == 2525
    assert config.smtp_email == "me@example.com"
    assert config.smtp_password == "secret"


def test__settings__defaults() -> None:
    config = Settings(_env_file=None)  # type: ignore

    assert config.port == 8080
    assert config.smtp_server == ""
    assert config.smtp_port is None
    assert config.smtp_email == ""
    assert config.smtp_password == ""


def test__settings__empty_env(monkeypatch: MonkeyPatch) -> None:
    for name in ENV:
        monkeypatch.setenv(name, "")

    config = Settings(_env_file=None)  # type: ignore

    assert config.port == 8080
    assert config.smtp_server == ""
    assert config.smtp_port is None
    assert config.smtp_email == ""
    assert config.smtp_password == ""
