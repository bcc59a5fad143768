import asyncio
from pathlib import Path
from typing import AsyncIterator, Awaitable, Callable
from unittest.mock import MagicMock

import pytest
from _pytest.monkeypatch import MonkeyPatch
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from pytest_mock import MockerFixture

from contact_relay.main import create_app
from contact_relay.settings import settings
from contact_relay.utils import email
from contact_relay.utils.email import SMTPConfig


ROOT = Path(__file__).parent.parent


@pytest.fixture(autouse=True)
def site_dirs(monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "static_dir", str(ROOT / "static"))
    monkeypatch.setattr(settings, "templates_dir", str(ROOT / "templates"))


@pytest.fixture
def smtp_config() -> SMTPConfig:
    return SMTPConfig(host="", port=587, sender="", password="")


@pytest.fixture
def app(smtp_config: SMTPConfig) -> FastAPI:
    app = create_app()
    app.state.smtp_config = smtp_config
    return app


@pytest.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
def background_tasks() -> Callable[[], Awaitable[None]]:
    async def wait() -> None:
        await asyncio.gather(*list(email._background_tasks))

    return wait


@pytest.fixture
def make_smtp_client(mocker: MockerFixture) -> Callable[[], MagicMock]:
    def make() -> MagicMock:
        smtp = mocker.MagicMock()
        for method in ["connect", "ehlo", "starttls", "auth_plain", "mail", "rcpt", "data", "quit"]:
            setattr(smtp, method, mocker.AsyncMock())
        smtp.supports_extension.return_value = True
        return smtp

    return make


@pytest.fixture
def smtp_client(mocker: MockerFixture, make_smtp_client: Callable[[], MagicMock]) -> MagicMock:
    smtp = make_smtp_client()
    mocker.patch("contact_relay.utils.email.aiosmtplib.SMTP", return_value=smtp)
    return smtp
