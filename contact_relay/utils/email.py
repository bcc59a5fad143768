import asyncio
from dataclasses import dataclass
from typing import Any

import aiosmtplib

from ..logger import get_logger
from ..schemas.contact import Submission
from ..settings import Settings


logger = get_logger(__name__)

SUBJECT = "【お問い合わせ】{name} 様より"
BODY = (
    "以下の内容でお問い合わせを受け付けました。\r\n"
    "--------------------------------\r\n"
    "名前: {name}\r\n"
    "Email: {email}\r\n"
    "\r\n"
    "本文:\r\n{message}\r\n"
    "--------------------------------\r\n"
)

DEFAULT_SMTP_PORT = 587

LOOPBACK_HOSTS = {"localhost", "127.0.0.1", "::1"}

_background_tasks: set["asyncio.Task[None]"] = set()


@dataclass(frozen=True)
class SMTPConfig:
    host: str
    port: int
    sender: str
    password: str
    connect_timeout: float = 10

    @classmethod
    def from_settings(cls, settings: Settings) -> "SMTPConfig":
        return cls(
            host=settings.smtp_server,
            port=settings.smtp_port or DEFAULT_SMTP_PORT,
            sender=settings.smtp_email,
            password=settings.smtp_password,
            connect_timeout=settings.smtp_connect_timeout,
        )

    @property
    def complete(self) -> bool:
        return bool(self.sender and self.password)

    @property
    def address(self) -> str:
        return f"{self.host}:{self.port}"


def _header_value(value: str) -> str:
    return value.replace("\r", " ").replace("\n", " ")


def compose_message(submission: Submission) -> bytes:
    """Build the notification mail as raw RFC 822 bytes (headers, blank line, plain text body)."""

    headers = (
        f"To: {_header_value(submission.email)}\r\n"
        f"Subject: {_header_value(SUBJECT.format(name=submission.name))}\r\n"
    )
    body = BODY.format(name=submission.name, email=submission.email, message=submission.message)
    return (headers + "\r\n" + body).encode()


async def send_contact_email(submission: Submission, config: SMTPConfig) -> bool:
    """
    Relay a contact form submission to the configured sender address and to the submitter.

    Returns immediately. The SMTP exchange runs in a detached task whose outcome is only logged.
    Without sender address or password nothing is sent and the call still succeeds.
    """

    if not config.complete:
        logger.warning("SMTP configuration not found, skipping email delivery")
        return True

    message = compose_message(submission)
    recipients = [config.sender, submission.email]

    task = asyncio.create_task(_deliver(config, recipients, message))
    _background_tasks.add(task)
    task.add_done_callback(_background_tasks.discard)

    return True


async def _deliver(config: SMTPConfig, recipients: list[str], message: bytes) -> None:
    try:
        await _transmit(config, recipients, message)
    except Exception:
        logger.exception(f"Unexpected error while sending email via {config.address}")


def _fail(stage: str, err: Any, **context: str) -> None:
    extra = "".join(f" {key}={value}" for key, value in context.items())
    logger.error(f"SMTP {stage} error:{extra} {err}")


async def _transmit(config: SMTPConfig, recipients: list[str], message: bytes) -> None:
    # aiosmtplib keeps the connect timeout as its command default, so commands below pass timeout=None
    smtp = aiosmtplib.SMTP(hostname=config.host, port=config.port, timeout=None, start_tls=False)
    try:
        await smtp.connect(timeout=config.connect_timeout)
    except (aiosmtplib.SMTPException, OSError) as err:
        _fail("dial", err, address=config.address)
        return

    try:
        await _session(smtp, config, recipients, message)
    finally:
        smtp.close()


async def _session(smtp: aiosmtplib.SMTP, config: SMTPConfig, recipients: list[str], message: bytes) -> None:
    try:
        await smtp.ehlo(timeout=None)
    except (aiosmtplib.SMTPException, OSError) as err:
        _fail("EHLO", err, address=config.address)
        return

    encrypted = False
    if smtp.supports_extension("starttls"):
        try:
            await smtp.starttls(server_hostname=config.host, validate_certs=True, timeout=None)
            await smtp.ehlo(timeout=None)
        except (aiosmtplib.SMTPException, OSError) as err:
            _fail("STARTTLS", err, address=config.address)
            return
        encrypted = True

    if not encrypted and config.host not in LOOPBACK_HOSTS:
        _fail("auth", "refusing to send credentials over unencrypted connection", address=config.address)
        return
    try:
        await smtp.auth_plain(config.sender, config.password, timeout=None)
    except (aiosmtplib.SMTPException, OSError) as err:
        _fail("auth", err, address=config.address)
        return

    try:
        await smtp.mail(config.sender, timeout=None)
    except (aiosmtplib.SMTPException, OSError) as err:
        _fail("MAIL FROM", err, sender=config.sender)
        return

    for recipient in recipients:
        try:
            await smtp.rcpt(recipient, timeout=None)
        except (aiosmtplib.SMTPException, OSError) as err:
            _fail("RCPT", err, recipient=recipient)
            return

    try:
        await smtp.data(message, timeout=None)
    except (aiosmtplib.SMTPException, OSError) as err:
        _fail("DATA", err, address=config.address)
        return

    try:
        await smtp.quit(timeout=None)
    except (aiosmtplib.SMTPException, OSError) as err:
        _fail("QUIT", err, address=config.address)

    logger.info(f"SMTP send finished (async) to {recipients}")
