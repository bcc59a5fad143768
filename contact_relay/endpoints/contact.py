"""Endpoints for the contact form"""

from html import escape
from typing import Any

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse

from ..exceptions.contact import CouldNotSendMessageError
from ..logger import get_logger
from ..schemas.contact import Submission
from ..utils.email import SMTPConfig, send_contact_email


logger = get_logger(__name__)

router = APIRouter(tags=["contact"])

SUCCESS_FRAGMENT = """
<div class="bg-green-100 border border-green-400 text-green-700 px-4 py-10 rounded relative text-center">
    <strong class="font-bold text-xl block mb-2">送信完了！</strong>
    <span class="block sm:inline">{name} 様、お問い合わせありがとうございます。</span>
    <br>
    <span class="text-sm mt-4 block">確認メールを {email} 宛に送信しました。</span>

    <button onclick="location.reload()" class="mt-6 bg-green-600 hover:bg-green-700 text-white font-bold py-2 px-4 rounded transition duration-200">
        戻る
    </button>
</div>
"""  # noqa: E501


@router.post("/contact", response_class=HTMLResponse)
async def submit_contact(
    request: Request,
    name: str = Form("", description="Name of the sender"),
    email: str = Form("", description="Email of the sender"),
    message: str = Form("", description="Content of the message"),
) -> Any:
    """
    Relay a contact form submission via email and return an HTML fragment for in-place replacement.

    The email is sent in the background, so the response does not reflect the delivery outcome.
    """

    data = Submission(name=name, email=email, message=message)
    remote = request.client.host if request.client else "unknown"
    logger.info(f"Contact POST received: name={data.name} email={data.email} from {remote}")

    config: SMTPConfig = request.app.state.smtp_config
    if not await send_contact_email(data, config):
        logger.error(f"Could not relay contact message from {data.email}")
        raise CouldNotSendMessageError

    logger.info(f"Contact message accepted: {data.name} <{data.email}>")
    return HTMLResponse(SUCCESS_FRAGMENT.format(name=escape(data.name), email=escape(data.email)))
