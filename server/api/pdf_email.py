# server/api/pdf_email.py

import base64
import binascii
import html
import logging
from typing import Any
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from server.core.mailer import Attachment, SmtpMailer, get_mailer
from server.core.validation import validate


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["email"])

EMAIL_SUBJECT = "Your Leadership Values Results"


class UserInfo(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1)
    email: str = Field(min_length=1)


class CoreValue(BaseModel):
    value: str
    description: str = ""


class PdfEmailRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    pdf_base64: str = Field(min_length=1)
    user_info: UserInfo
    core_values: list[CoreValue]


def extract_first_name(full_name: str) -> str:
    parts = full_name.strip().split()
    return parts[0] if parts else full_name.strip()


def decode_pdf(pdf_base64: str) -> bytes:
    """
    Accepts either a data URL ("data:application/pdf;base64,....") or bare base64.
    """
    encoded = pdf_base64.split(",", 1)[1] if "," in pdf_base64 else pdf_base64
    return base64.b64decode(encoded, validate=True)


def render_values_email(first_name: str, core_values: list[CoreValue]) -> str:
    values_list = "".join(
        f"<li>{i}. <strong>{html.escape(v.value)}</strong>: {html.escape(v.description)}</li>"
        for i, v in enumerate(core_values, start=1)
    )
    return f"""
    <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
      <h1 style="color: #3b82f6;">Your Leadership Values</h1>
      <p>Hello {html.escape(first_name)},</p>
      <p>Thank you for completing the Leadership Values Assessment. Your PDF is attached to this email.</p>
      <h2 style="color: #3b82f6;">Your Core Leadership Values:</h2>
      <ul>
        {values_list}
      </ul>
      <p>Use these values to guide your leadership journey and decision-making.</p>
      <p>Best regards,<br>The Leadership Values Team</p>
    </div>
    """


def _bad_request():
    return JSONResponse(status_code=400, content={"error": "Missing required data"})


@router.post("/send-pdf-email")
def send_pdf_email(payload: Any = Body(None), mailer: SmtpMailer = Depends(get_mailer)):
    result = validate(PdfEmailRequest, payload)
    if not result.ok:
        return _bad_request()
    req = result.value

    try:
        pdf = decode_pdf(req.pdf_base64)
    except (binascii.Error, ValueError):
        return _bad_request()

    first_name = extract_first_name(req.user_info.name)
    sent = mailer.send(
        to=req.user_info.email,
        subject=EMAIL_SUBJECT,
        html=render_values_email(first_name, req.core_values),
        attachments=[Attachment(filename=f"{first_name}_Leadership_Values.pdf", content=pdf)],
    )
    if not sent.success:
        logger.error("PDF email to %s failed: %s", req.user_info.email, sent.error)
        return JSONResponse(status_code=500, content={"error": "Failed to send email"})
    return {"success": True}
