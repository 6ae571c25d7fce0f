# server/core/mailer.py

import logging
import smtplib
from dataclasses import dataclass
from email.message import EmailMessage
from fastapi import Request

from server.config import Settings


logger = logging.getLogger(__name__)


@dataclass
class Attachment:
    filename: str
    content: bytes
    maintype: str = "application"
    subtype: str = "pdf"


@dataclass
class SendResult:
    success: bool
    error: str = ""


class SmtpMailer:
    """
    Delivers HTML email through an SMTP relay. Never raises; failures come back as SendResult.
    """

    def __init__(self, settings: Settings):
        self.host = settings.smtp_host
        self.port = settings.smtp_port
        self.user = settings.smtp_user
        self.password = settings.smtp_password
        self.sender = settings.smtp_from
        self.use_tls = settings.smtp_use_tls
        self.timeout = settings.smtp_timeout

    @property
    def configured(self) -> bool:
        return bool(self.host and self.sender)

    def send(self, to: str, subject: str, html: str, attachments: list[Attachment] | None = None) -> SendResult:
        if not self.configured:
            logger.warning("Email to %s not sent: SMTP not configured", to)
            return SendResult(success=False, error="SMTP not configured")

        msg = EmailMessage()
        msg["Subject"] = subject
        msg["From"] = self.sender
        msg["To"] = to
        msg.set_content("This message requires an HTML capable email client.")
        msg.add_alternative(html, subtype="html")
        for att in attachments or []:
            msg.add_attachment(att.content, maintype=att.maintype, subtype=att.subtype, filename=att.filename)

        try:
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as smtp:
                if self.use_tls:
                    smtp.starttls()
                if self.user:
                    smtp.login(self.user, self.password)
                smtp.send_message(msg)
        except (smtplib.SMTPException, OSError) as e:
            logger.exception("Email delivery to %s failed", to)
            return SendResult(success=False, error=str(e)[:400])

        logger.info("Email '%s' sent to %s", subject, to)
        return SendResult(success=True)


def get_mailer(request: Request) -> SmtpMailer:
    return SmtpMailer(request.app.state.settings)
