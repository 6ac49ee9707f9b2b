"""Outgoing mail over SMTP (password reset links, enquiry forwarding)."""
import logging
import smtplib
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart

from app.core import config

logger = logging.getLogger(__name__)


class MailError(Exception):
    pass


def send_mail(to: str, subject: str, body: str, html: bool = False, reply_to: str | None = None) -> None:
    if not config.SMTP_USER or not config.SMTP_PASSWORD:
        raise MailError("SMTP credentials are not configured")

    msg = MIMEMultipart()
    msg["From"] = config.SMTP_USER
    msg["To"] = to
    msg["Subject"] = subject
    if reply_to:
        msg["Reply-To"] = reply_to
    msg.attach(MIMEText(body, "html" if html else "plain"))

    try:
        with smtplib.SMTP(config.SMTP_HOST, config.SMTP_PORT) as server:
            server.starttls()
            server.login(config.SMTP_USER, config.SMTP_PASSWORD)
            server.send_message(msg)
    except (smtplib.SMTPException, OSError) as e:
        raise MailError(str(e)) from e
    logger.info("Mail sent to %s: %s", to, subject)
