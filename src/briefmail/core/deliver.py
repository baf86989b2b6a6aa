"""SMTP delivery of the rendered briefing"""

import smtplib
from datetime import date
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formataddr, formatdate

from briefmail.config import Settings
from briefmail.core.utils.dates import short_date
from briefmail.core.utils.log import get_logger


logger = get_logger(__name__)


class DeliveryError(RuntimeError):
    """The briefing could not be delivered."""


def build_subject(today: date, settings: Settings) -> str:
    return f"{settings.newsletter_name} — {short_date(today)}"


def build_message(
    subject: str,
    markdown: str,
    html: str,
    recipients: list[str],
    settings: Settings,
    ) -> MIMEMultipart:
    """Build a multipart/alternative message: markdown as text/plain, rendered HTML as text/html."""
    msg = MIMEMultipart("alternative")
    msg["Subject"] = subject
    msg["From"] = formataddr((settings.from_name, settings.from_email))
    msg["To"] = ", ".join(recipients)
    msg["Date"] = formatdate(localtime=True)

    msg.attach(MIMEText(markdown, "plain", "utf-8"))
    msg.attach(MIMEText(html, "html", "utf-8"))
    return msg


def _check(settings: Settings, recipients: list[str]) -> None:
    missing = [
        name for name, value in (
            ("smtp_host", settings.smtp_host),
            ("from_email", settings.from_email),
            ("to_emails", recipients),
        ) if not value
    ]
    if missing:
        raise DeliveryError(f"SMTP not configured; missing: {', '.join(missing)}")


def _connect(settings: Settings) -> smtplib.SMTP:
    """Open an SMTP connection: implicit TLS on port 465, STARTTLS otherwise."""
    if settings.smtp_port == 465:
        return smtplib.SMTP_SSL(settings.smtp_host, settings.smtp_port, timeout=settings.smtp_timeout)
    server = smtplib.SMTP(settings.smtp_host, settings.smtp_port, timeout=settings.smtp_timeout)
    try:
        server.starttls()
    except (smtplib.SMTPException, OSError):
        server.close()
        raise
    return server


def send_email(msg: MIMEMultipart, recipients: list[str], settings: Settings) -> None:
    """Verify the SMTP connection, log in when credentials are set, and send msg.

    Raises DeliveryError on missing configuration or any SMTP/network failure.
    """
    _check(settings, recipients)
    try:
        with _connect(settings) as server:
            server.noop()
            logger.info("SMTP connection verified: %s:%s", settings.smtp_host, settings.smtp_port)
            if settings.smtp_user and settings.smtp_password:
                server.login(settings.smtp_user, settings.smtp_password)
            server.send_message(msg, from_addr=settings.from_email, to_addrs=recipients)
    except (smtplib.SMTPException, OSError) as e:
        logger.error("SMTP delivery failed: %s", e)
        raise DeliveryError(f"SMTP delivery failed: {e}") from e

    logger.info("Email sent to: %s", ", ".join(recipients))
