"""Outbound email for sign-up verification codes (local credential backend)."""

import logging
import smtplib
from email.message import EmailMessage

from pulse.config import settings

logger = logging.getLogger(__name__)


def is_email_enabled() -> bool:
    """Return True when outbound email is configured and enabled."""
    return bool(
        settings.EMAIL_NOTIFICATIONS_ENABLED
        and settings.SMTP_SERVER
        and settings.EMAIL_FROM
    )


def send_email(*, to_email: str, subject: str, body_text: str) -> bool:
    """
    Send a plain-text email over SMTP with STARTTLS.

    Returns True on success. Failures are logged and False is returned.
    """
    if not is_email_enabled():
        return False

    msg = EmailMessage()
    msg["From"] = settings.EMAIL_FROM
    msg["To"] = to_email
    msg["Subject"] = subject
    msg.set_content(body_text)

    try:
        with smtplib.SMTP(
            settings.SMTP_SERVER,
            settings.SMTP_PORT,
            timeout=settings.SMTP_TIMEOUT_SECONDS,
        ) as server:
            if settings.SMTP_USE_TLS:
                server.starttls()
            if settings.EMAIL_PASSWORD:
                server.login(settings.SMTP_USERNAME or settings.EMAIL_FROM, settings.EMAIL_PASSWORD)
            server.send_message(msg)
        return True
    except (smtplib.SMTPException, OSError) as exc:
        logger.warning("Email send failed for '%s': %s", to_email, exc)
        return False


def send_verification_code(*, to_email: str, name: str, code: str) -> bool:
    """Email a sign-up verification code. Returns False when not delivered."""
    body_text = (
        f"Hi {name or 'there'},\n\n"
        f"Your PULSE verification code is {code}. "
        f"It expires in {settings.VERIFICATION_CODE_TTL_MINUTES} minutes.\n\n"
        "If you did not create an account, you can ignore this email."
    )
    return send_email(
        to_email=to_email,
        subject="Your PULSE verification code",
        body_text=body_text,
    )
