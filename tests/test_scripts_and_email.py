# tests/test_scripts_and_email.py
"""
Developer Script and Email Tests
Account bootstrap password rule and verification-code delivery
"""

import pytest
from sqlalchemy.orm import sessionmaker

from pulse.config import settings
from pulse.models.account import Account
from pulse.scripts import create_account as create_account_script
from pulse.utils import email as email_utils


# ======================
# TEST 1: ACCOUNT BOOTSTRAP
# ======================

@pytest.mark.parametrize("password", ["abcdef", "x" * 72])
def test_password_rule_matches_registration(password):
    create_account_script.validate_password(password)


@pytest.mark.parametrize("password", ["abcde", "x" * 73])
def test_password_rule_rejects_out_of_range(password):
    with pytest.raises(ValueError, match="6-72 characters"):
        create_account_script.validate_password(password)


def test_create_account_with_short_password(engine, monkeypatch):
    """A six-character password without digits is accepted, as on /register"""

    monkeypatch.setattr(create_account_script, "engine", engine)
    monkeypatch.setattr(create_account_script, "SessionLocal", sessionmaker(bind=engine))
    monkeypatch.setattr(settings, "CREDENTIAL_BACKEND", "local")
    monkeypatch.setenv("ENABLE_ACCOUNT_BOOTSTRAP", "true")
    monkeypatch.setenv("ACCOUNT_NAME", "Jordan")
    monkeypatch.setenv("ACCOUNT_EMAIL", "Student@Spelman.edu")
    monkeypatch.setenv("ACCOUNT_PASSWORD", "secret")

    assert create_account_script.create_account() == 0

    session = sessionmaker(bind=engine)()
    account = session.query(Account).filter_by(email="student@spelman.edu").one()
    assert account.is_verified is True
    session.close()


def test_create_account_requires_flag(monkeypatch):
    monkeypatch.delenv("ENABLE_ACCOUNT_BOOTSTRAP", raising=False)
    assert create_account_script.create_account() == 1


# ======================
# TEST 2: VERIFICATION EMAIL
# ======================

class FakeSMTP:
    instances = []

    def __init__(self, host, port, timeout=None):
        self.host = host
        self.port = port
        self.timeout = timeout
        self.started_tls = False
        self.logged_in = None
        self.sent = []
        FakeSMTP.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def starttls(self):
        self.started_tls = True

    def login(self, username, password):
        self.logged_in = (username, password)

    def send_message(self, msg):
        self.sent.append(msg)


@pytest.fixture
def smtp_settings(monkeypatch):
    FakeSMTP.instances = []
    monkeypatch.setattr(email_utils.smtplib, "SMTP", FakeSMTP)
    monkeypatch.setattr(settings, "EMAIL_NOTIFICATIONS_ENABLED", True)
    monkeypatch.setattr(settings, "SMTP_SERVER", "smtp.test")
    monkeypatch.setattr(settings, "SMTP_PORT", 587)
    monkeypatch.setattr(settings, "EMAIL_FROM", "pulse@spelman.edu")
    monkeypatch.setattr(settings, "EMAIL_PASSWORD", "app-password")
    monkeypatch.setattr(settings, "SMTP_USERNAME", None)
    monkeypatch.setattr(settings, "SMTP_USE_TLS", True)


def test_send_verification_code(smtp_settings):
    assert email_utils.send_verification_code(to_email="student@spelman.edu", name="Jordan", code="123456")

    smtp = FakeSMTP.instances[0]
    assert (smtp.host, smtp.port) == ("smtp.test", 587)
    assert smtp.started_tls is True
    assert smtp.logged_in == ("pulse@spelman.edu", "app-password")
    message = smtp.sent[0]
    assert message["To"] == "student@spelman.edu"
    assert message["Subject"] == "Your PULSE verification code"
    assert "123456" in message.get_content()


def test_send_email_disabled(monkeypatch):
    monkeypatch.setattr(settings, "EMAIL_NOTIFICATIONS_ENABLED", False)

    assert email_utils.send_verification_code(to_email="student@spelman.edu", name="Jordan", code="123456") is False


def test_send_email_failure_returns_false(smtp_settings, monkeypatch):
    def refuse(*args, **kwargs):
        raise ConnectionRefusedError("no SMTP server")

    monkeypatch.setattr(email_utils.smtplib, "SMTP", refuse)

    assert email_utils.send_email(to_email="student@spelman.edu", subject="Hi", body_text="Body") is False
