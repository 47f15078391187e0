"""
Credential gateway.

Account creation, login and one-time-code verification live behind the
CredentialGateway protocol. The hosted gateway forwards to a GoTrue-style auth
REST API; the local gateway keeps accounts in the application database and is
meant for development and tests.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Optional, Protocol

import requests
from fastapi import Depends
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session

from pulse.config import settings
from pulse.crud import account as account_crud
from pulse.database import get_db
from pulse.exceptions import (
    AccountNotFoundError,
    AlreadyVerifiedError,
    AuthenticationError,
    TransientError,
    UpstreamError,
    ValidationError,
    VerificationError,
)
from pulse.utils.email import is_email_enabled, send_verification_code
from pulse.utils.security import generate_verification_code, get_password_hash, verify_password

logger = logging.getLogger(__name__)

DEFAULT_DISPLAY_NAME = "User"


class CredentialGateway(Protocol):
    def register(self, name: str, email: str, password: str) -> None:
        ...

    def verify(self, email: str, code: str) -> None:
        ...

    def login(self, email: str, password: str) -> str:
        """Return the account's display name."""
        ...

    def resend_code(self, email: str) -> None:
        ...


# ======================
# LOCAL GATEWAY
# ======================

class LocalCredentialGateway:
    """Accounts and verification codes stored in the application database."""

    def __init__(self, db: Session):
        self.db = db

    def _issue_code(self, email: str, name: str) -> None:
        account_crud.invalidate_codes(self.db, email)
        code = generate_verification_code()
        expires_at = datetime.utcnow() + timedelta(minutes=settings.VERIFICATION_CODE_TTL_MINUTES)
        account_crud.create_code(self.db, email, code, expires_at)
        self.db.commit()

        delivered = send_verification_code(to_email=email, name=name, code=code)
        if not delivered:
            if is_email_enabled():
                logger.warning("Verification email for %s was not delivered", email)
            elif settings.APP_ENV == "development":
                logger.debug("Email disabled; verification code for %s is %s", email, code)

    def _store_failure(self, action: str, exc: SQLAlchemyError) -> UpstreamError:
        self.db.rollback()
        logger.exception("Account store failure while %s", action)
        if isinstance(exc, OperationalError):
            return TransientError()
        return UpstreamError(f"Error {action}")

    def register(self, name: str, email: str, password: str) -> None:
        try:
            if account_crud.get_account_by_email(self.db, email):
                raise ValidationError("An account with this email already exists")
            account_crud.create_account(
                self.db,
                name=name,
                email=email,
                password_hash=get_password_hash(password),
            )
            self._issue_code(email, name)
        except IntegrityError as exc:
            self.db.rollback()
            raise ValidationError("An account with this email already exists") from exc
        except SQLAlchemyError as exc:
            raise self._store_failure("registering user", exc) from exc

    def verify(self, email: str, code: str) -> None:
        try:
            account = account_crud.get_account_by_email(self.db, email)
            if account is None:
                raise VerificationError()
            record = account_crud.get_active_code(self.db, email, code.strip(), datetime.utcnow())
            if record is None:
                raise VerificationError()
            record.consumed = True
            account_crud.mark_verified(self.db, account)
            self.db.commit()
        except SQLAlchemyError as exc:
            raise self._store_failure("verifying email", exc) from exc

    def login(self, email: str, password: str) -> str:
        try:
            account = account_crud.get_account_by_email(self.db, email)
        except SQLAlchemyError as exc:
            raise self._store_failure("logging in", exc) from exc

        if account is None or not verify_password(password, account.password_hash):
            raise AuthenticationError()
        if not account.is_verified:
            raise AuthenticationError()
        return account.name or DEFAULT_DISPLAY_NAME

    def resend_code(self, email: str) -> None:
        try:
            account = account_crud.get_account_by_email(self.db, email)
            if account is None:
                raise AccountNotFoundError()
            if account.is_verified:
                raise AlreadyVerifiedError()
            self._issue_code(email, account.name)
        except SQLAlchemyError as exc:
            raise self._store_failure("sending verification code", exc) from exc


# ======================
# HOSTED GATEWAY
# ======================

class HostedCredentialGateway:
    """
    Client for a hosted auth REST API (GoTrue-compatible endpoints).

    Every call carries AUTH_TIMEOUT_SECONDS. Timeouts and connection failures
    become TransientError, 5xx responses UpstreamError, and 4xx responses the
    operation's own domain error.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        base_url = base_url or settings.AUTH_API_URL
        if not base_url:
            raise UpstreamError("Authentication service is not configured")
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key if api_key is not None else settings.AUTH_API_KEY
        self._timeout = timeout or settings.AUTH_TIMEOUT_SECONDS
        self._session = session or requests.Session()

    def _headers(self) -> dict:
        headers = {"Content-Type": "application/json"}
        if self._api_key:
            headers["apikey"] = self._api_key
            headers["Authorization"] = f"Bearer {self._api_key}"
        return headers

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return ""
        if not isinstance(body, dict):
            return ""
        return str(body.get("msg") or body.get("error_description") or body.get("message") or "")

    def _post(self, path: str, payload: dict, params: Optional[dict] = None) -> requests.Response:
        url = f"{self._base_url}{path}"
        try:
            response = self._session.post(
                url,
                json=payload,
                params=params,
                headers=self._headers(),
                timeout=self._timeout,
            )
        except (requests.Timeout, requests.ConnectionError) as exc:
            logger.warning("Auth service unreachable at %s: %s", path, exc)
            raise TransientError() from exc
        except requests.RequestException as exc:
            logger.exception("Auth service request to %s failed", path)
            raise UpstreamError("Authentication service error") from exc

        if response.status_code >= 500:
            logger.error(
                "Auth service %s returned %s: %s",
                path, response.status_code, self._error_message(response),
            )
            raise UpstreamError("Authentication service error")
        return response

    def register(self, name: str, email: str, password: str) -> None:
        response = self._post(
            "/signup",
            {"email": email, "password": password, "data": {"name": name}},
        )
        if response.status_code >= 400:
            message = self._error_message(response) or "Error registering user"
            logger.warning("Registration rejected for %s: %s", email, message)
            raise ValidationError(message)

    def verify(self, email: str, code: str) -> None:
        response = self._post(
            "/verify",
            {"type": "signup", "email": email, "token": code.strip()},
        )
        if response.status_code >= 400:
            logger.warning("Verification failed for %s: %s", email, self._error_message(response))
            raise VerificationError()

    def login(self, email: str, password: str) -> str:
        response = self._post(
            "/token",
            {"email": email, "password": password},
            params={"grant_type": "password"},
        )
        if response.status_code >= 400:
            logger.warning("Login failed for %s: %s", email, self._error_message(response))
            raise AuthenticationError()

        try:
            user = response.json().get("user") or {}
        except (ValueError, AttributeError):
            user = {}
        metadata = user.get("user_metadata") or {}
        return metadata.get("name") or DEFAULT_DISPLAY_NAME

    def resend_code(self, email: str) -> None:
        response = self._post("/resend", {"type": "signup", "email": email})
        if response.status_code == 404:
            raise AccountNotFoundError()
        if response.status_code >= 400:
            message = self._error_message(response) or "Error sending verification code"
            if "confirm" in message.lower() or "verified" in message.lower():
                raise AlreadyVerifiedError()
            raise ValidationError(message)


def get_credential_gateway(db: Session = Depends(get_db)) -> CredentialGateway:
    """FastAPI dependency returning the configured credential gateway."""
    backend = (settings.CREDENTIAL_BACKEND or "local").strip().lower()
    if backend == "hosted":
        return HostedCredentialGateway()
    if backend != "local":
        raise UpstreamError(f"Unknown credential backend: {backend}")
    return LocalCredentialGateway(db)
