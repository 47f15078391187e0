"""
Create a pre-verified account for the local credential backend.

Usage:
  ENABLE_ACCOUNT_BOOTSTRAP=true \
  ACCOUNT_NAME="Test Student" \
  ACCOUNT_EMAIL="student@spelman.edu" \
  ACCOUNT_PASSWORD="<password>" \
  python -m pulse.scripts.create_account
"""

import os
import sys
from typing import Optional

from pulse import models  # noqa: F401 - register tables on Base.metadata
from pulse.config import settings
from pulse.crud import account as account_crud
from pulse.database import Base, SessionLocal, engine
from pulse.schemas.auth import PASSWORD_MAX_LENGTH, PASSWORD_MIN_LENGTH
from pulse.utils.security import allowed_domains_message, get_password_hash, is_allowed_signup_email


def _is_truthy(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes", "y", "on"}


def _required_env(key: str) -> str:
    value = os.getenv(key, "").strip()
    if not value:
        raise ValueError(f"Missing required environment variable: {key}")
    return value


def validate_password(password: str) -> None:
    """Same length rule as POST /register."""
    if not PASSWORD_MIN_LENGTH <= len(password) <= PASSWORD_MAX_LENGTH:
        raise ValueError(
            f"ACCOUNT_PASSWORD must be {PASSWORD_MIN_LENGTH}-{PASSWORD_MAX_LENGTH} characters."
        )


def create_account() -> int:
    try:
        if not _is_truthy(os.getenv("ENABLE_ACCOUNT_BOOTSTRAP")):
            raise ValueError(
                "Bootstrap disabled. Set ENABLE_ACCOUNT_BOOTSTRAP=true to run."
            )
        if settings.CREDENTIAL_BACKEND.strip().lower() != "local":
            raise ValueError("Accounts can only be created for CREDENTIAL_BACKEND=local.")

        name = _required_env("ACCOUNT_NAME")
        email = _required_env("ACCOUNT_EMAIL").lower()
        password = _required_env("ACCOUNT_PASSWORD")

        if not is_allowed_signup_email(email, settings.allowed_email_domains):
            raise ValueError(allowed_domains_message(settings.allowed_email_domains))
        validate_password(password)

        Base.metadata.create_all(bind=engine)
        db = SessionLocal()
        try:
            if account_crud.get_account_by_email(db, email):
                raise ValueError("ACCOUNT_EMAIL is already registered.")

            account_crud.create_account(
                db,
                name=name,
                email=email,
                password_hash=get_password_hash(password),
                is_verified=True,
            )
            db.commit()
            print(f"Account created successfully: {email}")
            return 0
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()
    except Exception as exc:
        print(f"Account bootstrap failed: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(create_account())
