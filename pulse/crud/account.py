from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from pulse.models.account import Account, VerificationCode


def get_account_by_email(db: Session, email: str) -> Optional[Account]:
    return db.query(Account).filter(Account.email == email).first()


def create_account(db: Session, name: str, email: str, password_hash: str, is_verified: bool = False) -> Account:
    account = Account(
        name=name,
        email=email,
        password_hash=password_hash,
        is_verified=is_verified,
        verified_at=datetime.utcnow() if is_verified else None,
    )
    db.add(account)
    db.flush()
    return account


def mark_verified(db: Session, account: Account) -> Account:
    account.is_verified = True
    account.verified_at = datetime.utcnow()
    db.flush()
    return account


def invalidate_codes(db: Session, email: str) -> int:
    return db.query(VerificationCode).filter(
        VerificationCode.email == email,
        VerificationCode.consumed.is_(False),
    ).update({"consumed": True}, synchronize_session=False)


def create_code(db: Session, email: str, code: str, expires_at: datetime) -> VerificationCode:
    record = VerificationCode(email=email, code=code, expires_at=expires_at, consumed=False)
    db.add(record)
    db.flush()
    return record


def get_active_code(db: Session, email: str, code: str, now: datetime) -> Optional[VerificationCode]:
    return db.query(VerificationCode).filter(
        VerificationCode.email == email,
        VerificationCode.code == code,
        VerificationCode.consumed.is_(False),
        VerificationCode.expires_at > now,
    ).order_by(VerificationCode.created_at.desc()).first()
