from sqlalchemy import Column, Integer, String, Boolean, TIMESTAMP, func
from pulse.database import Base


# ---------------- ACCOUNT (LOCAL CREDENTIAL BACKEND) ----------------
class Account(Base):
    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    is_verified = Column(Boolean, default=False, nullable=False)
    created_at = Column(TIMESTAMP, server_default=func.now())
    verified_at = Column(TIMESTAMP)


# ---------------- ONE-TIME VERIFICATION CODES ----------------
class VerificationCode(Base):
    __tablename__ = "verification_codes"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), index=True, nullable=False)
    code = Column(String(6), nullable=False)
    expires_at = Column(TIMESTAMP, nullable=False)
    consumed = Column(Boolean, default=False, nullable=False)
    created_at = Column(TIMESTAMP, server_default=func.now())
