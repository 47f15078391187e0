import re
import secrets
from typing import Iterable

from passlib.context import CryptContext


# ==========================
# AUTH CONFIG
# ==========================

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto"
)

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
VERIFICATION_CODE_LENGTH = 6


# ==========================
# PASSWORD UTILS
# ==========================

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """
    Bcrypt max input length = 72 bytes
    Truncate safely to avoid crash
    """
    password_bytes = password.encode("utf-8")

    if len(password_bytes) > 72:
        password_bytes = password_bytes[:72]
        password = password_bytes.decode("utf-8", errors="ignore")

    return pwd_context.hash(password)


# ==========================
# ONE-TIME CODES
# ==========================

def generate_verification_code(length: int = VERIFICATION_CODE_LENGTH) -> str:
    """Numeric one-time code, zero padded."""
    return str(secrets.randbelow(10 ** length)).zfill(length)


# ==========================
# EMAIL ALLOW-LIST
# ==========================

def is_allowed_signup_email(email: str, allowed_domains: Iterable[str]) -> bool:
    normalized = (email or "").strip().lower()
    if not EMAIL_RE.match(normalized):
        return False
    domain = normalized.split("@", 1)[1]
    return domain in {d.lower() for d in allowed_domains}


def allowed_domains_message(allowed_domains: Iterable[str]) -> str:
    domains = [f"@{d}" for d in allowed_domains]
    if len(domains) == 1:
        return f"Email must end with {domains[0]}."
    return "Email must end with " + ", ".join(domains[:-1]) + f" or {domains[-1]}."
