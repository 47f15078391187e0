__all__ = [
    "verify_password",
    "get_password_hash",
    "generate_verification_code",
    "is_allowed_signup_email",
    "allowed_domains_message",
    "is_email_enabled",
    "send_email",
    "send_verification_code",
]


def __getattr__(name):
    if name in {
        "verify_password",
        "get_password_hash",
        "generate_verification_code",
        "is_allowed_signup_email",
        "allowed_domains_message",
    }:
        from . import security as _security
        return getattr(_security, name)
    if name in {"is_email_enabled", "send_email", "send_verification_code"}:
        from . import email as _email
        return getattr(_email, name)
    raise AttributeError(f"module 'pulse.utils' has no attribute '{name}'")
