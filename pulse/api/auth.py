import logging

from fastapi import APIRouter, Depends

from pulse.config import settings
from pulse.exceptions import ValidationError
from pulse.schemas.auth import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
    ResendRequest,
    VerifyRequest,
)
from pulse.services.credential_gateway import CredentialGateway, get_credential_gateway
from pulse.utils.security import allowed_domains_message, is_allowed_signup_email

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Authentication"])


# ===== REGISTER ENDPOINT =====

@router.post("/register", response_model=MessageResponse)
def register(
    user_data: RegisterRequest,
    gateway: CredentialGateway = Depends(get_credential_gateway),
):
    """Create an account and send a verification code to the email"""
    email = user_data.email.strip().lower()
    logger.info("Received registration request for email: %s", email)

    if not is_allowed_signup_email(email, settings.allowed_email_domains):
        raise ValidationError(allowed_domains_message(settings.allowed_email_domains))

    gateway.register(user_data.name.strip(), email, user_data.password)
    return {
        "success": True,
        "message": "Registration successful. Check your email for verification.",
    }


# ===== LOGIN ENDPOINT =====

@router.post("/login", response_model=LoginResponse)
def login(
    credentials: LoginRequest,
    gateway: CredentialGateway = Depends(get_credential_gateway),
):
    """Verify credentials and return the display name"""
    email = credentials.email.strip().lower()
    logger.info("Received login request for email: %s", email)

    name = gateway.login(email, credentials.password)
    return {"success": True, "message": "Login successful", "name": name}


# ===== VERIFICATION ENDPOINTS =====

@router.post("/verify", response_model=MessageResponse)
def verify(
    payload: VerifyRequest,
    gateway: CredentialGateway = Depends(get_credential_gateway),
):
    """Confirm email ownership with the one-time code"""
    email = payload.email.strip().lower()
    logger.info("Verifying email: %s", email)

    gateway.verify(email, payload.verificationCode)
    return {"success": True, "message": "Email verified successfully"}


@router.post("/resend-verification", response_model=MessageResponse)
def resend_verification(
    payload: ResendRequest,
    gateway: CredentialGateway = Depends(get_credential_gateway),
):
    email = payload.email.strip().lower()
    logger.info("Resending verification code for email: %s", email)

    gateway.resend_code(email)
    return {
        "success": True,
        "message": "Verification code sent successfully. Please check your email.",
    }
