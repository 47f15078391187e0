from pydantic import BaseModel, EmailStr, Field
from typing import Optional

PASSWORD_MIN_LENGTH = 6
# Bcrypt limit is 72 bytes
PASSWORD_MAX_LENGTH = 72

# ======================
# AUTHENTICATION SCHEMAS
# ======================

class RegisterRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=PASSWORD_MIN_LENGTH, max_length=PASSWORD_MAX_LENGTH)


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class VerifyRequest(BaseModel):
    email: EmailStr
    verificationCode: str = Field(..., min_length=1, max_length=12)


class ResendRequest(BaseModel):
    email: EmailStr


class MessageResponse(BaseModel):
    success: bool = True
    message: str


class LoginResponse(MessageResponse):
    name: Optional[str] = None
