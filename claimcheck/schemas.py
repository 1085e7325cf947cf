# claimcheck/schemas.py

from pydantic import BaseModel, EmailStr, Field, TypeAdapter, ValidationError


class SignupRequest(BaseModel):
    username: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=1)


class LoginRequest(BaseModel):
    username: str = Field(min_length=1)  # username or email
    password: str = Field(min_length=1)


class ForgotUsernameRequest(BaseModel):
    email: EmailStr


class ForgotPasswordRequest(BaseModel):
    username: str = Field(min_length=1)
    email: EmailStr


class ResetPasswordRequest(BaseModel):
    token: str = Field(min_length=1)
    password: str = Field(min_length=1)


class AnalyzeRequest(BaseModel):
    text: str = Field(min_length=1)


class PublicUser(BaseModel):
    id: int
    username: str
    email: str
    createdAt: str | None = None


class AuthResponse(BaseModel):
    success: bool
    message: str
    user: PublicUser
    token: str


class AnalyzeResponse(BaseModel):
    analysis: str


_email_adapter = TypeAdapter(EmailStr)


def normalize_email(value: str) -> str | None:
    """Returns the address as EmailStr stores it, or None if value is not an email."""
    try:
        return _email_adapter.validate_python(value)
    except ValidationError:
        return None
