# claimcheck/api/auth.py

import logging
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from claimcheck.api.deps import get_mailer, get_passwords, get_tokens
from claimcheck.core import users
from claimcheck.core.mailer import Mailer
from claimcheck.core.security import RESET_PURPOSE, PasswordHasher, TokenIssuer
from claimcheck.database import get_db
from claimcheck.errors import (
    ConflictError,
    InvalidCredentialsError,
    NotFoundError,
    TokenError,
)
from claimcheck.schemas import (
    AuthResponse,
    ForgotPasswordRequest,
    ForgotUsernameRequest,
    LoginRequest,
    ResetPasswordRequest,
    SignupRequest,
)


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def bad_request(message: str) -> JSONResponse:
    return JSONResponse(status_code=400, content={"success": False, "message": message})


def server_error(message: str) -> JSONResponse:
    return JSONResponse(status_code=500, content={"success": False, "message": message})


@router.post("/signup", response_model=AuthResponse)
def signup(
    req: SignupRequest,
    db: Session = Depends(get_db),
    passwords: PasswordHasher = Depends(get_passwords),
    tokens: TokenIssuer = Depends(get_tokens),
):
    try:
        user = users.create_user(db, passwords, req.username, req.email, req.password)
        token = tokens.issue_session_token(user)
        return {
            "success": True,
            "message": "User created successfully",
            "user": user.to_public(),
            "token": token,
        }
    except ConflictError as e:
        return bad_request(str(e))
    except Exception:
        logger.exception("Signup error")
        return server_error("Server error during signup")


@router.post("/login", response_model=AuthResponse)
def login(
    req: LoginRequest,
    db: Session = Depends(get_db),
    passwords: PasswordHasher = Depends(get_passwords),
    tokens: TokenIssuer = Depends(get_tokens),
):
    try:
        user = users.authenticate_user(db, passwords, req.username, req.password)
        if not user:
            raise InvalidCredentialsError("Invalid username or password")
        token = tokens.issue_session_token(user)
        return {
            "success": True,
            "message": "Login successful",
            "user": user.to_public(),
            "token": token,
        }
    except InvalidCredentialsError as e:
        return bad_request(str(e))
    except Exception:
        logger.exception("Login error")
        return server_error("Server error during login")


@router.post("/forgot-username")
def forgot_username(
    req: ForgotUsernameRequest,
    db: Session = Depends(get_db),
    mailer: Mailer = Depends(get_mailer),
):
    try:
        user = users.find_by_email(db, req.email)
        if not user:
            raise NotFoundError("No account found with this email")
        mailer.send_username_reminder(user.email, user.username)
        return {"success": True, "message": "Username sent to your email"}
    except NotFoundError as e:
        return bad_request(str(e))
    except Exception:
        logger.exception("Forgot username error")
        return server_error("Server error")


@router.post("/forgot-password")
def forgot_password(
    req: ForgotPasswordRequest,
    db: Session = Depends(get_db),
    tokens: TokenIssuer = Depends(get_tokens),
    mailer: Mailer = Depends(get_mailer),
):
    try:
        user = users.find_by_username_and_email(db, req.username, req.email)
        if not user:
            raise NotFoundError("No account found with this username and email combination")
        reset_token = tokens.issue_reset_token(user)
        mailer.send_password_reset_link(user.email, reset_token)
        return {"success": True, "message": "Password reset instructions sent to your email"}
    except NotFoundError as e:
        return bad_request(str(e))
    except Exception:
        logger.exception("Forgot password error")
        return server_error("Server error")


@router.post("/reset-password")
def reset_password(
    req: ResetPasswordRequest,
    db: Session = Depends(get_db),
    passwords: PasswordHasher = Depends(get_passwords),
    tokens: TokenIssuer = Depends(get_tokens),
):
    try:
        claims = tokens.verify(req.token, purpose=RESET_PURPOSE)
        user = users.get_user(db, claims["userId"])
        if not user:
            raise NotFoundError("Invalid or expired reset token")
        users.update_password(db, passwords, user, req.password)
        return {"success": True, "message": "Password has been reset"}
    except (TokenError, NotFoundError):
        return bad_request("Invalid or expired reset token")
    except Exception:
        logger.exception("Reset password error")
        return server_error("Server error")
