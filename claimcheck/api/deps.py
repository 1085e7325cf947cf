# claimcheck/api/deps.py

import logging
from dataclasses import dataclass
from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer
from claimcheck.core.security import SESSION_PURPOSE, PasswordHasher, TokenIssuer
from claimcheck.core.mailer import Mailer
from claimcheck.core.analyzer import Analyzer
from claimcheck.errors import AuthenticationInvalid, AuthenticationMissing, TokenError


logger = logging.getLogger(__name__)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/login", auto_error=False)


@dataclass
class CurrentUser:
    id: int
    username: str | None = None


def get_tokens(request: Request) -> TokenIssuer:
    return request.app.state.tokens


def get_passwords(request: Request) -> PasswordHasher:
    return request.app.state.passwords


def get_mailer(request: Request) -> Mailer:
    return request.app.state.mailer


def get_analyzer(request: Request) -> Analyzer:
    return request.app.state.analyzer


def authenticate(tokens: TokenIssuer, token: str | None) -> CurrentUser:
    if not token:
        raise AuthenticationMissing("Access token required")
    try:
        claims = tokens.verify(token, purpose=SESSION_PURPOSE)
    except TokenError as e:
        logger.warning("Rejected bearer token: %s", e)
        raise AuthenticationInvalid("Invalid or expired token") from e
    return CurrentUser(id=claims["userId"], username=claims.get("username"))


def get_current_user(request: Request, token: str | None = Depends(oauth2_scheme)) -> CurrentUser:
    return authenticate(get_tokens(request), token)


def get_analyze_user(request: Request, token: str | None = Depends(oauth2_scheme)) -> CurrentUser | None:
    """
    Auth for /analyze. Required when configured; otherwise a presented token is
    still verified so the request can be recorded in that user's history.
    """
    settings = request.app.state.settings
    if not settings.enable_accounts:
        return None
    if settings.require_auth_for_analyze or token:
        return authenticate(get_tokens(request), token)
    return None
