# claimcheck/core/security.py

from datetime import datetime, timedelta, timezone
from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext
from claimcheck.errors import TokenExpiredError, TokenInvalidError


SESSION_PURPOSE = "session"
RESET_PURPOSE = "password_reset"


class PasswordHasher:
    def __init__(self, rounds: int = 12):
        self.pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)

    def hash(self, password: str) -> str:
        return self.pwd_context.hash(password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        try:
            return self.pwd_context.verify(plain_password, hashed_password)
        except (ValueError, TypeError):
            return False


class TokenIssuer:
    """
    Signs and verifies stateless bearer tokens.

    A token is valid for its whole lifetime once issued; there is no revocation list.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        session_ttl: timedelta = timedelta(days=7),
        reset_ttl: timedelta = timedelta(hours=1),
    ):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.session_ttl = session_ttl
        self.reset_ttl = reset_ttl

    def issue(self, claims: dict, ttl: timedelta) -> str:
        now = datetime.now(timezone.utc)
        to_encode = claims.copy()
        to_encode.update({"iat": now, "exp": now + ttl})
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str, purpose: str | None = None) -> dict:
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except ExpiredSignatureError as e:
            raise TokenExpiredError("Token has expired") from e
        except JWTError as e:
            raise TokenInvalidError("Token signature or format is invalid") from e

        if "exp" not in payload or "userId" not in payload:
            raise TokenInvalidError("Token is missing required claims")
        if purpose is not None and payload.get("purpose") != purpose:
            raise TokenInvalidError("Token was not issued for this purpose")
        return payload

    def issue_session_token(self, user) -> str:
        return self.issue(
            {"userId": user.id, "username": user.username, "purpose": SESSION_PURPOSE},
            self.session_ttl,
        )

    def issue_reset_token(self, user) -> str:
        return self.issue({"userId": user.id, "purpose": RESET_PURPOSE}, self.reset_ttl)
