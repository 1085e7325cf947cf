# claimcheck/errors.py

class ClaimCheckError(Exception):
    """Base class for errors raised by the service layer."""


# -------------------------------
# Validation / Conflict (400)
# -------------------------------

class ConflictError(ClaimCheckError):
    pass


class InvalidCredentialsError(ClaimCheckError):
    pass


class NotFoundError(ClaimCheckError):
    pass


# -------------------------------
# Authentication (401 / 403)
# -------------------------------

class AuthenticationError(ClaimCheckError):
    status_code = 403


class AuthenticationMissing(AuthenticationError):
    status_code = 401


class AuthenticationInvalid(AuthenticationError):
    status_code = 403


# -------------------------------
# Tokens
# -------------------------------

class TokenError(ClaimCheckError):
    pass


class TokenExpiredError(TokenError):
    pass


class TokenInvalidError(TokenError):
    pass


# -------------------------------
# Upstream failures (500)
# -------------------------------

class DeliveryError(ClaimCheckError):
    pass


class ProviderError(ClaimCheckError):
    pass
