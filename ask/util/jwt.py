"""Identity token helpers.

The identity provider signs a short JWT carrying the user's id and stores it
in the ``auth_token`` cookie. This service only reads those tokens; signing
is kept for tooling and tests that share the provider's secret.
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt
from pydantic import BaseModel, ValidationError

from ask.config import AuthSettings

SUBJECT_CLAIM = "user_id"


class IdentityClaims(BaseModel):
    """Claims this service relies on."""

    user_id: UUID
    exp: datetime


class InvalidTokenError(Exception):
    """Token could not be turned into a verified identity."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid identity token: {reason}")


def sign_identity(
    user_id: UUID | str,
    settings: AuthSettings,
    ttl: timedelta = timedelta(hours=1),
) -> str:
    """Sign an identity token the way the identity provider does."""
    claims = {
        SUBJECT_CLAIM: str(user_id),
        "exp": datetime.now(timezone.utc) + ttl,
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def read_identity(token: str, settings: AuthSettings) -> IdentityClaims:
    """Verify a token's signature and expiry and return its claims.

    Args:
        token: Encoded JWT from the auth cookie
        settings: Authentication settings

    Returns:
        Verified claims

    Raises:
        InvalidTokenError: If the token is expired, forged, or lacks a usable subject
    """
    try:
        decoded = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            leeway=settings.jwt_leeway_seconds,
            options={"require": ["exp", SUBJECT_CLAIM]},
        )
    except jwt.ExpiredSignatureError:
        raise InvalidTokenError("expired")
    except jwt.MissingRequiredClaimError as e:
        raise InvalidTokenError(f"missing claim {e.claim}")
    except jwt.InvalidTokenError:
        raise InvalidTokenError("bad signature or format")

    try:
        return IdentityClaims.model_validate(decoded)
    except ValidationError:
        raise InvalidTokenError("subject is not a user id")
