"""Identity verification service."""

import logfire

from ask.config import AuthSettings
from ask.domain.value import UserId
from ask.util.jwt import InvalidTokenError, read_identity

from .base import Service


class IdentityService(Service):
    """Turns the identity provider's cookie into a verified user id.

    A missing or unusable token yields None rather than an error; each
    operation decides whether an anonymous caller is allowed.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def authenticate(self, token: str | None) -> UserId | None:
        """Return the caller's user id, or None if they aren't signed in.

        Args:
            token: Raw ``auth_token`` cookie value, if any

        Returns:
            Verified user ID, or None
        """
        if not token:
            return None

        try:
            claims = read_identity(token, self.auth_settings)
        except InvalidTokenError as e:
            logfire.info("Rejected identity token", reason=e.reason)
            return None

        return UserId(claims.user_id)
