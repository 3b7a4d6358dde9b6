"""Caller identity resolution.

The caller is named by a JWT carried either in the ``auth_token`` cookie or
in an ``Authorization: Bearer`` header. A missing or invalid token means
there is no caller; use cases that need one reject the request.
"""

from tube.domain.service import JWTService


def bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        return None
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() != "bearer" or not credentials.strip():
        return None
    return credentials.strip()


def resolve_actor(
    jwt_service: JWTService,
    auth_token: str | None,
    authorization: str | None,
) -> str | None:
    """Return the caller's user ID, preferring the cookie over the header."""
    return jwt_service.get_user_id_from_token(
        auth_token or bearer_token(authorization)
    )
