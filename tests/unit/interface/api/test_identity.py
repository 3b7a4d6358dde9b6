"""Unit tests for caller identity resolution."""

from uuid import uuid4

import pytest

from tests.factories import mint_token
from tube.config import AuthSettings
from tube.domain.service import JWTService
from tube.interface.api.identity import bearer_token, resolve_actor


class TestBearerToken:
    """Tests for bearer_token."""

    @pytest.mark.parametrize(
        ("header", "expected"),
        [
            ("Bearer abc", "abc"),
            ("bearer abc", "abc"),
            ("Basic abc", None),
            ("Bearer ", None),
            ("", None),
            (None, None),
        ],
    )
    def test_extracts_token(self, header, expected):
        assert bearer_token(header) == expected


class TestResolveActor:
    """Tests for resolve_actor."""

    def test_cookie_wins_over_header(self):
        settings = AuthSettings(jwt_secret="s")
        jwt_service = JWTService(settings)
        cookie_user, header_user = str(uuid4()), str(uuid4())
        cookie = mint_token(cookie_user, "cookie", settings=settings)
        header = f"Bearer {mint_token(header_user, 'header', settings=settings)}"

        assert resolve_actor(jwt_service, cookie, header) == cookie_user
        assert resolve_actor(jwt_service, None, header) == header_user

    def test_no_credentials(self):
        jwt_service = JWTService(AuthSettings(jwt_secret="s"))

        assert resolve_actor(jwt_service, None, None) is None
