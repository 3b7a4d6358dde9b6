"""Unit tests for JWTService."""

from datetime import timedelta

import jwt
import pytest

from tests.factories import mint_token
from tube.config import AuthSettings
from tube.domain.service import JWTService
from tube.util.jwt import JWTError

SETTINGS = AuthSettings(jwt_secret="test-secret")


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(SETTINGS)


class TestJWTService:
    """Unit tests for JWTService."""

    def test_reads_claims_from_issued_token(self, jwt_service):
        token = mint_token(
            "0f8fad5b-d9cb-469f-a165-70867728950e", "alice", settings=SETTINGS
        )

        payload = jwt_service.verify_token(token)

        assert payload.user_id == "0f8fad5b-d9cb-469f-a165-70867728950e"
        assert payload.username == "alice"

    def test_rejects_token_signed_with_other_secret(self, jwt_service):
        token = mint_token("u", "bob", settings=AuthSettings(jwt_secret="other"))

        with pytest.raises(JWTError):
            jwt_service.verify_token(token)

    def test_rejects_expired_token(self, jwt_service):
        token = mint_token("u", settings=SETTINGS, expires_in=timedelta(minutes=-5))

        with pytest.raises(JWTError) as exc_info:
            jwt_service.verify_token(token)

        assert str(exc_info.value) == "Token has expired"

    def test_rejects_token_without_user_id(self, jwt_service):
        """A well-signed token still needs the user_id claim."""
        token = jwt.encode({"username": "carol"}, "test-secret", algorithm="HS256")

        with pytest.raises(JWTError) as exc_info:
            jwt_service.verify_token(token)

        assert str(exc_info.value) == "Token is missing required claims"

    @pytest.mark.parametrize("token", [None, "", "garbage"])
    def test_missing_or_invalid_token_has_no_user(self, jwt_service, token):
        assert jwt_service.get_user_id_from_token(token) is None

    def test_expired_token_has_no_user(self, jwt_service):
        token = mint_token("u", settings=SETTINGS, expires_in=timedelta(minutes=-5))

        assert jwt_service.get_user_id_from_token(token) is None
