"""Unit tests for JWT utilities and JWTService."""

from datetime import datetime, timedelta, timezone

import pytest

from pastethread.config import AuthSettings
from pastethread.domain.service import JWTService
from pastethread.util.jwt import JWTError, verify_token
from tests.factories import make_token

SETTINGS = AuthSettings(jwt_secret="test-secret")


class TestVerifyToken:
    """Decoding tokens minted by the auth provider."""

    def test_token_carries_user(self):
        token = make_token("user-1", "Ada", SETTINGS)

        payload = verify_token(token, SETTINGS)

        assert payload.user_id == "user-1"
        assert payload.name == "Ada"
        assert payload.exp > datetime.now(timezone.utc)

    def test_wrong_secret_rejected(self):
        token = make_token("user-1", "Ada", SETTINGS)

        with pytest.raises(JWTError, match="Invalid token"):
            verify_token(token, AuthSettings(jwt_secret="other-secret"))

    def test_expired_token_rejected(self):
        token = make_token("user-1", "Ada", SETTINGS, expires_in=timedelta(minutes=-1))

        with pytest.raises(JWTError, match="expired"):
            verify_token(token, SETTINGS)


class TestJWTService:
    """Viewer resolution from cookies."""

    def test_valid_token_gives_user_id(self):
        token = make_token("user-1", "Ada", SETTINGS)

        assert JWTService(SETTINGS).get_user_id_from_token(token) == "user-1"

    @pytest.mark.parametrize("token", [None, "", "garbage"])
    def test_missing_or_invalid_token_is_anonymous(self, token):
        assert JWTService(SETTINGS).get_user_id_from_token(token) is None

    def test_expired_token_is_anonymous(self):
        token = make_token("user-1", "Ada", SETTINGS, expires_in=timedelta(hours=-1))

        assert JWTService(SETTINGS).get_user_id_from_token(token) is None
