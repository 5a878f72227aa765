"""Unit tests for session token helpers."""

from uuid import uuid4

import pytest

from pinwall.config import AuthSettings
from pinwall.util.jwt import JWTError, create_token, verify_token


class TestSessionTokens:
    """Tests for create_token() and verify_token()."""

    def test_round_trip(self, auth_settings):
        user_id, session_id = str(uuid4()), str(uuid4())

        payload = verify_token(
            create_token(user_id, session_id, auth_settings), auth_settings
        )

        assert payload.user_id == user_id
        assert payload.sid == session_id

    def test_tampered_token(self, auth_settings):
        token = create_token(str(uuid4()), str(uuid4()), auth_settings)
        header, body, signature = token.split(".")

        with pytest.raises(JWTError):
            verify_token(f"{header}.{body}.{signature[::-1]}", auth_settings)

    def test_expired_token(self, auth_settings):
        expired = AuthSettings(
            session_secret=auth_settings.session_secret, session_expiry_days=-1
        )
        token = create_token(str(uuid4()), str(uuid4()), expired)

        with pytest.raises(JWTError, match="expired"):
            verify_token(token, auth_settings)
