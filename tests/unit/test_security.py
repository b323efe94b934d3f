"""
Unit tests for the security module.
Tests password validation, hashing, JWT token creation/validation, and token revocation.
"""
import pytest
from datetime import timedelta
from jose import jwt

from eventsnap.core.security import (
    validate_password,
    hash_password,
    verify_password,
    create_access_token,
    create_refresh_token,
    decode_token,
    revoke_token,
    is_token_revoked,
)
from eventsnap.core.config import settings


@pytest.mark.unit
class TestPasswordValidation:
    """Test password validation functionality."""

    def test_valid_password(self):
        """Test that valid passwords pass validation."""
        valid_passwords = [
            "Test123!@#",
            "MyP@ssw0rd",
            "Secur3#Pass",
            "Admin2024!",
        ]
        for password in valid_passwords:
            validate_password(password)  # Should not raise

    def test_password_too_short(self):
        with pytest.raises(ValueError, match="at least 8 characters"):
            validate_password("Test1!")

    def test_password_no_uppercase(self):
        with pytest.raises(ValueError, match="uppercase letter"):
            validate_password("test123!@#")

    def test_password_no_lowercase(self):
        with pytest.raises(ValueError, match="lowercase letter"):
            validate_password("TEST123!@#")

    def test_password_no_digit(self):
        with pytest.raises(ValueError, match="digit"):
            validate_password("TestPass!@#")

    def test_password_no_special_char(self):
        with pytest.raises(ValueError, match="special character"):
            validate_password("TestPass123")


@pytest.mark.unit
class TestPasswordHashing:
    """Test password hashing and verification."""

    def test_hash_password(self):
        password = "Test123!@#"
        hashed = hash_password(password)

        assert hashed != password
        assert hashed.startswith("$2b$")  # bcrypt hash prefix

    def test_verify_password_correct(self):
        hashed = hash_password("Test123!@#")

        assert verify_password("Test123!@#", hashed) is True

    def test_verify_password_incorrect(self):
        hashed = hash_password("Test123!@#")

        assert verify_password("Wrong123!@#", hashed) is False


@pytest.mark.unit
class TestJWTTokens:
    """Test JWT token creation and decoding."""

    def test_create_access_token(self):
        token = create_access_token({"sub": "42", "role": "event_organizer"})

        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        assert payload["sub"] == "42"
        assert payload["role"] == "event_organizer"
        assert payload["type"] == "access"
        assert "exp" in payload

    def test_create_refresh_token(self):
        token = create_refresh_token({"sub": "42"})

        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        assert payload["sub"] == "42"
        assert payload["type"] == "refresh"

    def test_refresh_token_outlives_access_token(self):
        access = decode_token(create_access_token({"sub": "42"}))
        refresh = decode_token(create_refresh_token({"sub": "42"}))

        assert refresh["exp"] > access["exp"]

    def test_decode_invalid_token(self):
        with pytest.raises(ValueError, match="Invalid token"):
            decode_token("invalid.token.here")

    def test_decode_token_signed_with_other_key(self):
        token = jwt.encode({"sub": "42", "type": "access"}, "someone-elses-key", algorithm="HS256")

        with pytest.raises(ValueError, match="Invalid token"):
            decode_token(token)

    def test_decode_expired_token(self):
        token = create_access_token({"sub": "42"}, expires_delta=timedelta(seconds=-1))

        with pytest.raises(ValueError, match="Token has expired"):
            decode_token(token)

    def test_decode_token_missing_required_fields(self):
        token = jwt.encode({"role": "administrator", "type": "access"}, settings.SECRET_KEY, algorithm="HS256")

        with pytest.raises(ValueError, match="Invalid token payload"):
            decode_token(token)


@pytest.mark.unit
@pytest.mark.asyncio
class TestTokenRevocation:
    """Token revocation against the in-memory store installed by conftest."""

    async def test_revoke_token_uses_remaining_lifetime(self, token_store):
        token = create_access_token({"sub": "42"}, expires_delta=timedelta(minutes=10))

        assert await revoke_token(token) is True

        assert await is_token_revoked(token) is True
        ttl = token_store.keys[f"revoked_token:{token}"]
        assert 0 < ttl <= 600

    async def test_revoke_with_explicit_expiry(self, token_store):
        await revoke_token("opaque-token", 3600)

        assert token_store.keys["revoked_token:opaque-token"] == 3600

    async def test_revoke_undecodable_token_is_refused(self, token_store):
        assert await revoke_token("not-a-jwt") is False
        assert token_store.keys == {}

    async def test_is_token_revoked_not_revoked(self):
        assert await is_token_revoked("non_revoked_token") is False

    async def test_revoke_and_check_multiple_tokens(self):
        tokens = ["token1", "token2", "token3"]

        await revoke_token(tokens[0], 3600)
        await revoke_token(tokens[1], 3600)

        assert await is_token_revoked(tokens[0]) is True
        assert await is_token_revoked(tokens[1]) is True
        assert await is_token_revoked(tokens[2]) is False
