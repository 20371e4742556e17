"""Token and password utilities."""

from __future__ import annotations

from datetime import timedelta

import jwt
import pytest

from company_erp.core.security import JWTManager, PasswordHasher
from tests.helpers import JWT_SECRET


@pytest.fixture
def manager() -> JWTManager:
    return JWTManager(JWT_SECRET, expires_delta=timedelta(hours=1))


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(rounds=4)


class TestJWTManager:
    def test_token_carries_identity_claim(self, manager: JWTManager) -> None:
        payload = manager.verify_token(manager.create_access_token("emp-1"))
        assert payload["user_id"] == "emp-1"
        assert payload["token_type"] == "access"
        assert payload["exp"] - payload["iat"] == 3600

    def test_tokens_are_unique(self, manager: JWTManager) -> None:
        assert manager.create_access_token("emp-1") != manager.create_access_token("emp-1")

    def test_expired_token(self, manager: JWTManager) -> None:
        token = manager.create_access_token("emp-1", expires_delta=timedelta(seconds=-1))
        with pytest.raises(jwt.ExpiredSignatureError):
            manager.verify_token(token)

    def test_foreign_signature(self, manager: JWTManager) -> None:
        foreign = JWTManager("x" * 40).create_access_token("emp-1")
        with pytest.raises(jwt.InvalidSignatureError):
            manager.verify_token(foreign)

    def test_missing_expiry_is_invalid(self, manager: JWTManager) -> None:
        token = jwt.encode({"user_id": "emp-1"}, JWT_SECRET, algorithm="HS256")
        with pytest.raises(jwt.MissingRequiredClaimError):
            manager.verify_token(token)

    def test_secret_is_required(self) -> None:
        with pytest.raises(ValueError):
            JWTManager("")

    def test_expires_in(self, manager: JWTManager) -> None:
        assert manager.expires_in == 3600


class TestPasswordHasher:
    def test_hash_and_verify(self, hasher: PasswordHasher) -> None:
        hashed = hasher.hash("secret123")
        assert hashed != "secret123"
        assert hashed.startswith("$2")
        assert hasher.verify("secret123", hashed)
        assert not hasher.verify("secret124", hashed)

    def test_hashes_are_salted(self, hasher: PasswordHasher) -> None:
        assert hasher.hash("secret123") != hasher.hash("secret123")

    def test_verify_rejects_empty_and_garbage(self, hasher: PasswordHasher) -> None:
        assert not hasher.verify("", hasher.hash("secret123"))
        assert not hasher.verify("secret123", "not-a-bcrypt-hash")

    def test_long_passwords_are_accepted(self, hasher: PasswordHasher) -> None:
        password = "p" * 100
        assert hasher.verify(password, hasher.hash(password))

    def test_empty_password_cannot_be_hashed(self, hasher: PasswordHasher) -> None:
        with pytest.raises(ValueError):
            hasher.hash("")

    @pytest.mark.parametrize("rounds", [3, 32])
    def test_rounds_are_bounded(self, rounds: int) -> None:
        with pytest.raises(ValueError):
            PasswordHasher(rounds=rounds)
