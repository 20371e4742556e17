"""
JWT token management utilities.

Handles bearer token creation and validation.
"""

import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

logger = logging.getLogger(__name__)


class JWTManager:
    """
    JWT token manager for authentication.

    Tokens carry the employee id in the ``user_id`` claim and expire after a
    fixed lifetime taken from configuration. There is no refresh token and
    no server-side revocation: a token is valid until it expires.
    """

    DEFAULT_ALGORITHM = "HS256"
    DEFAULT_EXPIRES = timedelta(days=30)

    def __init__(
        self,
        secret_key: str,
        algorithm: str = DEFAULT_ALGORITHM,
        expires_delta: timedelta = DEFAULT_EXPIRES,
    ):
        """
        Initialize JWT manager.

        Args:
            secret_key: Secret key for signing tokens
            algorithm: JWT algorithm (default: HS256)
            expires_delta: Token lifetime
        """
        if not secret_key:
            raise ValueError("A signing secret is required")

        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expires_delta = expires_delta

        logger.info(
            f"JWT Manager initialized with algorithm {algorithm}, "
            f"tokens expire in {int(expires_delta.total_seconds())}s"
        )

    @property
    def expires_in(self) -> int:
        """Token lifetime in seconds."""
        return int(self.expires_delta.total_seconds())

    def create_access_token(
        self,
        user_id: str,
        additional_claims: Optional[Dict[str, Any]] = None,
        expires_delta: Optional[timedelta] = None,
    ) -> str:
        """
        Create JWT access token.

        Args:
            user_id: Employee identifier
            additional_claims: Additional claims to include
            expires_delta: Custom expiration time

        Returns:
            Encoded JWT token
        """
        now = datetime.now(timezone.utc)
        expire = now + (expires_delta or self.expires_delta)

        payload = {
            "user_id": str(user_id),
            "token_type": "access",
            "iat": now,
            "exp": expire,
            "jti": secrets.token_hex(16),
        }

        if additional_claims:
            payload.update(additional_claims)

        token = jwt.encode(payload, self.secret_key, algorithm=self.algorithm)
        logger.debug(f"Access token created for user {user_id}")
        return token

    def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify and decode JWT token.

        Args:
            token: JWT token to verify

        Returns:
            Decoded token payload

        Raises:
            jwt.ExpiredSignatureError: If token is expired
            jwt.InvalidTokenError: If token is invalid
        """
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={"require": ["exp", "iat"]},
            )
            logger.debug(f"Token verified for user {payload.get('user_id')}")
            return payload
        except jwt.ExpiredSignatureError:
            logger.warning("Token verification failed: token expired")
            raise
        except jwt.InvalidTokenError as e:
            logger.warning(f"Token verification failed: {e}")
            raise
