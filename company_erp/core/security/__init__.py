"""Security module for authentication."""

from .jwt_handler import JWTManager
from .password_hasher import PasswordHasher

__all__ = [
    "JWTManager",
    "PasswordHasher",
]
