"""Password hashing adapters."""

from src.infrastructure.cryptography.bcrypt_adapter import BcryptAdapter

__all__ = ["BcryptAdapter"]
