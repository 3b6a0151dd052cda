"""bcrypt implementation of the password hasher port."""

import asyncio
import base64
import hashlib

import bcrypt
from loguru import logger

from src.core.config import BCRYPT_MAX_ROUNDS, BCRYPT_MIN_ROUNDS


def prehash(value: str) -> bytes:
    """Reduce ``value`` to a fixed 44-byte input for bcrypt.

    The base64 encoded SHA-256 digest of the UTF-8 value fits within
    bcrypt's input limit whatever the password length, and contains no
    NUL bytes.

    Args:
        value: Plaintext password.

    Returns:
        bytes: The bytes handed to ``bcrypt.hashpw``.
    """
    return base64.b64encode(hashlib.sha256(value.encode("utf-8")).digest())


class BcryptAdapter:
    """Hash passwords with bcrypt at a fixed cost factor.

    Passwords go through :func:`prehash` first, so long passwords are
    accepted and every byte of them counts. ``bcrypt.hashpw`` is CPU bound
    and runs in a worker thread so the event loop keeps serving other
    requests while a password is hashed.

    Args:
        rounds: bcrypt cost factor, between 4 and 31 inclusive.

    Raises:
        TypeError: If ``rounds`` is not an integer.
        ValueError: If ``rounds`` is outside the range bcrypt supports.
    """

    def __init__(self, rounds: int) -> None:
        if isinstance(rounds, bool) or not isinstance(rounds, int):
            msg = f"bcrypt rounds must be an integer, got {type(rounds).__name__}"
            raise TypeError(msg)
        if not BCRYPT_MIN_ROUNDS <= rounds <= BCRYPT_MAX_ROUNDS:
            msg = (
                f"bcrypt rounds must be between {BCRYPT_MIN_ROUNDS} and "
                f"{BCRYPT_MAX_ROUNDS}, got {rounds}"
            )
            raise ValueError(msg)
        self.rounds = rounds

    async def hash(self, value: str) -> str:
        """Hash ``value`` with a freshly generated salt.

        Args:
            value: Plaintext to hash.

        Returns:
            str: The bcrypt hash, including algorithm, cost and salt.
        """
        salt = bcrypt.gensalt(rounds=self.rounds)
        hashed = await asyncio.to_thread(bcrypt.hashpw, prehash(value), salt)
        logger.debug("Computed bcrypt hash with {} rounds", self.rounds)
        return hashed.decode("utf-8")
