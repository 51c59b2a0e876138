# clean_api/adapters/outbound/security/password_hasher.py

"""
argon2id credential hasher.

Used for both user passwords and the secret half of refresh tokens. Each
call to hash() draws a fresh random salt, which is encoded in the output
string together with the cost parameters.
"""

import asyncio
import logging
from typing import Optional

from passlib.context import CryptContext

from clean_api.adapters.configuration.config import settings
from clean_api.application.ports.outbound import IPasswordHasher
from clean_api.domain.exceptions import PasswordHashingException

logger = logging.getLogger(__name__)


class Argon2PasswordHasher(IPasswordHasher):
    """
    Salted argon2id hashing with configurable cost.

    verify() returns False on a mismatch and raises PasswordHashingException
    when the stored hash cannot be parsed, so callers can tell a wrong
    password from a broken record.
    """

    def __init__(
            self,
            memory_cost: Optional[int] = None,
            time_cost: Optional[int] = None,
            parallelism: Optional[int] = None,
    ):
        self.crypt_context = CryptContext(
            schemes=["argon2"],
            argon2__type="ID",
            argon2__memory_cost=memory_cost or settings.ARGON2_MEMORY_COST,
            argon2__rounds=time_cost or settings.ARGON2_TIME_COST,
            argon2__parallelism=parallelism or settings.ARGON2_PARALLELISM,
        )

    async def hash(self, secret: str) -> str:
        """Hash a secret off the event loop."""
        try:
            return await asyncio.to_thread(self.crypt_context.hash, secret)
        except (ValueError, TypeError) as e:
            logger.error(f"argon2 hashing failed: {e}")
            raise PasswordHashingException(message="Could not hash secret.", original_error=e)

    async def verify(self, hashed: str, secret: str) -> bool:
        """Check a secret against a stored hash."""
        try:
            return await asyncio.to_thread(self.crypt_context.verify, secret, hashed)
        except (ValueError, TypeError) as e:
            logger.error(f"argon2 verification failed on a malformed hash: {e}")
            raise PasswordHashingException(message="Stored hash is invalid.", original_error=e)
