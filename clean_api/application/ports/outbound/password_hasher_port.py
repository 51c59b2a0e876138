# clean_api/application/ports/outbound/password_hasher_port.py

from abc import ABC, abstractmethod


class IPasswordHasher(ABC):
    """One-way salted hashing of secrets (passwords, refresh token secrets)."""

    @abstractmethod
    async def hash(self, secret: str) -> str:
        pass

    @abstractmethod
    async def verify(self, hashed: str, secret: str) -> bool:
        pass
