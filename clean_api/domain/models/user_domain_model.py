# clean_api/domain/models/user_domain_model.py

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID


@dataclass
class User:
    """
    Domain representation of an account.

    `password` holds the argon2 hash, or None once hide_password() ran.
    """
    id: UUID
    name: str
    email: str
    password: Optional[str] = field(default=None, repr=False)
    status: str = "active"
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def hide_password(self) -> "User":
        """Drop the password hash so the object is safe to return to clients."""
        self.password = None
        return self

    @property
    def is_active(self) -> bool:
        return self.status == "active"
