# clean_api/domain/models/post.py

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID


@dataclass
class Post:
    """Content item managed through the protected /posts endpoints."""
    id: UUID
    title: str
    content: str
    status: str = "active"
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
