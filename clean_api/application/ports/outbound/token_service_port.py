# clean_api/application/ports/outbound/token_service_port.py

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, Optional

from clean_api.domain.models.refresh_token import GeneratedAuthTokens
from clean_api.domain.models.user_domain_model import User


class ITokenService(ABC):
    """Token handling interface."""

    @abstractmethod
    async def generate_tokens(self, user: User, now: Optional[datetime] = None) -> GeneratedAuthTokens:
        pass

    @abstractmethod
    def decode_access_token(self, token: str) -> Dict[str, Any]:
        pass
