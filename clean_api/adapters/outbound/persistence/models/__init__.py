# clean_api/adapters/outbound/persistence/models/__init__.py

from clean_api.adapters.outbound.persistence.models.base_model import Base
from clean_api.adapters.outbound.persistence.models.user_model import User
from clean_api.adapters.outbound.persistence.models.refresh_token_model import RefreshToken
from clean_api.adapters.outbound.persistence.models.post_model import Post

__all__ = ["Base", "User", "RefreshToken", "Post"]
