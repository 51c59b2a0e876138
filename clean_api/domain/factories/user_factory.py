# clean_api/domain/factories/user_factory.py

from datetime import datetime, timezone
import uuid
from clean_api.application.dtos.auth_dto import SignUpRequest
from clean_api.domain.models.user_domain_model import User as DomainUser


class UserFactory:
    """
    Factory for new User domain objects.
    """

    @staticmethod
    def create_new_user(user_data: SignUpRequest, hashed_password: str) -> DomainUser:
        """
        Build a new active User from sign-up input.

        Args:
            user_data: Sign-up payload
            hashed_password: Password already hashed by the credential hasher

        Returns:
            DomainUser: User domain object, not yet persisted
        """
        now = datetime.now(timezone.utc)
        return DomainUser(
            id=uuid.uuid4(),
            name=user_data.name,
            email=user_data.email.lower(),
            password=hashed_password,
            status="active",
            created_at=now,
            updated_at=now,
        )
