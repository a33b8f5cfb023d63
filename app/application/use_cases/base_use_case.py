"""
Base use case classes for the application layer.
Provides common patterns and structure for use case implementations.
"""

import logging
from abc import ABC
from typing import Any

from app.domain.models.base import (
    AccessDeniedError,
    BaseEntity,
    EntityNotFoundError,
)

logger = logging.getLogger(__name__)


class BaseUseCase(ABC):
    """
    Base class for all use cases.

    Each use case performs a single operation. Failures are raised as
    domain exceptions and translated to HTTP responses by the web layer.
    """

    # Name used in error messages, e.g. "Task with id 3 not found"
    entity_name: str = "Resource"
    entity_plural: str = "resources"


class AuthorizedUseCase(BaseUseCase):
    """
    Base class for use cases acting on resources owned by a user.
    Existence is checked before ownership.
    """

    def _require_owner(self, entity: BaseEntity, user_id: int, action: str) -> None:
        """Check that the entity belongs to the requesting user."""
        if not entity.is_owned_by(user_id):
            logger.info(
                "User %s denied %s on %s %s", user_id, action, self.entity_name, entity.id
            )
            raise AccessDeniedError(
                f"You can only {action} your own {self.entity_plural}"
            )

    async def _get_owned(self, repository: Any, entity_id: int, user_id: int, action: str) -> Any:
        """Load an entity by id and check the requesting user owns it."""
        entity = await repository.find_by_id(entity_id)
        if entity is None:
            raise EntityNotFoundError(self.entity_name, entity_id)
        self._require_owner(entity, user_id, action)
        return entity

