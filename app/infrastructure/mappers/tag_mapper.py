"""
Tag mapper for converting between domain entities and database models.
"""

from app.domain.models.tag import Tag
from app.infrastructure.db.models import TagModel


class TagMapper:
    """Maps between Tag domain entity and TagModel database model."""

    def domain_to_model(self, tag: Tag) -> TagModel:
        return TagModel(
            id=tag.id,
            name=tag.name,
            user_id=tag.user_id,
            created_at=tag.created_at,
            updated_at=tag.updated_at,
        )

    def model_to_domain(self, model: TagModel) -> Tag:
        return Tag(
            id=model.id,
            name=model.name,
            user_id=model.user_id,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
