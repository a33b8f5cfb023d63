"""
Category mapper for converting between domain entities and database models.
"""

from app.domain.models.category import Category
from app.infrastructure.db.models import CategoryModel


class CategoryMapper:
    """Maps between Category domain entity and CategoryModel database model."""

    def domain_to_model(self, category: Category) -> CategoryModel:
        return CategoryModel(
            id=category.id,
            name=category.name,
            user_id=category.user_id,
            created_at=category.created_at,
            updated_at=category.updated_at,
        )

    def model_to_domain(self, model: CategoryModel) -> Category:
        return Category(
            id=model.id,
            name=model.name,
            user_id=model.user_id,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
