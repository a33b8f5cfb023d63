"""
Category router.
Categories group a user's tasks; each task belongs to at most one.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from app.container import UseCasesDep
from app.application.dto.category_dto import (
    CreateCategoryRequestDTO,
    UpdateCategoryRequestDTO,
    CategoryResponseDTO,
)
from app.infrastructure.auth import CurrentUserId
from app.infrastructure.rate_limiting import create_rate_limit


router = APIRouter()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=CategoryResponseDTO,
    dependencies=[Depends(create_rate_limit)],
)
async def create_category(
    request: CreateCategoryRequestDTO,
    user_id: CurrentUserId,
    use_cases: UseCasesDep,
):
    """
    Create a new category.

    - **name**: Category name, unique among your categories
    """
    category = await use_cases.create_category.execute(user_id, request)
    return CategoryResponseDTO.from_domain(category)


@router.get("", response_model=List[CategoryResponseDTO])
async def list_categories(user_id: CurrentUserId, use_cases: UseCasesDep):
    """
    List the authenticated user's categories.
    """
    categories = await use_cases.get_categories_by_user.execute(user_id)
    return [CategoryResponseDTO.from_domain(category) for category in categories]


@router.get("/{category_id}", response_model=CategoryResponseDTO)
async def get_category(category_id: int, user_id: CurrentUserId, use_cases: UseCasesDep):
    """
    Get a specific category by ID.
    """
    category = await use_cases.get_category_by_id.execute(user_id, category_id)
    return CategoryResponseDTO.from_domain(category)


@router.put(
    "/{category_id}",
    response_model=CategoryResponseDTO,
    dependencies=[Depends(create_rate_limit)],
)
async def update_category(
    category_id: int,
    request: UpdateCategoryRequestDTO,
    user_id: CurrentUserId,
    use_cases: UseCasesDep,
):
    """
    Rename a category.

    - **name**: New name, unique among your categories
    """
    category = await use_cases.update_category.execute(user_id, category_id, request)
    return CategoryResponseDTO.from_domain(category)


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    dependencies=[Depends(create_rate_limit)],
)
async def delete_category(category_id: int, user_id: CurrentUserId, use_cases: UseCasesDep):
    """
    Delete a category. Its tasks are kept and lose the category.
    """
    await use_cases.delete_category.execute(user_id, category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
