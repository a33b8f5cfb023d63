"""
Tag router.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from app.container import UseCasesDep
from app.application.dto.category_dto import CreateTagRequestDTO, TagResponseDTO
from app.infrastructure.auth import CurrentUserId
from app.infrastructure.rate_limiting import create_rate_limit


router = APIRouter()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=TagResponseDTO,
    dependencies=[Depends(create_rate_limit)],
)
async def create_tag(
    request: CreateTagRequestDTO,
    user_id: CurrentUserId,
    use_cases: UseCasesDep,
):
    """
    Create a new tag.

    - **name**: Tag name, unique among your tags
    """
    tag = await use_cases.create_tag.execute(user_id, request)
    return TagResponseDTO.from_domain(tag)


@router.get("", response_model=List[TagResponseDTO])
async def list_tags(user_id: CurrentUserId, use_cases: UseCasesDep):
    """
    List the authenticated user's tags.
    """
    tags = await use_cases.get_tags_by_user.execute(user_id)
    return [TagResponseDTO.from_domain(tag) for tag in tags]


@router.get("/{tag_id}", response_model=TagResponseDTO)
async def get_tag(tag_id: int, user_id: CurrentUserId, use_cases: UseCasesDep):
    """
    Get a specific tag by ID.
    """
    tag = await use_cases.get_tag_by_id.execute(user_id, tag_id)
    return TagResponseDTO.from_domain(tag)
