"""
Composition root.
Wires repositories, auth services and use cases for one unit of work.
"""

from dataclasses import dataclass
from typing import Annotated, Optional

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Settings, get_settings
from app.application.use_cases.user_use_cases import (
    RegisterUserUseCase,
    LoginUseCase,
    GetUserProfileUseCase,
    UpdateUserProfileUseCase,
)
from app.application.use_cases.category_use_cases import (
    CreateCategoryUseCase,
    GetCategoriesByUserUseCase,
    GetCategoryByIdUseCase,
    UpdateCategoryUseCase,
    DeleteCategoryUseCase,
)
from app.application.use_cases.tag_use_cases import (
    CreateTagUseCase,
    GetTagsByUserUseCase,
    GetTagByIdUseCase,
)
from app.application.use_cases.task_use_cases import (
    CreateTaskUseCase,
    GetTaskByIdUseCase,
    GetTasksByUserUseCase,
    UpdateTaskUseCase,
    DeleteTaskUseCase,
    CompleteTaskUseCase,
)
from app.domain.services.auth_service import PasswordHasher, TokenService
from app.infrastructure.db.database import get_db
from app.infrastructure.repositories import (
    SQLAlchemyUserRepository,
    SQLAlchemyCategoryRepository,
    SQLAlchemyTagRepository,
    SQLAlchemyTaskRepository,
)


@dataclass
class UseCases:
    """Every use case of the application, bound to one database session."""

    # Auth
    register_user: RegisterUserUseCase
    login: LoginUseCase
    get_user_profile: GetUserProfileUseCase
    update_user_profile: UpdateUserProfileUseCase

    # Categories
    create_category: CreateCategoryUseCase
    get_categories_by_user: GetCategoriesByUserUseCase
    get_category_by_id: GetCategoryByIdUseCase
    update_category: UpdateCategoryUseCase
    delete_category: DeleteCategoryUseCase

    # Tags
    create_tag: CreateTagUseCase
    get_tags_by_user: GetTagsByUserUseCase
    get_tag_by_id: GetTagByIdUseCase

    # Tasks
    create_task: CreateTaskUseCase
    get_task_by_id: GetTaskByIdUseCase
    get_tasks_by_user: GetTasksByUserUseCase
    update_task: UpdateTaskUseCase
    delete_task: DeleteTaskUseCase
    complete_task: CompleteTaskUseCase


def build_use_cases(
    session: AsyncSession,
    password_hasher: PasswordHasher,
    token_service: TokenService,
    settings: Optional[Settings] = None,
) -> UseCases:
    """Build the use cases over SQLAlchemy repositories sharing one session."""
    settings = settings or get_settings()

    users = SQLAlchemyUserRepository(session)
    categories = SQLAlchemyCategoryRepository(session)
    tags = SQLAlchemyTagRepository(session)
    tasks = SQLAlchemyTaskRepository(session)

    return UseCases(
        register_user=RegisterUserUseCase(users, password_hasher),
        login=LoginUseCase(users, password_hasher, token_service),
        get_user_profile=GetUserProfileUseCase(users),
        update_user_profile=UpdateUserProfileUseCase(users),

        create_category=CreateCategoryUseCase(categories),
        get_categories_by_user=GetCategoriesByUserUseCase(categories),
        get_category_by_id=GetCategoryByIdUseCase(categories),
        update_category=UpdateCategoryUseCase(categories),
        delete_category=DeleteCategoryUseCase(categories),

        create_tag=CreateTagUseCase(tags),
        get_tags_by_user=GetTagsByUserUseCase(tags),
        get_tag_by_id=GetTagByIdUseCase(tags),

        create_task=CreateTaskUseCase(tasks, categories, tags),
        get_task_by_id=GetTaskByIdUseCase(tasks),
        get_tasks_by_user=GetTasksByUserUseCase(
            tasks,
            default_page_size=settings.default_page_size,
            max_page_size=settings.max_page_size,
        ),
        update_task=UpdateTaskUseCase(tasks, categories, tags),
        delete_task=DeleteTaskUseCase(tasks),
        complete_task=CompleteTaskUseCase(tasks),
    )


async def get_use_cases(
    request: Request,
    session: Annotated[AsyncSession, Depends(get_db)],
) -> UseCases:
    """FastAPI dependency returning use cases for the current request."""
    state = request.app.state
    return build_use_cases(session, state.password_hasher, state.token_service, state.settings)


UseCasesDep = Annotated[UseCases, Depends(get_use_cases)]
