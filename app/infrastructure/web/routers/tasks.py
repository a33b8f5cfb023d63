"""
Task management router.
Handles CRUD operations, completion and the filtered task list.
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from app.container import UseCasesDep
from app.application.dto.task_dto import (
    CreateTaskRequestDTO,
    UpdateTaskRequestDTO,
    ListTasksRequestDTO,
    TaskResponseDTO,
    TaskListResponseDTO,
)
from app.infrastructure.auth import CurrentUserId
from app.infrastructure.rate_limiting import create_rate_limit, search_rate_limit


router = APIRouter()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=TaskResponseDTO,
    dependencies=[Depends(create_rate_limit)],
)
async def create_task(
    request: CreateTaskRequestDTO,
    user_id: CurrentUserId,
    use_cases: UseCasesDep,
):
    """
    Create a new task.

    - **title**: Task title (required)
    - **description**: Task description
    - **priority**: low, medium (default) or high
    - **dueDate**: Due date (YYYY-MM-DD)
    - **categoryId**: One of your categories
    - **tagIds**: Your tag IDs; duplicates are ignored
    """
    task = await use_cases.create_task.execute(user_id, request)
    return TaskResponseDTO.from_domain(task)


@router.get(
    "",
    response_model=TaskListResponseDTO,
    dependencies=[Depends(search_rate_limit)],
)
async def list_tasks(
    user_id: CurrentUserId,
    use_cases: UseCasesDep,
    completed: Optional[bool] = Query(None, description="Filter by completion"),
    priority: Optional[str] = Query(None, description="Filter by priority (low, medium, high)"),
    category_id: Optional[int] = Query(None, alias="categoryId", description="Filter by category"),
    due_date_from: Optional[date] = Query(None, alias="dueDateFrom", description="Due on or after"),
    due_date_to: Optional[date] = Query(None, alias="dueDateTo", description="Due on or before"),
    search: Optional[str] = Query(None, description="Text in title or description"),
    order_by: str = Query("createdAt", alias="orderBy", description="title, priority, dueDate or createdAt"),
    order_direction: str = Query("desc", alias="orderDirection", description="asc or desc"),
    page: int = Query(1, description="Page number, starting at 1"),
    limit: int = Query(10, description="Items per page (1-100)"),
):
    """
    List the authenticated user's tasks.

    Filters are combined; results are ordered by a single field and paginated.
    """
    request = ListTasksRequestDTO(
        completed=completed,
        priority=priority,
        category_id=category_id,
        due_date_from=due_date_from,
        due_date_to=due_date_to,
        search=search,
        order_by=order_by,
        order_direction=order_direction,
        page=page,
        limit=limit,
    )
    task_page = await use_cases.get_tasks_by_user.execute(user_id, request)
    return TaskListResponseDTO.from_page(task_page)


@router.get("/{task_id}", response_model=TaskResponseDTO)
async def get_task(task_id: int, user_id: CurrentUserId, use_cases: UseCasesDep):
    """
    Get a specific task by ID.
    """
    task = await use_cases.get_task_by_id.execute(user_id, task_id)
    return TaskResponseDTO.from_domain(task)


@router.put(
    "/{task_id}",
    response_model=TaskResponseDTO,
    dependencies=[Depends(create_rate_limit)],
)
async def update_task(
    task_id: int,
    request: UpdateTaskRequestDTO,
    user_id: CurrentUserId,
    use_cases: UseCasesDep,
):
    """
    Update a task. Only the fields sent are changed.

    - **tagIds**: Replaces the task's tags when present
    - **description**, **dueDate**, **categoryId**: null clears the value
    """
    task = await use_cases.update_task.execute(user_id, task_id, request)
    return TaskResponseDTO.from_domain(task)


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    dependencies=[Depends(create_rate_limit)],
)
async def delete_task(task_id: int, user_id: CurrentUserId, use_cases: UseCasesDep):
    """
    Delete a task.
    """
    await use_cases.delete_task.execute(user_id, task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{task_id}/complete",
    response_model=TaskResponseDTO,
    dependencies=[Depends(create_rate_limit)],
)
async def complete_task(task_id: int, user_id: CurrentUserId, use_cases: UseCasesDep):
    """
    Mark a task as completed. Completing an already completed task succeeds.
    """
    task = await use_cases.complete_task.execute(user_id, task_id)
    return TaskResponseDTO.from_domain(task)
