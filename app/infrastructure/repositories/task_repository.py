"""
Task repository implementation using SQLAlchemy.
Includes the filtered, ordered and paginated task listing.
"""

from typing import Optional, List, Sequence

from sqlalchemy import Select, select, or_, case, asc, desc
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.models.task import Task, TaskPriority, PRIORITY_RANKS
from app.domain.repositories.task_repository import (
    TaskRepository as TaskRepositoryInterface,
    TaskFilter,
    TaskPage,
    TaskOrderField,
    SortDirection,
)
from app.domain.models.base import EntityNotFoundError
from app.infrastructure.db.models import TaskModel, TagModel
from app.infrastructure.mappers.task_mapper import TaskMapper
from app.infrastructure.pagination import OffsetPagination

LIKE_ESCAPE = "\\"


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so the term is matched literally."""
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )


priority_rank = case(
    *[(TaskModel.priority == priority.value, rank) for priority, rank in PRIORITY_RANKS.items()],
    else_=PRIORITY_RANKS[TaskPriority.MEDIUM],
)


class SQLAlchemyTaskRepository(TaskRepositoryInterface):
    """SQLAlchemy implementation of task repository."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.mapper = TaskMapper()
        self.model = TaskModel
        self.paginator = OffsetPagination()

    async def save(self, task: Task) -> Task:
        """Insert the task row and its tag links in one commit."""
        model = self.mapper.domain_to_model(task)
        model.tags = await self._load_tag_models(task.tag_ids)
        self.session.add(model)
        await self.session.commit()
        return self.mapper.model_to_domain(model)

    async def update(self, task: Task) -> Task:
        model = await self.session.get(TaskModel, task.id)
        if not model:
            raise EntityNotFoundError("Task", task.id)

        self.mapper.update_model(model, task)
        model.tags = await self._load_tag_models(task.tag_ids)
        await self.session.commit()
        return self.mapper.model_to_domain(model)

    async def delete(self, task_id: int) -> bool:
        model = await self.session.get(TaskModel, task_id)
        if not model:
            return False

        await self.session.delete(model)
        await self.session.commit()
        return True

    async def find_by_id(self, task_id: int) -> Optional[Task]:
        model = await self.session.get(TaskModel, task_id)
        if not model:
            return None
        return self.mapper.model_to_domain(model)

    async def find_with_filters(self, user_id: int, criteria: TaskFilter) -> TaskPage:
        statement = self._apply_ordering(self._filtered_statement(user_id, criteria), criteria)
        models, metadata = await self.paginator.paginate(
            self.session, statement, page=criteria.page, page_size=criteria.limit
        )
        return TaskPage(
            items=[self.mapper.model_to_domain(model) for model in models],
            total=metadata.total_items,
            page=metadata.page,
            limit=metadata.page_size,
        )

    def _filtered_statement(self, user_id: int, criteria: TaskFilter) -> Select:
        statement = select(TaskModel).where(TaskModel.user_id == user_id)

        if criteria.completed is not None:
            statement = statement.where(TaskModel.completed == criteria.completed)
        if criteria.priority is not None:
            statement = statement.where(TaskModel.priority == TaskPriority(criteria.priority).value)
        if criteria.category_id is not None:
            statement = statement.where(TaskModel.category_id == criteria.category_id)
        if criteria.due_date_from is not None:
            statement = statement.where(TaskModel.due_date >= criteria.due_date_from)
        if criteria.due_date_to is not None:
            statement = statement.where(TaskModel.due_date <= criteria.due_date_to)

        search = (criteria.search or "").strip()
        if search:
            pattern = f"%{escape_like(search)}%"
            statement = statement.where(
                or_(
                    TaskModel.title.ilike(pattern, escape=LIKE_ESCAPE),
                    TaskModel.description.ilike(pattern, escape=LIKE_ESCAPE),
                )
            )

        return statement

    def _apply_ordering(self, statement: Select, criteria: TaskFilter) -> Select:
        direction = asc if SortDirection(criteria.order_direction) == SortDirection.ASC else desc
        order_by = TaskOrderField(criteria.order_by)

        if order_by == TaskOrderField.TITLE:
            statement = statement.order_by(direction(TaskModel.title))
        elif order_by == TaskOrderField.PRIORITY:
            statement = statement.order_by(direction(priority_rank))
        elif order_by == TaskOrderField.DUE_DATE:
            # Undated tasks go last in both directions
            statement = statement.order_by(
                TaskModel.due_date.is_(None), direction(TaskModel.due_date)
            )
        else:
            statement = statement.order_by(direction(TaskModel.created_at))

        # Stable order across pages for equal sort keys
        return statement.order_by(direction(TaskModel.id))

    async def _load_tag_models(self, tag_ids: Sequence[int]) -> List[TagModel]:
        if not tag_ids:
            return []
        result = await self.session.execute(
            select(TagModel)
            .where(TagModel.id.in_(set(tag_ids)))
            .order_by(TagModel.name)
        )
        return list(result.scalars().all())
