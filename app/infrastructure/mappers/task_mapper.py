"""
Task mapper for converting between domain entities and database models.
"""

from app.domain.models.task import Task, TaskPriority
from app.infrastructure.db.models import TaskModel
from app.infrastructure.mappers.tag_mapper import TagMapper


class TaskMapper:
    """
    Maps between Task domain entity and TaskModel database model.

    Tag associations are not mapped onto the row here: the repository
    resolves tag rows inside its own session and assigns them.
    """

    def __init__(self):
        self.tag_mapper = TagMapper()

    def domain_to_model(self, task: Task) -> TaskModel:
        """Convert Task domain entity to TaskModel."""
        return TaskModel(
            id=task.id,
            title=task.title,
            description=task.description,
            completed=task.completed,
            priority=TaskPriority(task.priority).value,
            due_date=task.due_date,
            user_id=task.user_id,
            category_id=task.category_id,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )

    def model_to_domain(self, model: TaskModel) -> Task:
        """Convert TaskModel to Task domain entity."""
        return Task(
            id=model.id,
            title=model.title,
            description=model.description,
            completed=bool(model.completed),
            priority=TaskPriority(model.priority) if model.priority else TaskPriority.MEDIUM,
            due_date=model.due_date,
            user_id=model.user_id,
            category_id=model.category_id,
            tags=[self.tag_mapper.model_to_domain(tag) for tag in model.tags],
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def update_model(self, model: TaskModel, task: Task) -> None:
        """Copy mutable fields from the entity onto an existing row."""
        model.title = task.title
        model.description = task.description
        model.completed = task.completed
        model.priority = TaskPriority(task.priority).value
        model.due_date = task.due_date
        model.category_id = task.category_id
        model.updated_at = task.updated_at
