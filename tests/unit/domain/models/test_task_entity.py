"""
Unit tests for Task domain model.
"""

import pytest
from datetime import datetime

from app.domain.models.base import ValidationError
from app.domain.models.tag import Tag
from app.domain.models.task import Task, TaskPriority


def make_tag(tag_id, name="work", user_id=1):
    return Tag(id=tag_id, name=name, user_id=user_id)


class TestTask:
    """Test cases for Task domain model."""

    def test_create_task_defaults(self):
        """Test a new task starts open with medium priority."""
        task = Task(title="Write report", user_id=1)

        assert task.title == "Write report"
        assert task.completed is False
        assert task.priority == TaskPriority.MEDIUM
        assert task.description is None
        assert task.due_date is None
        assert task.category_id is None
        assert task.tags == []
        assert task.is_new
        assert isinstance(task.created_at, datetime)

    def test_title_is_trimmed(self):
        task = Task(title="  Buy milk  ", user_id=1)

        assert task.title == "Buy milk"

    def test_blank_title_rejected(self):
        """Test that a whitespace-only title is invalid."""
        with pytest.raises(ValidationError) as exc_info:
            Task(title="   ", user_id=1)

        assert exc_info.value.field == "title"

    def test_title_too_long_rejected(self):
        with pytest.raises(ValidationError):
            Task(title="x" * 256, user_id=1)

    def test_priority_from_string(self):
        task = Task(title="Task", user_id=1, priority="high")

        assert task.priority == TaskPriority.HIGH

    def test_invalid_priority_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Task(title="Task", user_id=1, priority="urgent")

        assert exc_info.value.field == "priority"

    def test_priority_rank_order(self):
        assert TaskPriority.LOW.rank < TaskPriority.MEDIUM.rank < TaskPriority.HIGH.rank

    def test_complete_is_idempotent(self):
        """Test completing twice keeps the task completed."""
        task = Task(title="Task", user_id=1)

        task.complete()
        first_update = task.updated_at
        task.complete()

        assert task.completed is True
        assert task.updated_at == first_update

    def test_mark_incomplete(self):
        task = Task(title="Task", user_id=1, completed=True)

        task.mark_incomplete()

        assert task.completed is False

    def test_duplicate_tags_collapsed(self):
        """Test tags are unique by id."""
        task = Task(title="Task", user_id=1, tags=[make_tag(1), make_tag(1), make_tag(2, "home")])

        assert task.tag_ids == [1, 2]

    def test_replace_tags(self):
        task = Task(title="Task", user_id=1, tags=[make_tag(1)])

        task.replace_tags([make_tag(3, "errand"), make_tag(3, "errand")])

        assert task.tag_ids == [3]

    def test_update_details(self):
        task = Task(title="Task", user_id=1)

        task.update_details(title="Renamed", description="Details", priority=TaskPriority.LOW)

        assert task.title == "Renamed"
        assert task.description == "Details"
        assert task.priority == TaskPriority.LOW

    def test_update_details_blank_title(self):
        task = Task(title="Task", user_id=1)

        with pytest.raises(ValidationError):
            task.update_details(title="  ")
        assert task.title == "Task"

    def test_ownership(self):
        task = Task(title="Task", user_id=7)

        assert task.is_owned_by(7)
        assert not task.is_owned_by(8)

    def test_equality_by_id(self):
        assert Task(id=5, title="a", user_id=1) == Task(id=5, title="b", user_id=1)
        assert Task(title="a", user_id=1) != Task(title="a", user_id=1)
