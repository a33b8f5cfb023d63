"""
SQLAlchemy models for the database.
Maps domain entities to database tables.
"""

from sqlalchemy import (
    Column, Integer, String, DateTime, Text, Boolean, Date,
    ForeignKey, Index, UniqueConstraint, Table
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.infrastructure.db.database import Base


# Association table for the many-to-many between tasks and tags
task_tags = Table(
    'task_tags',
    Base.metadata,
    Column('task_id', Integer, ForeignKey('tasks.id', ondelete='CASCADE'), primary_key=True),
    Column('tag_id', Integer, ForeignKey('tags.id', ondelete='CASCADE'), primary_key=True),
)


class UserModel(Base):
    """User table."""

    __tablename__ = 'users'

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    name = Column(String(100), nullable=False)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now())

    # Relationships
    tasks = relationship("TaskModel", back_populates="user", passive_deletes=True)
    categories = relationship("CategoryModel", back_populates="user", passive_deletes=True)
    tags = relationship("TagModel", back_populates="user", passive_deletes=True)


class CategoryModel(Base):
    """Category table."""

    __tablename__ = 'categories'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(50), nullable=False)
    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now())

    # Relationships
    user = relationship("UserModel", back_populates="categories")

    # Indexes
    __table_args__ = (
        UniqueConstraint('user_id', 'name', name='unique_category_name_per_user'),
        Index('idx_categories_user', 'user_id'),
    )


class TagModel(Base):
    """Tag table."""

    __tablename__ = 'tags'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(50), nullable=False)
    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now())

    # Relationships
    user = relationship("UserModel", back_populates="tags")

    # Indexes
    __table_args__ = (
        UniqueConstraint('user_id', 'name', name='unique_tag_name_per_user'),
        Index('idx_tags_user', 'user_id'),
    )


class TaskModel(Base):
    """Task table."""

    __tablename__ = 'tasks'

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text)
    completed = Column(Boolean, nullable=False, default=False)
    priority = Column(String(10), nullable=False, default='medium')
    due_date = Column(Date)
    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    category_id = Column(Integer, ForeignKey('categories.id', ondelete='SET NULL'))
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now())

    # Relationships
    user = relationship("UserModel", back_populates="tasks")
    category = relationship("CategoryModel")
    tags = relationship(
        "TagModel",
        secondary=task_tags,
        lazy="selectin",
        order_by="TagModel.name",
    )

    # Indexes
    __table_args__ = (
        Index('idx_tasks_user_completed', 'user_id', 'completed'),
        Index('idx_tasks_user_category', 'user_id', 'category_id'),
        Index('idx_tasks_due_date', 'due_date'),
    )
