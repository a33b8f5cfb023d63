"""
Offset pagination utilities for SQLAlchemy select statements.
"""

from typing import List, Any, Optional, Tuple
from dataclasses import dataclass
from math import ceil

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession


@dataclass
class PaginationMetadata:
    """Pagination metadata for responses."""
    page: int
    page_size: int
    total_items: int
    total_pages: int


class OffsetPagination:
    """
    Offset-based pagination.
    Runs a count over the filtered statement and fetches a single page of it.
    Page bounds are checked by the caller.
    """

    def __init__(self, default_page_size: int = 10):
        self.default_page_size = default_page_size

    async def paginate(
        self,
        session: AsyncSession,
        statement: Select,
        page: int = 1,
        page_size: Optional[int] = None,
    ) -> Tuple[List[Any], PaginationMetadata]:
        """
        Paginate a select statement.

        Args:
            session: Session used to run both queries
            statement: Filtered and ordered select of ORM entities
            page: Page number (1-based)
            page_size: Number of items per page

        Returns:
            Tuple of (items, pagination_metadata)
        """
        if page_size is None:
            page_size = self.default_page_size

        # Calculate offset
        offset = (page - 1) * page_size

        # Count over the unordered statement
        count_statement = select(func.count()).select_from(
            statement.order_by(None).subquery()
        )
        total_items = (await session.execute(count_statement)).scalar_one()

        # Get paginated items
        result = await session.execute(statement.offset(offset).limit(page_size))
        items = list(result.scalars().unique().all())

        metadata = PaginationMetadata(
            page=page,
            page_size=page_size,
            total_items=total_items,
            total_pages=ceil(total_items / page_size),
        )

        return items, metadata
