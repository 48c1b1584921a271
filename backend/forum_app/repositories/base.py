"""
Shared query helpers for repositories.
"""

from typing import Any, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

T = TypeVar("T")


def paginate(query: Select[Any], page: int, page_size: int) -> Select[Any]:
    """
    Apply 1-based page numbering to a query.

    No clamping is done; out-of-range values are passed to the
    database as-is.
    """
    return query.offset((page - 1) * page_size).limit(page_size)


async def count(db: AsyncSession, query: Select[Any]) -> int:
    """Count the rows a query would return, ignoring paging."""
    total = await db.execute(
        select(func.count()).select_from(query.order_by(None).subquery())
    )
    return total.scalar_one()
