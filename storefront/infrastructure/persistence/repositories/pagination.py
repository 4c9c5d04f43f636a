"""Sorting and pagination helpers shared by the list repositories."""

from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.domain.entities import Page, QueryOptions

T = TypeVar("T")


def apply_sort(
    stmt: Select[Any],
    options: QueryOptions,
    sortable: Mapping[str, Any],
    default: Any,
) -> Select[Any]:
    """Add ORDER BY clauses from ``options.sort_by``.

    Args:
        stmt: Statement to order.
        options: Query options holding the ``field:asc|desc`` list.
        sortable: Accepted sort field names mapped to columns. Names not in
            the mapping are skipped.
        default: Column ordered by when no accepted field is given.
    """
    clauses = [
        sortable[name].desc() if descending else sortable[name].asc()
        for name, descending in options.sort_fields()
        if name in sortable
    ]
    if not clauses:
        clauses = [default]
    return stmt.order_by(*clauses)


async def paginate(
    session: AsyncSession,
    stmt: Select[Any],
    options: QueryOptions,
    to_domain: Callable[[Any], T],
) -> Page[T]:
    """Run ``stmt`` for one page and count all matching rows.

    Args:
        session: Active session.
        stmt: Filtered and ordered select of a single model.
        options: Page number and size.
        to_domain: Maps a model instance to its domain entity.
    """
    count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
    total = (await session.execute(count_stmt)).scalar_one()

    rows = await session.execute(stmt.offset(options.offset).limit(options.limit))
    return Page(
        results=[to_domain(model) for model in rows.scalars().all()],
        page=options.page,
        limit=options.limit,
        total_results=total,
    )
