"""
Search, tag filtering and pagination shared by the listing endpoints.

Search text is soft-validated: anything too short, too long or without a
single letter or digit is dropped and the listing is returned unfiltered.
Tags are matched as case-insensitive substrings of the stored comma-joined
string, so ``go`` also matches ``golang``; every requested tag must match.
"""
import math
import re
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

SEARCH_MIN_LENGTH = 2
SEARCH_MAX_LENGTH = 200
LIKE_ESCAPE = "\\"
ALNUM_REGEX = re.compile(r"[A-Za-z0-9]")


def normalize_search(search: Optional[str]) -> Optional[str]:
    if search is None:
        return None
    trimmed = search.strip()
    if not SEARCH_MIN_LENGTH <= len(trimmed) <= SEARCH_MAX_LENGTH:
        return None
    if not ALNUM_REGEX.search(trimmed):
        return None
    return trimmed


def contains_pattern(term: str) -> str:
    escaped = (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


def build_filters(search_column, tags_column, search: Optional[str] = None, tags: Optional[Iterable[str]] = None) -> list:
    """WHERE clauses for a listing; an empty list means no filtering."""
    filters = []
    term = normalize_search(search)
    if term is not None:
        filters.append(search_column.ilike(contains_pattern(term), escape=LIKE_ESCAPE))
    for tag in tags or []:
        tag = tag.strip()
        if tag:
            filters.append(tags_column.ilike(contains_pattern(tag), escape=LIKE_ESCAPE))
    return filters


async def fetch_page(
    session: AsyncSession,
    model,
    filters: Sequence[Any],
    order_by: Sequence[Any],
    page: int,
    limit: int,
    options: Sequence[Any] = (),
) -> Tuple[List[Any], int]:
    """One page of rows plus the total count for the same predicate."""
    skip = (page - 1) * limit

    stmt = select(model).where(*filters).order_by(*order_by).offset(skip).limit(limit)
    if options:
        stmt = stmt.options(*options)
    rows = (await session.execute(stmt)).scalars().all()

    count_stmt = select(func.count()).select_from(model).where(*filters)
    total = (await session.execute(count_stmt)).scalar_one()
    return list(rows), total


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit)


def page_response(items: list, total: int, page: int, limit: int) -> dict:
    return {
        "items": items,
        "total": total,
        "page": page,
        "total_pages": total_pages(total, limit),
    }
