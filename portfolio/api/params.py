from typing import Annotated, List, Optional

from fastapi import HTTPException, Query, status

from portfolio.core.config import settings
from portfolio.utils.ids import is_valid_id

PageParam = Annotated[int, Query(ge=1)]
LimitParam = Annotated[int, Query(ge=1, le=settings.MAX_PAGE_SIZE)]
SearchParam = Annotated[Optional[str], Query()]
TagsParam = Annotated[Optional[List[str]], Query()]


def require_valid_id(record_id: str) -> str:
    if not is_valid_id(record_id):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid id")
    return record_id
