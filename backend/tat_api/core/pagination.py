# 페이지네이션 헬퍼
# - 쿼리 문자열 page/limit 파싱 (숫자가 아니거나 1 미만이면 기본값)
# - skip 계산, 전체 페이지 수 계산

import math
from typing import Optional

from pydantic import BaseModel, Field

from .config import settings


class PageParams(BaseModel):
    page: int = 1
    limit: int = Field(default_factory=lambda: settings.DEFAULT_PAGE_LIMIT)

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


def _to_positive_int(value: Optional[str], default: int) -> int:
    if value is None:
        return default
    try:
        number = int(str(value).strip())
    except ValueError:
        return default
    return number if number >= 1 else default


def parse_page_params(
    page: Optional[str],
    limit: Optional[str],
    default_limit: int = None,
    max_limit: int = None,
) -> PageParams:
    default_limit = default_limit or settings.DEFAULT_PAGE_LIMIT
    max_limit = max_limit or settings.MAX_PAGE_LIMIT
    return PageParams(
        page=_to_positive_int(page, 1),
        limit=min(_to_positive_int(limit, default_limit), max_limit),
    )


def build_pagination(params: PageParams, total: int) -> dict:
    """클라이언트에 내려주는 페이지네이션 요약입니다. 키 이름은 camelCase."""
    return {
        "currentPage": params.page,
        "totalPages": math.ceil(total / params.limit),
        "totalItems": total,
        "itemsPerPage": params.limit,
    }
