"""
목록 조회/필터 엔진

호출자의 필터, 검색어, 페이지 파라미터를 불변 PostingFilter로 만들고
활성 공고를 createdAt 내림차순으로 잘라 돌려줍니다.
목록 결과에는 채용 담당자 연락처가 포함되지 않습니다.
"""

import math
from datetime import datetime
from typing import List, Optional, Tuple

from ..database.gateway import JobPostingGateway
from ..models.job_posting import (
    CREATED_AT_DESC,
    REDACTED_FIELDS,
    JobPosting,
    JobPostingListItem,
    Pagination,
    PostingFilter,
    PostingPage,
    PostingStatus,
)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


def _supplied(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def build_filter(
    job_type: Optional[str] = None,
    visa_type: Optional[str] = None,
    job_location_state: Optional[str] = None,
    search: Optional[str] = None,
    expires_after: Optional[datetime] = None
) -> PostingFilter:
    """
    목록 조회 조건 생성

    빈 문자열로 전달된 조건은 지정되지 않은 것으로 봅니다.
    expires_after를 주면 그 시각 이전에 만료된 공고는 제외됩니다.
    """
    return PostingFilter(
        status=PostingStatus.ACTIVE,
        job_type=_supplied(job_type),
        visa_type=_supplied(visa_type),
        job_location_state=_supplied(job_location_state),
        search=_supplied(search),
        expires_after=expires_after,
    )


def to_list_item(posting: JobPosting) -> JobPostingListItem:
    """연락처 필드를 제거하고 식별자를 id/_id 두 이름으로 노출"""
    data = posting.model_dump(exclude=set(REDACTED_FIELDS))
    data["storage_key"] = posting.id
    return JobPostingListItem.model_validate(data)


def page_count(total: int, limit: int) -> int:
    return math.ceil(total / limit) if limit else 0


def list_active(
    gateway: JobPostingGateway,
    filters: PostingFilter,
    page: int = DEFAULT_PAGE,
    limit: int = DEFAULT_LIMIT
) -> Tuple[List[JobPostingListItem], int]:
    """
    조건에 맞는 활성 공고 한 페이지와 전체 개수를 반환

    Args:
        gateway: 저장소 게이트웨이
        filters: build_filter로 만든 조회 조건
        page: 1부터 시작하는 페이지 번호
        limit: 페이지 크기

    Returns:
        (목록 항목들, 조건에 맞는 전체 공고 수)
    """
    if page < 1:
        raise ValueError("page must be >= 1")
    if limit < 1:
        raise ValueError("limit must be >= 1")

    skip = (page - 1) * limit
    postings = gateway.find(filters, CREATED_AT_DESC, skip, limit)
    total = gateway.count(filters)
    return [to_list_item(posting) for posting in postings], total


def paginate(
    gateway: JobPostingGateway,
    filters: PostingFilter,
    page: int = DEFAULT_PAGE,
    limit: int = DEFAULT_LIMIT
) -> PostingPage:
    """list_active 결과에 페이지네이션 정보를 붙여 반환"""
    items, total = list_active(gateway, filters, page, limit)
    return PostingPage(
        jobs=items,
        pagination=Pagination(
            page=page,
            limit=limit,
            total=total,
            pages=page_count(total, limit),
        ),
    )
