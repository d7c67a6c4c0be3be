"""
통계 API 라우터
"""

from fastapi import APIRouter, Depends

from ...models.job_posting import JobStats
from ...services.job_posting_service import JobPostingService
from ..dependencies import get_job_posting_service

router = APIRouter()


@router.get("", response_model=JobStats)
def get_stats(
    service: JobPostingService = Depends(get_job_posting_service)
) -> JobStats:
    """
    활성 공고 통계

    jobTypeStats는 공고별 채용 형태를 등록순으로 나열한 목록입니다.
    """
    return service.get_stats()
