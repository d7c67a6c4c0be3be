"""
채용공고 API 라우터

공고 생성, 수정, 소프트 삭제, 단건 조회, 목록 조회 엔드포인트를 제공합니다.
검증/조회 실패는 전역 예외 핸들러가 응답으로 바꿉니다.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from config.settings import get_settings
from ...models.job_posting import JobPosting, PostingPage
from ...services.job_posting_service import JobPostingService
from ..dependencies import get_job_posting_service
from ..schemas.requests import JobPostingPayload
from ..schemas.responses import (
    ErrorResponse,
    JobCreateResponse,
    JobUpdateResponse,
    MessageResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter()
settings = get_settings()

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Job not found"}}
INVALID = {400: {"model": ErrorResponse, "description": "Validation failed"}}


@router.get("", response_model=PostingPage)
def list_jobs(
    page: int = Query(1, ge=1, description="페이지 번호 (1부터)"),
    limit: int = Query(
        settings.pagination.default_limit,
        ge=1,
        le=settings.pagination.max_limit,
        description="페이지 크기"
    ),
    job_type: Optional[str] = Query(None, alias="jobType", description="채용 형태"),
    visa_type: Optional[str] = Query(None, alias="visaType", description="비자 유형"),
    job_location_state: Optional[str] = Query(None, alias="jobLocationState", description="근무 주"),
    search: Optional[str] = Query(None, description="제목/직무/회사/주요 기술 부분 검색"),
    service: JobPostingService = Depends(get_job_posting_service)
) -> PostingPage:
    """
    활성 채용공고 목록 조회

    최신 등록순으로 정렬되며, 채용 담당자 이메일과 전화번호는 포함되지 않습니다.
    """
    return service.list_postings(
        job_type=job_type,
        visa_type=visa_type,
        job_location_state=job_location_state,
        search=search,
        page=page,
        limit=limit,
    )


@router.get("/{job_id}", response_model=JobPosting, responses=NOT_FOUND)
def get_job(
    job_id: str,
    service: JobPostingService = Depends(get_job_posting_service)
) -> JobPosting:
    """채용공고 단건 조회 (연락처 포함)"""
    return service.get_posting(job_id)


@router.post("", status_code=201, response_model=JobCreateResponse, responses=INVALID)
def create_job(
    payload: JobPostingPayload,
    service: JobPostingService = Depends(get_job_posting_service)
) -> JobCreateResponse:
    """
    채용공고 등록

    모든 검증 오류를 한 번에 돌려주며, 보존 기간에 따라 만료일이 기록됩니다.
    """
    summary = service.create_posting(payload)
    logger.info(f"Job posted: {summary.id}")
    return JobCreateResponse(message="Job posted successfully", job=summary)


@router.put("/{job_id}", response_model=JobUpdateResponse, responses={**INVALID, **NOT_FOUND})
def update_job(
    job_id: str,
    payload: JobPostingPayload,
    service: JobPostingService = Depends(get_job_posting_service)
) -> JobUpdateResponse:
    """
    채용공고 수정

    전체 본문을 다시 검증합니다. 만료일은 바뀌지 않습니다.
    """
    job = service.update_posting(job_id, payload)
    logger.info(f"Job updated: {job_id}")
    return JobUpdateResponse(message="Job updated successfully", job=job)


@router.delete("/{job_id}", response_model=MessageResponse, responses=NOT_FOUND)
def delete_job(
    job_id: str,
    service: JobPostingService = Depends(get_job_posting_service)
) -> MessageResponse:
    """채용공고 삭제 (inactive 상태로 변경)"""
    service.soft_delete_posting(job_id)
    logger.info(f"Job deactivated: {job_id}")
    return MessageResponse(message="Job deleted successfully")
