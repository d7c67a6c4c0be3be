"""
FastAPI 의존성

요청마다 세션 하나와 그 세션에 묶인 서비스 인스턴스를 만듭니다.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from config.settings import get_settings
from ..database.fastapi_db import get_db
from ..database.repositories import JobPostingRepository
from ..services.job_posting_service import JobPostingService


def get_job_posting_service(db: Session = Depends(get_db)) -> JobPostingService:
    """요청 단위 채용공고 서비스"""
    settings = get_settings()
    return JobPostingService(
        JobPostingRepository(db),
        exclude_expired=settings.expiration.exclude_expired_from_listing,
    )
