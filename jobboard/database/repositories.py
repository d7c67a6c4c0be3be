"""
데이터 액세스 리포지토리
채용공고 저장, 조회, 검색 기능 (JobPostingGateway의 SQLAlchemy 구현)
"""

from abc import ABC
from typing import Any, Dict, List, NoReturn, Optional, Sequence

from sqlalchemy import or_
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from .gateway import JobPostingGateway
from .models import JobPosting as JobPostingDB, convert_orm_to_dict, to_columns
from ..exceptions import PersistenceError
from ..models.job_posting import JobPosting, PostingFilter, SortSpec
from ..utils.logging import get_logger
from ..utils.timeutils import utc_now

logger = get_logger(__name__)

# 검색어가 부분 일치로 비교되는 컬럼들
SEARCH_COLUMNS = (
    JobPostingDB.job_header,
    JobPostingDB.job_role_name,
    JobPostingDB.recruiter_company,
    JobPostingDB.job_primary_technology,
)

# 생성 후 바뀌지 않는 컬럼들
IMMUTABLE_COLUMNS = frozenset({"id", "created_at"})


class BaseRepository(ABC):
    """기본 리포지토리 추상 클래스"""

    def __init__(self, session: Session):
        self.session = session

    def _handle_database_error(self, operation: str, error: Exception) -> NoReturn:
        """데이터베이스 오류 처리"""
        logger.error(f"{operation} 실패", error=str(error))
        self.session.rollback()
        raise PersistenceError(
            f"{operation} failed: {error}",
            operation=operation,
            cause=error
        ) from error


def _column(name: str):
    if name not in JobPostingDB.__table__.columns:
        raise ValueError(f"Unknown job posting column: {name}")
    return getattr(JobPostingDB, name)


def build_conditions(predicate: PostingFilter) -> list:
    """PostingFilter를 SQLAlchemy 조건식 목록으로 변환"""
    conditions = [JobPostingDB.status == predicate.status]

    if predicate.job_type:
        conditions.append(JobPostingDB.job_type == predicate.job_type)

    if predicate.visa_type:
        conditions.append(JobPostingDB.visa_type == predicate.visa_type)

    if predicate.job_location_state:
        conditions.append(JobPostingDB.job_location_state == predicate.job_location_state)

    if predicate.search:
        # 검색어는 패턴이 아닌 문자열 그대로 비교 (%, _ 이스케이프)
        conditions.append(or_(*(
            column.icontains(predicate.search, autoescape=True)
            for column in SEARCH_COLUMNS
        )))

    if predicate.expires_after is not None:
        conditions.append(or_(
            JobPostingDB.expiration_date.is_(None),
            JobPostingDB.expiration_date > predicate.expires_after
        ))

    return conditions


class JobPostingRepository(BaseRepository, JobPostingGateway):
    """채용공고 리포지토리"""

    @staticmethod
    def _to_posting(job_posting: Optional[JobPostingDB]) -> Optional[JobPosting]:
        if job_posting is None:
            return None
        return JobPosting.model_validate(convert_orm_to_dict(job_posting))

    def insert(self, record: Dict[str, Any]) -> str:
        """채용공고 생성"""
        try:
            job_posting = JobPostingDB(**to_columns(record))
            self.session.add(job_posting)
            self.session.commit()
            logger.info("채용공고 생성", posting_id=job_posting.id)
            return job_posting.id
        except SQLAlchemyError as e:
            self._handle_database_error("creating job", e)

    def find_by_id(self, posting_id: str) -> Optional[JobPosting]:
        """ID로 채용공고 조회"""
        try:
            return self._to_posting(self.session.get(JobPostingDB, posting_id))
        except SQLAlchemyError as e:
            self._handle_database_error("fetching job", e)

    def update_by_id(self, posting_id: str, fields: Dict[str, Any]) -> Optional[JobPosting]:
        """채용공고 부분 업데이트"""
        try:
            job_posting = self.session.get(JobPostingDB, posting_id)
            if not job_posting:
                return None

            for key, value in to_columns(fields).items():
                if key in IMMUTABLE_COLUMNS:
                    continue
                _column(key)
                setattr(job_posting, key, value)

            job_posting.updated_at = utc_now()
            self.session.commit()
            logger.info("채용공고 업데이트", posting_id=posting_id, fields=sorted(fields))
            return self._to_posting(job_posting)
        except SQLAlchemyError as e:
            self._handle_database_error("updating job", e)

    def find(
        self,
        predicate: PostingFilter,
        sort: SortSpec,
        skip: int,
        limit: int
    ) -> List[JobPosting]:
        """조건 검색 (정렬, 페이징 적용)"""
        column = _column(sort.field)
        order = column.desc() if sort.descending else column.asc()
        try:
            results = self.session.query(JobPostingDB).filter(
                *build_conditions(predicate)
            ).order_by(order).offset(skip).limit(limit).all()
            return [self._to_posting(item) for item in results]
        except SQLAlchemyError as e:
            self._handle_database_error("fetching jobs", e)

    def count(self, predicate: PostingFilter) -> int:
        """조건에 맞는 공고 수"""
        try:
            return self.session.query(JobPostingDB).filter(
                *build_conditions(predicate)
            ).count()
        except SQLAlchemyError as e:
            self._handle_database_error("counting jobs", e)

    def aggregate(
        self,
        predicate: PostingFilter,
        projection: Sequence[str]
    ) -> List[Dict[str, Any]]:
        """지정 컬럼만 생성 순(오래된 것부터)으로 추출"""
        columns = [_column(name) for name in projection]
        try:
            rows = self.session.query(*columns).filter(
                *build_conditions(predicate)
            ).order_by(JobPostingDB.created_at.asc()).all()
            return [row._asdict() for row in rows]
        except SQLAlchemyError as e:
            self._handle_database_error("fetching statistics", e)
