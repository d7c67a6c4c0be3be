"""
채용공고 코어 오퍼레이션

생성, 수정, 소프트 삭제, 단건 조회, 목록 조회, 통계를 하나의 서비스로 묶습니다.
각 호출은 게이트웨이에 대한 독립된 작업 단위이며, 서비스는 요청 사이에 상태를 갖지 않습니다.
검증은 항상 저장보다 먼저 수행되고, PersistenceError는 재시도 없이 그대로 전파됩니다.
"""

from datetime import datetime
from typing import Any, Callable, Dict, Optional

from ..components.expiration import compute_expiration
from ..components.query_engine import DEFAULT_LIMIT, DEFAULT_PAGE, build_filter, paginate
from ..components.statistics import compute_stats
from ..components.validator import validate_draft
from ..database.gateway import JobPostingGateway
from ..exceptions import NotFoundError, PersistenceError
from ..models.job_posting import (
    JobPosting,
    JobPostingSummary,
    JobStats,
    PostingPage,
    PostingStatus,
)
from ..utils.timeutils import utc_now

RESOURCE_NAME = "Job"

# 수정 요청으로 바꿀 수 없는 필드
SYSTEM_FIELDS = frozenset({"id", "expiration_date", "created_at", "updated_at"})


class JobPostingService:
    """채용공고 라이프사이클 서비스"""

    def __init__(
        self,
        gateway: JobPostingGateway,
        clock: Callable[[], datetime] = utc_now,
        exclude_expired: bool = False
    ):
        """
        Args:
            gateway: 저장소 게이트웨이
            clock: 현재 시각(naive UTC)을 돌려주는 함수
            exclude_expired: True면 목록 조회에서 만료일이 지난 공고를 제외
        """
        self.gateway = gateway
        self.clock = clock
        self.exclude_expired = exclude_expired

    def create_posting(self, fields: Any) -> JobPostingSummary:
        """
        채용공고 생성

        검증 → 만료일 계산 → 저장 순서로 진행합니다.

        Raises:
            ValidationFailed: 입력 검증 실패
            PersistenceError: 저장소 오류
        """
        draft = validate_draft(fields)

        now = self.clock()
        record = draft.model_dump()
        if record.get("status") is None:
            record["status"] = PostingStatus.ACTIVE.value
        # 만료일은 createdAt과 같은 시각을 기준으로 계산
        record["created_at"] = now
        record["updated_at"] = now
        record["expiration_date"] = compute_expiration(draft.auto_delete_in_days, now)

        posting_id = self.gateway.insert(record)
        posting = self.gateway.find_by_id(posting_id)
        if posting is None:
            raise PersistenceError(
                f"Stored posting {posting_id} could not be read back",
                operation="creating job"
            )

        return JobPostingSummary(
            id=posting.id,
            job_header=posting.job_header,
            job_role_name=posting.job_role_name,
            recruiter_company=posting.recruiter_company,
            created_at=posting.created_at,
        )

    def update_posting(self, posting_id: str, fields: Any) -> JobPosting:
        """
        채용공고 수정

        전체 입력을 다시 검증한 뒤 호출자가 보낸 필드만 갱신합니다.
        만료일은 autoDeleteInDays가 바뀌어도 다시 계산하지 않습니다.

        Raises:
            ValidationFailed: 입력 검증 실패 (존재 여부 확인보다 먼저)
            NotFoundError: 해당 공고 없음
            PersistenceError: 저장소 오류
        """
        draft = validate_draft(fields)

        changes: Dict[str, Any] = {
            key: value
            for key, value in draft.model_dump(exclude_unset=True).items()
            if key not in SYSTEM_FIELDS
        }
        if changes.get("status", PostingStatus.ACTIVE) is None:
            del changes["status"]

        updated = self.gateway.update_by_id(posting_id, changes)
        if updated is None:
            raise NotFoundError(RESOURCE_NAME, posting_id)
        return updated

    def soft_delete_posting(self, posting_id: str) -> Dict[str, Any]:
        """
        채용공고 소프트 삭제 (status를 inactive로 변경)

        공고는 목록에서 사라지지만 단건 조회로는 계속 확인할 수 있습니다.
        """
        updated = self.gateway.update_by_id(
            posting_id, {"status": PostingStatus.INACTIVE.value}
        )
        if updated is None:
            raise NotFoundError(RESOURCE_NAME, posting_id)
        return {"id": updated.id, "status": updated.status}

    def get_posting(self, posting_id: str) -> JobPosting:
        """연락처를 포함한 채용공고 단건 조회"""
        posting = self.gateway.find_by_id(posting_id)
        if posting is None:
            raise NotFoundError(RESOURCE_NAME, posting_id)
        return posting

    def list_postings(
        self,
        job_type: Optional[str] = None,
        visa_type: Optional[str] = None,
        job_location_state: Optional[str] = None,
        search: Optional[str] = None,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_LIMIT
    ) -> PostingPage:
        """활성 공고 목록 조회 (연락처 제외, 최신순)"""
        filters = build_filter(
            job_type=job_type,
            visa_type=visa_type,
            job_location_state=job_location_state,
            search=search,
            expires_after=self.clock() if self.exclude_expired else None,
        )
        return paginate(self.gateway, filters, page, limit)

    def get_stats(self) -> JobStats:
        """활성 공고 통계"""
        return compute_stats(self.gateway)
