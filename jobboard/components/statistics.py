"""
활성 공고 통계 엔진
"""

from typing import Any, Iterable, List, Optional

from ..database.gateway import JobPostingGateway
from ..models.job_posting import JobStats, PostingFilter, PostingStatus

STATS_PROJECTION = ("job_type", "job_pay_rate_per_hour")


def _as_number(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def average(values: Iterable[Any]) -> Optional[float]:
    """숫자로 바꿀 수 없는 값은 제외한 산술 평균 (대상이 없으면 None)"""
    numbers = [n for n in (_as_number(v) for v in values) if n is not None]
    if not numbers:
        return None
    return sum(numbers) / len(numbers)


def compute_stats(gateway: JobPostingGateway) -> JobStats:
    """
    활성 공고 통계 계산

    job_type_stats는 공고별 job_type 값을 등록 순서대로 나열한 원본 목록입니다.
    활성 공고가 하나도 없으면 {0, [], 0}을 반환합니다.
    """
    rows = gateway.aggregate(
        PostingFilter(status=PostingStatus.ACTIVE),
        STATS_PROJECTION
    )
    if not rows:
        return JobStats(total_jobs=0, job_type_stats=[], avg_hourly_rate=0)

    job_types: List[Optional[str]] = [row.get("job_type") for row in rows]
    return JobStats(
        total_jobs=len(rows),
        job_type_stats=job_types,
        avg_hourly_rate=average(row.get("job_pay_rate_per_hour") for row in rows),
    )
