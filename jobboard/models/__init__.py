"""
잡보드 데이터 모델 패키지

이 패키지는 시스템에서 사용되는 모든 Pydantic 모델들을 포함합니다.
"""

from .job_posting import (
    # 열거형들
    JobType,
    ContractLength,
    VisaType,
    AutoDeleteOption,
    PostingStatus,

    # 모델들
    WorkLocation,
    JobPostingDraft,
    JobPosting,
    JobPostingListItem,
    JobPostingSummary,
    PostingFilter,
    SortSpec,
    Pagination,
    PostingPage,
    JobStats,

    # 상수
    REDACTED_FIELDS,
    CREATED_AT_DESC,
    CREATED_AT_ASC,
)

__all__ = [
    # 열거형들
    "JobType",
    "ContractLength",
    "VisaType",
    "AutoDeleteOption",
    "PostingStatus",

    # 모델들
    "WorkLocation",
    "JobPostingDraft",
    "JobPosting",
    "JobPostingListItem",
    "JobPostingSummary",
    "PostingFilter",
    "SortSpec",
    "Pagination",
    "PostingPage",
    "JobStats",

    # 상수
    "REDACTED_FIELDS",
    "CREATED_AT_DESC",
    "CREATED_AT_ASC",
]
