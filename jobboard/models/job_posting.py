"""
채용공고 관련 Pydantic 모델들

이 모듈은 잡보드에서 사용되는 핵심 데이터 모델들을 정의합니다.
- JobPostingDraft: 외부에서 들어온 느슨한 입력을 필드 제약과 함께 담는 초안 모델
- JobPosting: 저장된 채용공고 전체 (연락처 포함)
- JobPostingListItem: 목록 조회용 공고 (연락처 제외)
- PostingFilter / SortSpec: 목록 조회 조건을 담는 불변 값
- JobStats: 활성 공고 통계
"""

import re
from datetime import datetime
from enum import Enum
from typing import Optional, List, Annotated

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel


# 중첩 수량자가 없는 이메일 패턴 (EMAIL_MAX_LENGTH와 함께 사용)
EMAIL_PATTERN = re.compile(r"^\w+([.-]\w+)*@\w+([.-]\w+)*(\.\w{2,3})+$", re.ASCII)
EMAIL_MAX_LENGTH = 254


class JobType(str, Enum):
    """채용 형태 열거형"""
    FULL_TIME = "Full-time"
    PART_TIME = "Part-time"
    CONTRACT = "Contract"
    INTERNSHIP = "Internship"
    FREELANCE = "Freelance"


class ContractLength(str, Enum):
    """계약 기간 열거형"""
    ONE_MONTH = "1 month"
    THREE_MONTHS = "3 months"
    SIX_MONTHS = "6 months"
    ONE_YEAR = "1 year"
    TWO_YEARS = "2 years"
    PERMANENT = "Permanent"


class VisaType(str, Enum):
    """비자 유형 열거형"""
    US_CITIZEN = "US Citizen"
    GREEN_CARD = "Green Card"
    H1B = "H1B"
    L1 = "L1"
    OPT_CPT = "OPT/CPT"
    TN = "TN"
    NO_SPONSORSHIP = "No Sponsorship"


class AutoDeleteOption(str, Enum):
    """공고 보존 기간 열거형"""
    DAYS_30 = "30 days"
    DAYS_60 = "60 days"
    DAYS_90 = "90 days"
    NEVER = "Never"


class PostingStatus(str, Enum):
    """공고 상태 열거형"""
    ACTIVE = "active"
    INACTIVE = "inactive"
    EXPIRED = "expired"


class CamelModel(BaseModel):
    """JSON에서는 camelCase, 파이썬에서는 snake_case로 다루는 기본 모델"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        use_enum_values = True


class WorkLocation(CamelModel):
    """근무 형태 (원격/하이브리드/출근은 서로 독립)"""
    remote: bool = Field(False, description="원격 근무 가능")
    hybrid: bool = Field(False, description="하이브리드 근무 가능")
    onsite: bool = Field(False, description="사무실 출근")

    def has_selection(self) -> bool:
        return self.remote or self.hybrid or self.onsite


OptionalText100 = Optional[Annotated[str, Field(max_length=100)]]


class JobPostingDraft(CamelModel):
    """
    채용공고 초안 모델

    외부 호출자가 보낸 부분적이고 타입이 보장되지 않은 입력을 담습니다.
    모든 필드가 선택이며, 길이/범위/열거형 제약만 검사합니다.
    필수 필드 누락과 근무 형태 선택 여부는 validator 컴포넌트가 확인합니다.
    """

    # === 채용 담당자 정보 ===
    recruiter_name: OptionalText100 = Field(None, description="담당자 이름")
    recruiter_email: Optional[str] = Field(None, description="담당자 이메일")
    recruiter_phone: Optional[Annotated[str, Field(max_length=20)]] = Field(None, description="담당자 전화번호")
    share_phone_number: bool = Field(False, description="전화번호 공개 여부")
    recruiter_company: OptionalText100 = Field(None, description="회사명")

    # === 직무 정보 ===
    job_header: Optional[Annotated[str, Field(max_length=200)]] = Field(None, description="공고 제목")
    job_description: Optional[Annotated[str, Field(max_length=5000)]] = Field(None, description="직무 설명")
    job_role_name: OptionalText100 = Field(None, description="직무명")
    job_primary_technology: OptionalText100 = Field(None, description="주요 기술")
    job_secondary_technology: OptionalText100 = Field(None, description="보조 기술")
    job_location_city: OptionalText100 = Field(None, description="근무 도시")
    job_location_state: Optional[Annotated[str, Field(max_length=50)]] = Field(None, description="근무 주")
    job_type: Optional[JobType] = Field(None, description="채용 형태")
    job_pay_rate_per_hour: Optional[Annotated[float, Field(ge=0, allow_inf_nan=False)]] = Field(None, description="시급")
    job_pay_rate_yearly: Optional[Annotated[float, Field(ge=0, allow_inf_nan=False)]] = Field(None, description="연봉")
    job_contract_length: Optional[ContractLength] = Field(None, description="계약 기간")
    work_location: WorkLocation = Field(default_factory=WorkLocation, description="근무 형태")
    visa_type: Optional[VisaType] = Field(None, description="비자 유형")
    auto_delete_in_days: Optional[AutoDeleteOption] = Field(None, description="보존 기간")

    # === 시스템 필드 ===
    status: Optional[PostingStatus] = Field(None, description="공고 상태")

    class Config:
        str_strip_whitespace = True
        extra = "ignore"  # id, expirationDate, createdAt 등은 호출자가 정할 수 없음

    @field_validator(
        "recruiter_phone", "job_secondary_technology", "job_location_city",
        "job_location_state", "job_type", "job_contract_length", "visa_type",
        "job_pay_rate_per_hour", "job_pay_rate_yearly", "status",
        mode="before"
    )
    @classmethod
    def blank_to_none(cls, v):
        """선택 필드의 빈 문자열은 값이 없는 것으로 취급"""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("recruiter_email")
    @classmethod
    def validate_email(cls, v: Optional[str]) -> Optional[str]:
        """이메일 형식 검사 후 소문자로 정규화"""
        if v is None or v == "":
            return None
        v = v.lower()
        if len(v) > EMAIL_MAX_LENGTH or not EMAIL_PATTERN.match(v):
            raise ValueError("Please enter a valid email")
        return v


class JobPostingFields(CamelModel):
    """목록과 상세 조회에 공통으로 노출되는 공고 필드"""
    recruiter_name: str
    share_phone_number: bool = False
    recruiter_company: str
    job_header: str
    job_description: str
    job_role_name: str
    job_primary_technology: str
    job_secondary_technology: Optional[str] = None
    job_location_city: Optional[str] = None
    job_location_state: Optional[str] = None
    job_type: Optional[JobType] = None
    job_pay_rate_per_hour: Optional[float] = None
    job_pay_rate_yearly: Optional[float] = None
    job_contract_length: Optional[ContractLength] = None
    work_location: WorkLocation = Field(default_factory=WorkLocation)
    visa_type: Optional[VisaType] = None
    auto_delete_in_days: AutoDeleteOption
    status: PostingStatus = PostingStatus.ACTIVE
    expiration_date: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class JobPosting(JobPostingFields):
    """저장된 채용공고 전체 (단건 조회 전용, 연락처 포함)"""
    id: str = Field(..., description="공고 식별자")
    recruiter_email: str = Field(..., description="담당자 이메일")
    recruiter_phone: Optional[str] = Field(None, description="담당자 전화번호")


# 목록 조회에서 절대 노출하지 않는 연락처 필드
REDACTED_FIELDS = frozenset({"recruiter_email", "recruiter_phone"})


class JobPostingListItem(JobPostingFields):
    """
    목록 조회용 채용공고

    연락처 필드를 아예 갖지 않으며, 식별자를 id와 _id 두 이름으로 노출합니다.
    """
    id: str = Field(..., description="공고 식별자")
    storage_key: str = Field(..., alias="_id", description="저장소 원본 키 (id와 동일)")


class JobPostingSummary(CamelModel):
    """공고 생성 결과 요약"""
    id: str
    job_header: str
    job_role_name: str
    recruiter_company: str
    created_at: Optional[datetime] = None


class PostingFilter(BaseModel):
    """
    목록 조회 조건 (불변 값)

    호출자 파라미터로 한 번에 만들어지며 이후 수정되지 않습니다.
    expires_after가 주어지면 만료일이 없거나 그 이후인 공고만 대상이 됩니다.
    """
    status: PostingStatus = PostingStatus.ACTIVE
    job_type: Optional[str] = None
    visa_type: Optional[str] = None
    job_location_state: Optional[str] = None
    search: Optional[str] = None
    expires_after: Optional[datetime] = None

    class Config:
        frozen = True
        use_enum_values = True
        validate_default = True


class SortSpec(BaseModel):
    """정렬 조건 (불변 값)"""
    field: str = "created_at"
    descending: bool = True

    class Config:
        frozen = True


CREATED_AT_DESC = SortSpec(field="created_at", descending=True)
CREATED_AT_ASC = SortSpec(field="created_at", descending=False)


class Pagination(BaseModel):
    """페이지네이션 정보"""
    page: int = Field(..., ge=1, description="현재 페이지")
    limit: int = Field(..., ge=1, description="페이지 크기")
    total: int = Field(..., ge=0, description="조건에 맞는 전체 공고 수")
    pages: int = Field(..., ge=0, description="전체 페이지 수")


class PostingPage(BaseModel):
    """목록 조회 결과"""
    jobs: List[JobPostingListItem] = Field(default_factory=list, description="공고 목록")
    pagination: Pagination


class JobStats(CamelModel):
    """
    활성 공고 통계

    job_type_stats는 집계된 히스토그램이 아니라 공고별 job_type 값을
    등록 순서대로 나열한 원본 목록입니다 (값이 없으면 None).
    """
    total_jobs: int = Field(0, ge=0, description="활성 공고 수")
    job_type_stats: List[Optional[str]] = Field(default_factory=list, description="공고별 채용 형태 목록")
    avg_hourly_rate: Optional[float] = Field(0, description="평균 시급")
