"""
데이터베이스 모델 정의
채용공고 레코드를 위한 SQLAlchemy ORM 모델
"""

import uuid
from datetime import datetime
from typing import Any, Dict, Optional

from sqlalchemy import Boolean, DateTime, Float, Index, String, Text
from sqlalchemy.orm import Mapped, declarative_base, mapped_column

from ..utils.timeutils import utc_now


Base = declarative_base()


def _new_id() -> str:
    return str(uuid.uuid4())


class JobPosting(Base):
    """채용공고 테이블"""
    __tablename__ = "job_postings"

    # 기본 식별자
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id, comment="공고 식별자")

    # 채용 담당자 정보
    recruiter_name: Mapped[str] = mapped_column(String(100), nullable=False, comment="담당자 이름")
    recruiter_email: Mapped[str] = mapped_column(String(254), nullable=False, comment="담당자 이메일 (소문자)")
    recruiter_phone: Mapped[Optional[str]] = mapped_column(String(20), nullable=True, comment="담당자 전화번호")
    share_phone_number: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False, comment="전화번호 공개 여부")
    recruiter_company: Mapped[str] = mapped_column(String(100), nullable=False, comment="회사명")

    # 직무 정보
    job_header: Mapped[str] = mapped_column(String(200), nullable=False, comment="공고 제목")
    job_description: Mapped[str] = mapped_column(Text, nullable=False, comment="직무 설명")
    job_role_name: Mapped[str] = mapped_column(String(100), nullable=False, comment="직무명")
    job_primary_technology: Mapped[str] = mapped_column(String(100), nullable=False, comment="주요 기술")
    job_secondary_technology: Mapped[Optional[str]] = mapped_column(String(100), nullable=True, comment="보조 기술")
    job_location_city: Mapped[Optional[str]] = mapped_column(String(100), nullable=True, comment="근무 도시")
    job_location_state: Mapped[Optional[str]] = mapped_column(String(50), nullable=True, comment="근무 주")
    job_type: Mapped[Optional[str]] = mapped_column(String(20), nullable=True, comment="채용 형태")
    job_pay_rate_per_hour: Mapped[Optional[float]] = mapped_column(Float, nullable=True, comment="시급")
    job_pay_rate_yearly: Mapped[Optional[float]] = mapped_column(Float, nullable=True, comment="연봉")
    job_contract_length: Mapped[Optional[str]] = mapped_column(String(20), nullable=True, comment="계약 기간")
    visa_type: Mapped[Optional[str]] = mapped_column(String(20), nullable=True, comment="비자 유형")
    auto_delete_in_days: Mapped[str] = mapped_column(String(10), nullable=False, comment="보존 기간")

    # 근무 형태 (서로 독립)
    work_location_remote: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False, comment="원격")
    work_location_hybrid: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False, comment="하이브리드")
    work_location_onsite: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False, comment="출근")

    # 시스템 필드
    status: Mapped[str] = mapped_column(String(10), default="active", nullable=False, comment="active/inactive/expired")
    expiration_date: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True, comment="만료 시각 (생성 시 1회 계산)")

    # 메타데이터
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utc_now, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utc_now, onupdate=utc_now, nullable=False)

    __table_args__ = (
        Index("ix_job_postings_type_visa_status", "job_type", "visa_type", "status"),
        Index("ix_job_postings_created_at", "created_at"),
        Index("ix_job_postings_expiration_date", "expiration_date"),
    )

    def __repr__(self):
        return f"<JobPosting(id='{self.id}', header='{self.job_header[:50]}')>"


WORK_LOCATION_COLUMNS = {
    "remote": "work_location_remote",
    "hybrid": "work_location_hybrid",
    "onsite": "work_location_onsite",
}


def to_columns(fields: Dict[str, Any]) -> Dict[str, Any]:
    """도메인 필드(work_location 중첩 포함)를 테이블 컬럼 값으로 펼침"""
    columns = {key: value for key, value in fields.items() if key != "work_location"}
    work_location = fields.get("work_location")
    if work_location is not None:
        for key, column in WORK_LOCATION_COLUMNS.items():
            columns[column] = bool(work_location.get(key, False))
    return columns


def convert_orm_to_dict(orm_obj: JobPosting) -> Optional[Dict[str, Any]]:
    """SQLAlchemy ORM 객체를 도메인 필드 딕셔너리로 변환"""
    if orm_obj is None:
        return None

    result = {}
    for column in orm_obj.__table__.columns:
        if column.name in WORK_LOCATION_COLUMNS.values():
            continue
        result[column.name] = getattr(orm_obj, column.name)

    result["work_location"] = {
        key: getattr(orm_obj, column) for key, column in WORK_LOCATION_COLUMNS.items()
    }
    return result
