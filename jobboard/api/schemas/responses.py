"""
API 응답 스키마

FastAPI 엔드포인트의 응답 스키마들을 정의합니다.
공고 본문은 job_posting.py의 모델을 그대로 사용합니다.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from ...models.job_posting import JobPosting, JobPostingSummary


class MessageResponse(BaseModel):
    """메시지만 담는 응답"""
    message: str = Field(..., description="응답 메시지")


class JobCreateResponse(MessageResponse):
    """채용공고 생성 응답"""
    job: JobPostingSummary = Field(..., description="생성된 공고 요약")

    class Config:
        json_schema_extra = {
            "example": {
                "message": "Job posted successfully",
                "job": {
                    "id": "3f1c2b9e-8d7a-4c1e-9b2f-6a5d4c3b2a10",
                    "jobHeader": "Senior Backend Engineer",
                    "jobRoleName": "Backend Engineer",
                    "recruiterCompany": "Acme Corp",
                    "createdAt": "2024-01-01T00:00:00",
                },
            }
        }


class JobUpdateResponse(MessageResponse):
    """채용공고 수정 응답"""
    job: JobPosting = Field(..., description="수정된 공고")


class ErrorResponse(MessageResponse):
    """에러 응답 스키마"""
    errors: Optional[List[str]] = Field(None, description="검증 오류 목록")
    error: Optional[str] = Field(None, description="저장소 오류 상세")


class HealthCheckResponse(BaseModel):
    """헬스체크 응답"""
    status: str = Field(..., description="서비스 상태")
    timestamp: datetime = Field(..., description="응답 시각 (UTC)")
    database: str = Field(..., description="데이터베이스 연결 상태")

    class Config:
        json_schema_extra = {
            "example": {
                "status": "OK",
                "timestamp": "2024-01-01T00:00:00Z",
                "database": "Connected",
            }
        }
