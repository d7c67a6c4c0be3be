"""
테스트 공통 픽스처

모든 테스트는 SQLite 메모리 데이터베이스를 사용합니다.
설정 객체가 import 시점에 만들어지므로 환경변수를 먼저 지정합니다.
"""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("LOG_LEVEL", "WARNING")

from datetime import datetime, timedelta
from typing import Any, Dict

import pytest
from sqlalchemy.orm import sessionmaker

from jobboard.database.connection import build_engine
from jobboard.database.models import Base
from jobboard.database.repositories import JobPostingRepository
from jobboard.models.job_posting import JobPosting
from jobboard.services.job_posting_service import JobPostingService


def build_payload(**overrides) -> Dict[str, Any]:
    """API로 들어오는 형태(camelCase)의 유효한 채용공고 입력"""
    payload = {
        "recruiterName": "Jane Doe",
        "recruiterEmail": "Jane.Doe@Acme.com",
        "recruiterPhone": "555-0100",
        "sharePhoneNumber": False,
        "recruiterCompany": "Acme Corp",
        "jobHeader": "Senior Backend Engineer",
        "jobDescription": "Build and operate our hiring platform APIs.",
        "jobRoleName": "Backend Engineer",
        "jobPrimaryTechnology": "Python",
        "jobLocationCity": "Austin",
        "jobLocationState": "TX",
        "jobType": "Full-time",
        "jobPayRatePerHour": 75,
        "workLocation": {"remote": True, "hybrid": False, "onsite": False},
        "visaType": "No Sponsorship",
        "autoDeleteInDays": "30 days",
    }
    payload.update(overrides)
    return payload


def build_record(**overrides) -> Dict[str, Any]:
    """게이트웨이에 바로 넣을 수 있는 형태(snake_case)의 공고 레코드"""
    record = {
        "recruiter_name": "Jane Doe",
        "recruiter_email": "jane.doe@acme.com",
        "recruiter_phone": "555-0100",
        "share_phone_number": False,
        "recruiter_company": "Acme Corp",
        "job_header": "Senior Backend Engineer",
        "job_description": "Build and operate our hiring platform APIs.",
        "job_role_name": "Backend Engineer",
        "job_primary_technology": "Python",
        "job_location_state": "TX",
        "job_type": "Full-time",
        "job_pay_rate_per_hour": 75.0,
        "work_location": {"remote": True, "hybrid": False, "onsite": False},
        "visa_type": "No Sponsorship",
        "auto_delete_in_days": "30 days",
        "status": "active",
        "expiration_date": None,
    }
    record.update(overrides)
    return record


def build_posting(**overrides) -> JobPosting:
    """저장된 공고 모델"""
    now = datetime(2024, 1, 1, 12, 0, 0)
    data = build_record(id="posting-1", created_at=now, updated_at=now)
    data.update(overrides)
    return JobPosting.model_validate(data)


@pytest.fixture
def payload_factory():
    return build_payload


@pytest.fixture
def record_factory():
    return build_record


@pytest.fixture
def posting_factory():
    return build_posting


@pytest.fixture
def engine():
    """테이블이 생성된 SQLite 메모리 엔진"""
    engine = build_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    session = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)()
    yield session
    session.close()


@pytest.fixture
def repository(db_session):
    return JobPostingRepository(db_session)


@pytest.fixture
def service(repository):
    return JobPostingService(repository)


@pytest.fixture
def seed_postings(repository):
    """created_at이 1분씩 증가하는 공고 n개를 저장하고 id 목록을 반환"""

    def _seed(count: int, start: datetime = datetime(2024, 1, 1), **overrides):
        ids = []
        for i in range(count):
            record = build_record(
                job_header=f"Job {i}",
                created_at=start + timedelta(minutes=i),
                **overrides
            )
            ids.append(repository.insert(record))
        return ids

    return _seed
