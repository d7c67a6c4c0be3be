"""
채용공고 리포지토리 테스트

SQLite 메모리 데이터베이스에서 JobPostingGateway 구현을 확인합니다.
"""

from datetime import datetime, timedelta
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from jobboard.database.repositories import JobPostingRepository
from jobboard.exceptions import PersistenceError
from jobboard.models.job_posting import CREATED_AT_ASC, CREATED_AT_DESC, PostingFilter, SortSpec

from tests.conftest import build_record


class TestInsertAndFind:
    """저장/단건 조회 테스트 클래스"""

    def test_insert_generates_id_and_timestamps(self, repository):
        posting_id = repository.insert(build_record())

        posting = repository.find_by_id(posting_id)

        assert posting.id == posting_id
        assert posting.created_at is not None
        assert posting.updated_at is not None
        assert posting.recruiter_email == "jane.doe@acme.com"
        assert posting.work_location.remote is True
        assert posting.work_location.onsite is False

    def test_ids_are_unique(self, repository):
        first = repository.insert(build_record())
        second = repository.insert(build_record())

        assert first != second

    def test_find_missing(self, repository):
        assert repository.find_by_id("does-not-exist") is None


class TestUpdate:
    """부분 업데이트 테스트 클래스"""

    def test_updates_only_given_fields(self, repository):
        posting_id = repository.insert(build_record(created_at=datetime(2024, 1, 1)))

        updated = repository.update_by_id(posting_id, {
            "job_header": "Staff Engineer",
            "work_location": {"remote": False, "hybrid": True, "onsite": False},
        })

        assert updated.job_header == "Staff Engineer"
        assert updated.work_location.hybrid is True
        assert updated.work_location.remote is False
        assert updated.recruiter_company == "Acme Corp"
        assert updated.created_at == datetime(2024, 1, 1)
        assert updated.updated_at > updated.created_at

    def test_identifier_and_creation_time_are_immutable(self, repository):
        posting_id = repository.insert(build_record(created_at=datetime(2024, 1, 1)))

        updated = repository.update_by_id(posting_id, {
            "id": "forged",
            "created_at": datetime(2000, 1, 1),
        })

        assert updated.id == posting_id
        assert updated.created_at == datetime(2024, 1, 1)

    def test_update_missing(self, repository):
        assert repository.update_by_id("does-not-exist", {"status": "inactive"}) is None


class TestFind:
    """조건 검색 테스트 클래스"""

    def test_sorted_newest_first_with_paging(self, repository, seed_postings):
        seed_postings(5)

        page = repository.find(PostingFilter(), CREATED_AT_DESC, skip=1, limit=2)

        assert [p.job_header for p in page] == ["Job 3", "Job 2"]

    def test_sorted_oldest_first(self, repository, seed_postings):
        seed_postings(3)

        postings = repository.find(PostingFilter(), CREATED_AT_ASC, skip=0, limit=10)

        assert [p.job_header for p in postings] == ["Job 0", "Job 1", "Job 2"]

    def test_unknown_sort_column(self, repository):
        with pytest.raises(ValueError):
            repository.find(PostingFilter(), SortSpec(field="salary"), skip=0, limit=10)

    def test_status_filter(self, repository):
        repository.insert(build_record(status="inactive"))
        active_id = repository.insert(build_record())

        postings = repository.find(PostingFilter(), CREATED_AT_DESC, skip=0, limit=10)

        assert [p.id for p in postings] == [active_id]
        assert repository.count(PostingFilter()) == 1
        assert repository.count(PostingFilter(status="inactive")) == 1

    def test_equality_filters(self, repository):
        repository.insert(build_record(job_type="Contract", visa_type="H1B", job_location_state="CA"))
        repository.insert(build_record(job_type="Contract", visa_type="H1B", job_location_state="TX"))
        repository.insert(build_record(job_type="Full-time", visa_type="H1B", job_location_state="CA"))

        predicate = PostingFilter(job_type="Contract", visa_type="H1B", job_location_state="CA")

        assert repository.count(predicate) == 1

    @pytest.mark.parametrize("term", ["java", "JAVA", "Script", "acme", "frontend", "ENGINEER"])
    def test_search_is_case_insensitive_substring(self, repository, term):
        repository.insert(build_record(
            job_header="Frontend Engineer",
            job_role_name="UI Developer",
            recruiter_company="Acme Corp",
            job_primary_technology="JavaScript",
        ))

        assert repository.count(PostingFilter(search=term)) == 1

    def test_search_treats_wildcards_literally(self, repository):
        repository.insert(build_record(job_header="Engineer"))
        repository.insert(build_record(job_header="100% remote Engineer"))

        assert repository.count(PostingFilter(search="%")) == 1
        assert repository.count(PostingFilter(search="_")) == 0

    def test_expires_after(self, repository):
        cutoff = datetime(2024, 6, 1)
        repository.insert(build_record(job_header="expired", expiration_date=cutoff - timedelta(days=1)))
        repository.insert(build_record(job_header="open", expiration_date=cutoff + timedelta(days=1)))
        repository.insert(build_record(job_header="never", expiration_date=None))

        postings = repository.find(
            PostingFilter(expires_after=cutoff), CREATED_AT_ASC, skip=0, limit=10
        )

        assert sorted(p.job_header for p in postings) == ["never", "open"]


class TestAggregate:
    """통계용 추출 테스트 클래스"""

    def test_projection_oldest_first(self, repository):
        start = datetime(2024, 1, 1)
        repository.insert(build_record(job_type="Contract", created_at=start + timedelta(minutes=2)))
        repository.insert(build_record(job_type=None, job_pay_rate_per_hour=None, created_at=start))
        repository.insert(build_record(job_type="Full-time", created_at=start + timedelta(minutes=1)))
        repository.insert(build_record(job_type="Internship", status="inactive"))

        rows = repository.aggregate(PostingFilter(), ("job_type", "job_pay_rate_per_hour"))

        assert rows == [
            {"job_type": None, "job_pay_rate_per_hour": None},
            {"job_type": "Full-time", "job_pay_rate_per_hour": 75.0},
            {"job_type": "Contract", "job_pay_rate_per_hour": 75.0},
        ]

    def test_unknown_projection(self, repository):
        with pytest.raises(ValueError):
            repository.aggregate(PostingFilter(), ("nope",))


class TestErrorHandling:
    """저장소 오류 처리 테스트 클래스"""

    def test_driver_error_becomes_persistence_error(self):
        session = MagicMock()
        session.commit.side_effect = OperationalError("INSERT", {}, Exception("connection lost"))
        repository = JobPostingRepository(session)

        with pytest.raises(PersistenceError) as exc_info:
            repository.insert(build_record())

        assert exc_info.value.operation == "creating job"
        assert isinstance(exc_info.value.cause, OperationalError)
        session.rollback.assert_called_once()

    def test_read_errors_are_not_swallowed(self):
        session = MagicMock()
        session.get.side_effect = OperationalError("SELECT", {}, Exception("connection lost"))
        repository = JobPostingRepository(session)

        with pytest.raises(PersistenceError) as exc_info:
            repository.find_by_id("abc")

        assert exc_info.value.operation == "fetching job"
