"""
채용공고 입력 검증기 테스트

필수 필드, 근무 형태, 필드 제약 위반이 모두 수집되는지 확인합니다.
"""

import logging

import pytest

from jobboard.components.validator import (
    REQUIRED_FIELDS,
    WORK_LOCATION_MESSAGE,
    validate,
    validate_draft,
)
from jobboard.exceptions import ValidationFailed
from jobboard.models.job_posting import JobPostingDraft

from tests.conftest import build_payload

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


class TestRequiredFields:
    """필수 필드 검증 테스트 클래스"""

    def test_valid_payload_has_no_errors(self):
        assert validate(build_payload()) == []

    def test_collects_every_violation(self):
        """이름, 이메일, 근무 형태가 모두 빠지면 세 가지 모두 보고"""
        payload = build_payload(
            recruiterName="",
            recruiterEmail=None,
            workLocation={"remote": False, "hybrid": False, "onsite": False},
        )

        errors = validate(payload)
        logger.info(f"검증 오류: {errors}")

        assert errors == [
            "Recruiter name is required",
            "Recruiter email is required",
            WORK_LOCATION_MESSAGE,
        ]

    def test_empty_candidate_reports_all_required_fields_in_order(self):
        errors = validate({})

        expected = [message for _, message in REQUIRED_FIELDS] + [WORK_LOCATION_MESSAGE]
        assert errors == expected

    def test_non_mapping_candidate_is_treated_as_empty(self):
        assert len(validate(None)) == len(REQUIRED_FIELDS) + 1

    def test_whitespace_only_is_missing(self):
        errors = validate(build_payload(jobHeader="   "))
        assert errors == ["Job header is required"]

    def test_missing_field_is_not_reported_twice(self):
        errors = validate(build_payload(recruiterEmail=""))
        assert errors == ["Recruiter email is required"]


class TestWorkLocation:
    """근무 형태 검증 테스트 클래스"""

    @pytest.mark.parametrize("work_location", [
        {"remote": False, "hybrid": False, "onsite": False},
        {},
        None,
        "remote",
    ])
    def test_no_selection_fails(self, work_location):
        errors = validate(build_payload(workLocation=work_location))
        assert WORK_LOCATION_MESSAGE in errors

    def test_any_single_option_is_enough(self):
        payload = build_payload(workLocation={"onsite": True})
        assert validate(payload) == []

    def test_multiple_options_are_independent(self):
        draft = validate_draft(build_payload(workLocation={"remote": True, "hybrid": True}))
        assert draft.work_location.remote is True
        assert draft.work_location.hybrid is True
        assert draft.work_location.onsite is False


class TestFieldConstraints:
    """필드 제약 검증 테스트 클래스"""

    def test_negative_hourly_rate_is_rejected(self):
        errors = validate(build_payload(jobPayRatePerHour=-5))

        assert len(errors) == 1
        assert errors[0].startswith("jobPayRatePerHour:")

    @pytest.mark.parametrize("field", ["jobPayRatePerHour", "jobPayRateYearly"])
    @pytest.mark.parametrize("value", ["Infinity", "-Infinity", "NaN", "inf"])
    def test_non_finite_rate_is_rejected(self, field, value):
        errors = validate(build_payload(**{field: value}))

        assert errors
        assert all(error.startswith(f"{field}:") for error in errors)

    def test_invalid_email_message(self):
        errors = validate(build_payload(recruiterEmail="not-an-email"))
        assert errors == ["recruiterEmail: Please enter a valid email"]

    def test_email_is_lowercased(self):
        draft = validate_draft(build_payload(recruiterEmail="  Jane.Doe@Acme.COM "))
        assert draft.recruiter_email == "jane.doe@acme.com"

    def test_unknown_enum_value(self):
        errors = validate(build_payload(jobType="Gig"))
        assert len(errors) == 1
        assert errors[0].startswith("jobType:")

    def test_header_length_limit(self):
        errors = validate(build_payload(jobHeader="x" * 201))
        assert len(errors) == 1
        assert errors[0].startswith("jobHeader:")

    def test_blank_optional_enum_is_absent(self):
        draft = validate_draft(build_payload(jobType="", visaType="  "))
        assert draft.job_type is None
        assert draft.visa_type is None

    def test_constraint_and_required_errors_are_combined(self):
        errors = validate(build_payload(recruiterName=None, jobPayRatePerHour=-1))

        assert errors[0] == "Recruiter name is required"
        assert errors[1].startswith("jobPayRatePerHour:")

    def test_invalid_status_is_rejected(self):
        errors = validate(build_payload(status="archived"))
        assert len(errors) == 1
        assert errors[0].startswith("status:")


class TestValidateDraft:
    """validate_draft 테스트 클래스"""

    def test_returns_draft(self):
        draft = validate_draft(build_payload())

        assert isinstance(draft, JobPostingDraft)
        assert draft.recruiter_company == "Acme Corp"
        assert draft.auto_delete_in_days == "30 days"

    def test_raises_with_all_messages(self):
        with pytest.raises(ValidationFailed) as exc_info:
            validate_draft({"recruiterName": "Jane"})

        assert exc_info.value.message == "Validation failed"
        assert len(exc_info.value.messages) == len(REQUIRED_FIELDS)
        assert "Recruiter name is required" not in exc_info.value.messages

    def test_system_fields_are_ignored(self):
        draft = validate_draft(build_payload(
            id="forged",
            expirationDate="2099-01-01T00:00:00",
            createdAt="2000-01-01T00:00:00",
        ))
        dumped = draft.model_dump()

        assert "id" not in dumped
        assert "expiration_date" not in dumped
        assert "created_at" not in dumped
