"""
채용공고 입력 검증기

외부에서 들어온 느슨한 레코드를 JobPostingDraft로 바꾸는 유일한 경계입니다.
모든 위반 사항을 모은 뒤 한 번에 돌려주며, 첫 번째 오류에서 멈추지 않습니다.
"""

from typing import Any, List, Mapping, Optional, Tuple

from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from ..exceptions import ValidationFailed, format_pydantic_errors
from ..models.job_posting import JobPostingDraft


# (외부 필드명, 누락 시 메시지) - 메시지 순서도 응답 계약의 일부
REQUIRED_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("recruiterName", "Recruiter name is required"),
    ("recruiterEmail", "Recruiter email is required"),
    ("recruiterCompany", "Recruiter company is required"),
    ("jobHeader", "Job header is required"),
    ("jobDescription", "Job description is required"),
    ("jobRoleName", "Job role name is required"),
    ("jobPrimaryTechnology", "Primary technology is required"),
    ("autoDeleteInDays", "Auto delete option is required"),
)

WORK_LOCATION_MESSAGE = "At least one work location option must be selected"
WORK_LOCATION_KEYS = ("remote", "hybrid", "onsite")

_flag_adapter = TypeAdapter(bool)


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return value is False


def _is_selected(value: Any) -> bool:
    try:
        return _flag_adapter.validate_python(value)
    except PydanticValidationError:
        return False


def _has_work_location(candidate: Mapping[str, Any]) -> bool:
    location = candidate.get("workLocation")
    if not isinstance(location, Mapping):
        return False
    return any(_is_selected(location.get(key)) for key in WORK_LOCATION_KEYS)


def _collect(candidate: Any) -> Tuple[List[str], Optional[JobPostingDraft]]:
    data = candidate if isinstance(candidate, Mapping) else {}
    messages: List[str] = []
    missing = set()

    for field, message in REQUIRED_FIELDS:
        if _is_blank(data.get(field)):
            messages.append(message)
            missing.add(field)

    if not _has_work_location(data):
        messages.append(WORK_LOCATION_MESSAGE)

    draft = None
    try:
        draft = JobPostingDraft.model_validate(dict(data))
    except PydanticValidationError as exc:
        # 이미 누락으로 보고된 필드는 다시 보고하지 않음
        errors = [
            error for error in exc.errors()
            if not (error["loc"] and error["loc"][0] in missing)
        ]
        messages.extend(format_pydantic_errors(errors))

    return messages, draft


def validate(candidate: Any) -> List[str]:
    """
    채용공고 후보 데이터를 검증합니다.

    Args:
        candidate: camelCase 키를 가진 외부 입력 (부분적이거나 타입이 틀릴 수 있음)

    Returns:
        필드별 오류 메시지 목록. 비어 있으면 유효한 입력입니다.
    """
    messages, _ = _collect(candidate)
    return messages


def validate_draft(candidate: Any) -> JobPostingDraft:
    """
    검증을 통과한 입력을 JobPostingDraft로 반환합니다.

    Raises:
        ValidationFailed: 하나 이상의 위반이 있을 때 (모든 메시지 포함)
    """
    messages, draft = _collect(candidate)
    if messages or draft is None:
        raise ValidationFailed(messages)
    return draft
