"""
API 요청 스키마

채용공고 생성/수정 본문은 느슨한 JSON 객체로 받습니다.
필드 검증은 라우터가 아니라 validator 컴포넌트가 한 번에 수행하므로
여기서는 본문이 JSON 객체인지만 확인합니다.
"""

from typing import Any, Annotated, Dict

from fastapi import Body


JOB_POSTING_EXAMPLE: Dict[str, Any] = {
    "recruiterName": "Jane Doe",
    "recruiterEmail": "jane.doe@acme.com",
    "recruiterPhone": "555-0100",
    "sharePhoneNumber": False,
    "recruiterCompany": "Acme Corp",
    "jobHeader": "Senior Backend Engineer",
    "jobDescription": "Build and operate our hiring platform APIs.",
    "jobRoleName": "Backend Engineer",
    "jobPrimaryTechnology": "Python",
    "jobSecondaryTechnology": "PostgreSQL",
    "jobLocationCity": "Austin",
    "jobLocationState": "TX",
    "jobType": "Full-time",
    "jobPayRatePerHour": 75,
    "jobContractLength": "Permanent",
    "workLocation": {"remote": True, "hybrid": False, "onsite": False},
    "visaType": "No Sponsorship",
    "autoDeleteInDays": "30 days",
}


JobPostingPayload = Annotated[
    Dict[str, Any],
    Body(
        description="채용공고 필드 (camelCase)",
        examples=[JOB_POSTING_EXAMPLE],
    ),
]
