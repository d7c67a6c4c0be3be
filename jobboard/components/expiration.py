"""
공고 만료일 정책

보존 기간 선택값("30 days" 등)에서 만료 시각을 계산합니다.
공고 생성 시에만 적용되며, 수정 시에는 다시 계산하지 않습니다.
"""

import re
from datetime import datetime, timedelta
from typing import Optional, Union

from ..models.job_posting import AutoDeleteOption

_LEADING_DAYS = re.compile(r"^\s*(\d+)")


def retention_days(auto_delete_in_days: Union[AutoDeleteOption, str]) -> Optional[int]:
    """보존 기간 선택값의 앞쪽 정수(일 수). "Never"면 None"""
    value = AutoDeleteOption(auto_delete_in_days).value
    if value == AutoDeleteOption.NEVER.value:
        return None

    match = _LEADING_DAYS.match(value)
    if match is None:
        raise ValueError(f"Cannot read a day count from {value!r}")
    return int(match.group(1))


def compute_expiration(
    auto_delete_in_days: Union[AutoDeleteOption, str],
    created_at: datetime
) -> Optional[datetime]:
    """
    만료 시각 계산

    Args:
        auto_delete_in_days: 보존 기간 선택값
        created_at: 공고 생성 시각

    Returns:
        created_at + N일, 또는 "Never"인 경우 None
    """
    days = retention_days(auto_delete_in_days)
    if days is None:
        return None
    return created_at + timedelta(days=days)
