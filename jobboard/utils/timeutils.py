"""
시간 유틸리티

저장소와 코어가 같은 기준 시각(UTC, tz 정보 없는 datetime)을 쓰도록 맞춥니다.
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """현재 UTC 시각 (naive)"""
    return datetime.now(timezone.utc).replace(tzinfo=None)
