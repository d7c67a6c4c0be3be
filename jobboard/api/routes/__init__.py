"""
API 라우터 모듈

FastAPI 라우터들을 정의합니다.
"""

from . import jobs, stats, status

__all__ = ["jobs", "stats", "status"]
