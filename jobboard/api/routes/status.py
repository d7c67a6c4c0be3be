"""
상태 및 헬스체크 API 라우터

서비스 안내와 헬스체크 엔드포인트를 제공합니다.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter

from config.settings import get_settings
from ...database.fastapi_db import check_database_connection
from ..schemas.responses import HealthCheckResponse

logger = logging.getLogger(__name__)
router = APIRouter()
settings = get_settings()


@router.get("/", include_in_schema=False)
def root() -> Dict[str, Any]:
    """루트 엔드포인트 (엔드포인트 안내)"""
    return {
        "message": settings.project_name,
        "version": settings.version,
        "endpoints": {
            "jobs": "/api/jobs",
            "stats": "/api/stats",
            "health": "/api/health",
        },
    }


@router.get("/api/health", response_model=HealthCheckResponse)
def health_check() -> HealthCheckResponse:
    """
    헬스체크 엔드포인트

    데이터베이스에 연결할 수 없어도 서비스 자체는 OK를 돌려주고
    database 필드로 연결 상태를 알립니다.
    """
    connected = check_database_connection()
    if not connected:
        logger.warning("Database health check failed")

    return HealthCheckResponse(
        status="OK",
        timestamp=datetime.now(timezone.utc),
        database="Connected" if connected else "Disconnected",
    )
