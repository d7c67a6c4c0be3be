"""
FastAPI 전용 데이터베이스 연결 관리

FastAPI의 dependency injection 시스템을 위한 데이터베이스 세션을 제공합니다.
"""

import logging
from typing import Generator

from sqlalchemy.orm import Session

from .connection import create_db_session, test_db_connection

logger = logging.getLogger(__name__)


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI 의존성 주입용 데이터베이스 세션

    FastAPI 엔드포인트에서 Depends(get_db)로 사용됩니다.
    자동으로 세션을 생성하고 요청 완료 후 정리합니다.
    """
    db = create_db_session()
    try:
        yield db
    except Exception as e:
        logger.error(f"FastAPI database session error: {e}")
        db.rollback()
        raise
    finally:
        db.close()


def check_database_connection() -> bool:
    """FastAPI 헬스체크용 데이터베이스 연결 확인"""
    return test_db_connection()
