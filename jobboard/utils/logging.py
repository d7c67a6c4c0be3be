"""
잡보드 시스템 구조화 로깅 모듈

이 모듈은 structlog를 기반으로 한 구조화된 로깅 시스템을 제공합니다.
개발, 스테이징, 운영 환경에 따른 로깅 설정과 커스텀 로거들을 포함합니다.
채용 담당자 연락처처럼 목록에서 가려지는 필드는 로그에도 남기지 않습니다.
"""

import sys
import logging
from typing import Dict, Any, Optional
from datetime import datetime, timezone
from pathlib import Path

import structlog
from structlog.typing import FilteringBoundLogger, Processor

from config.settings import get_settings


SENSITIVE_KEYS = {
    "password", "token", "api_key", "secret",
    "recruiteremail", "recruiter_email",
    "recruiterphone", "recruiter_phone",
}


class JobBoardLogFormatter:
    """
    잡보드 시스템 전용 로그 포맷터

    구조화된 로그 메시지에 시스템 특화 필드들을 추가하고
    민감한 값을 가립니다.
    """

    @staticmethod
    def add_timestamp(
        logger: FilteringBoundLogger,
        method_name: str,
        event_dict: Dict[str, Any]
    ) -> Dict[str, Any]:
        """타임스탬프 추가"""
        event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
        return event_dict

    @staticmethod
    def add_service_info(
        logger: FilteringBoundLogger,
        method_name: str,
        event_dict: Dict[str, Any]
    ) -> Dict[str, Any]:
        """서비스 정보 추가"""
        event_dict.setdefault("service", "job-board-api")
        return event_dict

    @staticmethod
    def filter_sensitive_data(
        logger: FilteringBoundLogger,
        method_name: str,
        event_dict: Dict[str, Any]
    ) -> Dict[str, Any]:
        """민감한 데이터 필터링"""

        def _filter_dict(data: Dict[str, Any]) -> Dict[str, Any]:
            filtered = {}
            for key, value in data.items():
                if str(key).lower() in SENSITIVE_KEYS:
                    filtered[key] = "***REDACTED***"
                elif isinstance(value, dict):
                    filtered[key] = _filter_dict(value)
                else:
                    filtered[key] = value
            return filtered

        return _filter_dict(event_dict)


def setup_logging(
    level: str = "INFO",
    environment: str = "development",
    log_file: Optional[str] = None,
    json_output: bool = False
) -> FilteringBoundLogger:
    """
    로깅 시스템 초기 설정

    Args:
        level: 로그 레벨 (DEBUG, INFO, WARNING, ERROR)
        environment: 실행 환경 (development, staging, production)
        log_file: 로그 파일 경로 (None이면 콘솔만 출력)
        json_output: 개발 환경에서도 JSON으로 출력할지 여부

    Returns:
        설정된 structlog 로거
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    processors: list[Processor] = [
        JobBoardLogFormatter.add_timestamp,
        JobBoardLogFormatter.add_service_info,
        structlog.contextvars.merge_contextvars,
        JobBoardLogFormatter.filter_sensitive_data,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
    ]

    if environment in ("production", "staging") or json_output:
        processors.extend([
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer()
        ])
    else:  # development
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        logging.getLogger().addHandler(file_handler)

    return structlog.get_logger()


def get_logger(name: str = __name__) -> FilteringBoundLogger:
    """
    named 로거 반환

    Args:
        name: 로거 이름

    Returns:
        structlog 로거 인스턴스
    """
    return structlog.get_logger(name)


def set_log_context(**kwargs) -> None:
    """
    로그 컨텍스트 설정

    contextvars에 바인딩되므로 동시에 처리되는 요청끼리 값이 섞이지 않습니다.
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    """로그 컨텍스트 초기화"""
    structlog.contextvars.clear_contextvars()


def log_performance(
    operation: str,
    start_time: datetime,
    end_time: Optional[datetime] = None,
    **additional_data
) -> None:
    """
    성능 로깅 유틸리티

    Args:
        operation: 작업명
        start_time: 시작 시간
        end_time: 종료 시간 (None이면 현재 시간)
        **additional_data: 추가 로깅 데이터
    """
    if end_time is None:
        end_time = datetime.now(start_time.tzinfo)

    duration = (end_time - start_time).total_seconds()

    get_logger("performance").info(
        "성능 메트릭",
        operation=operation,
        duration_seconds=duration,
        **additional_data
    )


def configure_logging_from_settings() -> FilteringBoundLogger:
    """config.settings의 LoggingSettings로 로깅을 구성"""
    settings = get_settings()
    return setup_logging(
        level=settings.logging.level,
        environment=settings.environment,
        log_file=settings.logging.file_path,
        json_output=settings.logging.format == "json"
    )


# 기본 로거 인스턴스 (모듈 로드시 자동 설정)
logger = configure_logging_from_settings()
