"""
잡보드 시스템 커스텀 예외 클래스들

이 모듈은 채용공고 생성, 수정, 조회 과정에서 발생할 수 있는 예외 상황들을
처리하기 위한 구조화된 예외 클래스들을 정의합니다.
"""

from typing import Optional, Dict, Any, List
from enum import Enum


class ErrorSeverity(str, Enum):
    """에러 심각도 레벨"""
    LOW = "낮음"
    MEDIUM = "중간"
    HIGH = "높음"
    CRITICAL = "치명적"


class ErrorCategory(str, Enum):
    """에러 카테고리"""
    VALIDATION = "검증"
    DATABASE = "데이터베이스"
    BUSINESS_LOGIC = "비즈니스로직"
    SYSTEM = "시스템"


class BaseJobBoardError(Exception):
    """
    잡보드 시스템 기본 예외 클래스

    모든 커스텀 예외는 이 클래스를 상속받아 구현됩니다.
    에러 추적과 디버깅을 위한 공통 기능을 제공합니다.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        category: ErrorCategory = ErrorCategory.SYSTEM,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self._generate_error_code()
        self.severity = severity
        self.category = category
        self.details = details or {}
        self.suggestions = suggestions or []

    def _generate_error_code(self) -> str:
        """에러 코드 자동 생성"""
        class_name = self.__class__.__name__
        return f"{class_name.upper()}_001"

    def to_dict(self) -> Dict[str, Any]:
        """예외 정보를 딕셔너리로 변환"""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "severity": self.severity.value,
            "category": self.category.value,
            "details": self.details,
            "suggestions": self.suggestions
        }

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.category.value} 오류: {self.message}"


class ValidationFailed(BaseJobBoardError):
    """
    채용공고 입력 검증 실패 예외

    수집된 모든 필드 오류 메시지를 함께 전달합니다. 첫 번째 오류만 담는 일은 없습니다.
    """

    def __init__(self, messages: List[str], **kwargs):
        super().__init__(
            "Validation failed",
            category=ErrorCategory.VALIDATION,
            severity=ErrorSeverity.LOW,
            **kwargs
        )
        self.messages = list(messages)
        self.details["validation_errors"] = self.messages


class NotFoundError(BaseJobBoardError):
    """요청한 리소스가 존재하지 않을 때 발생하는 예외"""

    def __init__(self, resource: str, resource_id: str, **kwargs):
        super().__init__(
            f"{resource} not found",
            category=ErrorCategory.BUSINESS_LOGIC,
            severity=ErrorSeverity.LOW,
            **kwargs
        )
        self.resource = resource
        self.resource_id = resource_id
        self.details.update({
            "resource": resource,
            "resource_id": resource_id
        })


class PersistenceError(BaseJobBoardError):
    """
    영속성 계층 예외

    DB 연결, 쿼리 실행, 트랜잭션 등 저장소 게이트웨이에서 발생한 오류를 감쌉니다.
    코어는 이 예외를 재시도하거나 삼키지 않고 그대로 전파합니다.
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        cause: Optional[BaseException] = None,
        **kwargs
    ):
        kwargs.setdefault("severity", ErrorSeverity.HIGH)
        super().__init__(
            message,
            category=ErrorCategory.DATABASE,
            **kwargs
        )
        self.operation = operation
        self.cause = cause

        if operation:
            self.details["operation"] = operation
        if cause is not None:
            self.details["cause"] = repr(cause)


class DatabaseConnectionError(PersistenceError):
    """데이터베이스 연결 실패 예외"""

    def __init__(self, database_url: str, cause: Optional[BaseException] = None, **kwargs):
        super().__init__(
            f"데이터베이스 연결 실패: {database_url}",
            operation="connect",
            cause=cause,
            severity=ErrorSeverity.CRITICAL,
            **kwargs
        )
        self.suggestions.extend([
            "데이터베이스 서버가 실행 중인지 확인하세요",
            "DATABASE_URL 환경변수를 확인하세요"
        ])


def create_error_response(error: BaseJobBoardError) -> Dict[str, Any]:
    """
    예외 객체로부터 클라이언트에 돌려줄 에러 응답 본문을 생성합니다.

    Args:
        error: 기본 예외 클래스의 인스턴스

    Returns:
        {"message": ...} 형태의 응답 딕셔너리. 검증 실패는 "errors",
        영속성 오류는 "error" 키를 추가로 가집니다.
    """
    if isinstance(error, ValidationFailed):
        return {"message": error.message, "errors": error.messages}
    if isinstance(error, NotFoundError):
        return {"message": error.message}
    if isinstance(error, PersistenceError):
        return {
            "message": f"Error {error.operation or 'accessing storage'}",
            "error": error.message
        }
    return {"message": error.message}


def format_pydantic_errors(errors: List[Dict[str, Any]]) -> List[str]:
    """
    Pydantic 에러 목록을 "필드명: 메시지" 문자열 목록으로 변환합니다.

    field_validator에서 던진 ValueError는 "Value error, " 접두어 없이 원문 메시지를 씁니다.
    """
    messages = []
    for error in errors:
        field = ".".join(str(loc) for loc in error["loc"])
        ctx = error.get("ctx") or {}
        if error.get("type") == "value_error" and "error" in ctx:
            msg = str(ctx["error"])
        else:
            msg = error["msg"]
        messages.append(f"{field}: {msg}" if field else msg)
    return messages

