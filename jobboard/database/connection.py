"""
데이터베이스 연결 관리
PostgreSQL 연결, 세션 관리, 테이블 생성 등
"""

from contextlib import contextmanager
from typing import Generator, Optional
from sqlalchemy import create_engine, Engine, text
from sqlalchemy.orm import sessionmaker, Session, scoped_session
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError
from sqlalchemy.pool import StaticPool

from .models import Base
from ..exceptions import DatabaseConnectionError, PersistenceError
from ..utils.logging import get_logger
from config.settings import get_settings

logger = get_logger(__name__)


def _masked_url(database_url: str) -> str:
    try:
        return make_url(database_url).render_as_string(hide_password=True)
    except ArgumentError:
        return "<invalid database url>"


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """
    URL에 맞는 엔진 생성

    SQLite 메모리 DB는 모든 세션이 같은 연결을 공유해야 하므로 StaticPool을 사용합니다.
    """
    url = make_url(database_url)

    if url.get_backend_name() == "sqlite":
        options = {"connect_args": {"check_same_thread": False}}
        if url.database in (None, "", ":memory:"):
            options["poolclass"] = StaticPool
        return create_engine(url, echo=echo, **options)

    db_settings = get_settings().database
    return create_engine(
        url,
        pool_size=db_settings.pool_size,
        max_overflow=db_settings.max_overflow,
        pool_timeout=db_settings.pool_timeout,
        pool_pre_ping=True,  # 연결 상태 확인
        pool_recycle=db_settings.pool_recycle,
        echo=echo
    )


class DatabaseManager:
    """데이터베이스 연결 및 세션 관리 클래스"""

    def __init__(self):
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None
        self._scoped_session: Optional[scoped_session] = None

    @property
    def engine(self) -> Optional[Engine]:
        return self._engine

    def initialize(self, database_url: Optional[str] = None) -> None:
        """데이터베이스 초기화"""
        db_settings = get_settings().database
        if database_url is None:
            database_url = db_settings.url

        try:
            self._engine = build_engine(database_url, echo=db_settings.echo)

            # 세션 팩토리 생성
            self._session_factory = sessionmaker(
                bind=self._engine,
                autocommit=False,
                autoflush=False,
                expire_on_commit=False
            )

            # Scoped session 생성 (스레드 안전)
            self._scoped_session = scoped_session(self._session_factory)

            logger.info("데이터베이스 연결이 성공적으로 초기화되었습니다")

        except Exception as e:
            logger.error(f"데이터베이스 초기화 실패: {e}")
            raise DatabaseConnectionError(_masked_url(database_url), cause=e) from e

    def create_tables(self) -> None:
        """모든 테이블 생성"""
        if self._engine is None:
            raise PersistenceError("데이터베이스가 초기화되지 않았습니다", operation="creating tables")

        try:
            Base.metadata.create_all(bind=self._engine)
            logger.info("데이터베이스 테이블이 성공적으로 생성되었습니다")
        except Exception as e:
            logger.error(f"테이블 생성 실패: {e}")
            raise PersistenceError(f"테이블 생성 실패: {e}", operation="creating tables", cause=e) from e

    def drop_tables(self) -> None:
        """모든 테이블 삭제 (개발/테스트용)"""
        if self._engine is None:
            raise PersistenceError("데이터베이스가 초기화되지 않았습니다", operation="dropping tables")

        try:
            Base.metadata.drop_all(bind=self._engine)
            logger.info("데이터베이스 테이블이 성공적으로 삭제되었습니다")
        except Exception as e:
            logger.error(f"테이블 삭제 실패: {e}")
            raise PersistenceError(f"테이블 삭제 실패: {e}", operation="dropping tables", cause=e) from e

    def get_session(self) -> Session:
        """새로운 세션 반환"""
        if self._scoped_session is None:
            raise PersistenceError("데이터베이스가 초기화되지 않았습니다", operation="opening session")

        return self._scoped_session()

    def create_session(self) -> Session:
        """스레드 스코프와 무관한 독립 세션 반환 (요청 단위 사용, 호출자가 닫아야 함)"""
        if self._session_factory is None:
            raise PersistenceError("데이터베이스가 초기화되지 않았습니다", operation="opening session")

        return self._session_factory()

    @contextmanager
    def session_scope(self) -> Generator[Session, None, None]:
        """자동 트랜잭션 관리를 위한 컨텍스트 매니저"""
        session = self.get_session()
        try:
            yield session
            session.commit()
        except Exception as e:
            session.rollback()
            logger.error(f"데이터베이스 트랜잭션 롤백: {e}")
            raise
        finally:
            session.close()

    def test_connection(self) -> bool:
        """데이터베이스 연결 테스트"""
        if self._engine is None:
            return False

        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"데이터베이스 연결 테스트 실패: {e}")
            return False

    def close(self) -> None:
        """연결 종료"""
        if self._scoped_session:
            self._scoped_session.remove()
        if self._engine:
            self._engine.dispose()
        self._engine = None
        self._session_factory = None
        self._scoped_session = None
        logger.info("데이터베이스 연결이 종료되었습니다")


# 전역 데이터베이스 매니저 인스턴스
db_manager = DatabaseManager()


def init_database(database_url: Optional[str] = None) -> None:
    """데이터베이스 초기화 함수"""
    db_manager.initialize(database_url)


def create_tables() -> None:
    """테이블 생성 함수"""
    db_manager.create_tables()


def drop_tables() -> None:
    """테이블 삭제 함수"""
    db_manager.drop_tables()


def get_db_session() -> Session:
    """데이터베이스 세션 조회 함수"""
    return db_manager.get_session()


def create_db_session() -> Session:
    """독립 세션 생성 함수"""
    return db_manager.create_session()


@contextmanager
def db_session_scope() -> Generator[Session, None, None]:
    """트랜잭션 관리 컨텍스트 매니저"""
    with db_manager.session_scope() as session:
        yield session


def test_db_connection() -> bool:
    """데이터베이스 연결 테스트 함수"""
    return db_manager.test_connection()


def close_db_connection() -> None:
    """데이터베이스 연결 종료 함수"""
    db_manager.close()
