"""
데이터베이스 패키지 초기화
"""

from .connection import (
    init_database,
    create_tables,
    drop_tables,
    close_db_connection,
    db_manager
)

from .gateway import JobPostingGateway

from .models import (
    Base,
    JobPosting,
    convert_orm_to_dict,
)

from .repositories import (
    JobPostingRepository,
)

from .fastapi_db import (
    get_db,
    check_database_connection,
)

__all__ = [
    # Connection
    'init_database',
    'create_tables',
    'drop_tables',
    'close_db_connection',
    'db_manager',

    # Gateway
    'JobPostingGateway',

    # Models
    'Base',
    'JobPosting',
    'convert_orm_to_dict',

    # Repositories
    'JobPostingRepository',

    # FastAPI DB
    'get_db',
    'check_database_connection',
]
