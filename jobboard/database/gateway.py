"""
채용공고 저장소 게이트웨이 계약

코어 컴포넌트(검증기 제외)는 이 인터페이스를 통해서만 저장소에 접근합니다.
식별자와 createdAt/updatedAt은 게이트웨이가 생성하며 (레코드에 created_at이 없을 때),
드라이버 오류는 모두 PersistenceError로 전달되어야 합니다.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence

from ..models.job_posting import JobPosting, PostingFilter, SortSpec


class JobPostingGateway(ABC):
    """채용공고 저장소 추상 인터페이스"""

    @abstractmethod
    def insert(self, record: Dict[str, Any]) -> str:
        """공고 저장 후 새 식별자 반환"""

    @abstractmethod
    def find_by_id(self, posting_id: str) -> Optional[JobPosting]:
        """식별자로 공고 조회 (없으면 None)"""

    @abstractmethod
    def update_by_id(self, posting_id: str, fields: Dict[str, Any]) -> Optional[JobPosting]:
        """주어진 필드만 갱신 후 갱신된 공고 반환 (없으면 None)"""

    @abstractmethod
    def find(
        self,
        predicate: PostingFilter,
        sort: SortSpec,
        skip: int,
        limit: int
    ) -> List[JobPosting]:
        """조건에 맞는 공고를 정렬/건너뛰기/개수 제한하여 조회"""

    @abstractmethod
    def count(self, predicate: PostingFilter) -> int:
        """조건에 맞는 공고 수"""

    @abstractmethod
    def aggregate(
        self,
        predicate: PostingFilter,
        projection: Sequence[str]
    ) -> List[Dict[str, Any]]:
        """조건에 맞는 공고들의 지정 필드만 생성 순으로 추출"""
