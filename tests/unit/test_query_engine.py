"""
목록 조회/필터 엔진 테스트

게이트웨이는 MagicMock으로 대체하여 조건 생성과 페이지 계산만 확인합니다.
"""

from datetime import datetime
from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from jobboard.components.query_engine import (
    build_filter,
    list_active,
    page_count,
    paginate,
    to_list_item,
)
from jobboard.database.gateway import JobPostingGateway
from jobboard.models.job_posting import CREATED_AT_DESC, PostingFilter

from tests.conftest import build_posting


@pytest.fixture
def gateway():
    mock_gateway = MagicMock(spec=JobPostingGateway)
    mock_gateway.find.return_value = [build_posting(id="a"), build_posting(id="b")]
    mock_gateway.count.return_value = 25
    return mock_gateway


class TestBuildFilter:
    """조회 조건 생성 테스트 클래스"""

    def test_defaults_to_active_only(self):
        filters = build_filter()

        assert filters.status == "active"
        assert filters.job_type is None
        assert filters.search is None
        assert filters.expires_after is None

    def test_blank_values_are_not_filters(self):
        filters = build_filter(job_type="", visa_type="  ", job_location_state=None, search="")

        assert filters == PostingFilter()

    def test_supplied_values_are_kept(self):
        cutoff = datetime(2024, 3, 1)
        filters = build_filter(
            job_type="Contract",
            visa_type="H1B",
            job_location_state="CA",
            search="java",
            expires_after=cutoff,
        )

        assert filters.job_type == "Contract"
        assert filters.visa_type == "H1B"
        assert filters.job_location_state == "CA"
        assert filters.search == "java"
        assert filters.expires_after == cutoff

    def test_filter_is_immutable(self):
        filters = build_filter(search="java")

        with pytest.raises(ValidationError):
            filters.search = "python"


class TestListActive:
    """목록 조회 테스트 클래스"""

    def test_skip_and_limit(self, gateway):
        filters = build_filter()

        items, total = list_active(gateway, filters, page=3, limit=10)

        gateway.find.assert_called_once_with(filters, CREATED_AT_DESC, 20, 10)
        gateway.count.assert_called_once_with(filters)
        assert [item.id for item in items] == ["a", "b"]
        assert total == 25

    @pytest.mark.parametrize("page, limit", [(0, 10), (1, 0), (-1, 5)])
    def test_rejects_non_positive_paging(self, gateway, page, limit):
        with pytest.raises(ValueError):
            list_active(gateway, build_filter(), page=page, limit=limit)
        gateway.find.assert_not_called()

    def test_paginate(self, gateway):
        result = paginate(gateway, build_filter(), page=2, limit=10)

        assert result.pagination.page == 2
        assert result.pagination.limit == 10
        assert result.pagination.total == 25
        assert result.pagination.pages == 3
        assert len(result.jobs) == 2

    @pytest.mark.parametrize("total, limit, pages", [(0, 10, 0), (10, 10, 1), (11, 10, 2), (25, 10, 3)])
    def test_page_count(self, total, limit, pages):
        assert page_count(total, limit) == pages


class TestRedaction:
    """연락처 제거 테스트 클래스"""

    def test_list_item_has_no_contact_fields(self):
        item = to_list_item(build_posting(id="abc"))
        dumped = item.model_dump(by_alias=True)

        assert "recruiterEmail" not in dumped
        assert "recruiterPhone" not in dumped
        assert dumped["id"] == "abc"
        assert dumped["_id"] == "abc"
        assert dumped["recruiterCompany"] == "Acme Corp"
