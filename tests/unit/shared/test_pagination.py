import math

import pytest

from shared.core.exceptions import InvalidArgumentException
from shared.domain.value_objects.pagination import (
    PageRequest,
    calculate_pagination,
    compute_pagination,
)


def test_first_page_of_three():
    """Primeira página: sem anterior, com próxima"""
    result = compute_pagination(1, 10, 25)

    assert result.skip == 0
    assert result.take == 10
    assert result.meta.to_dict() == {
        "page": 1,
        "limit": 10,
        "total": 25,
        "totalPages": 3,
        "hasNext": True,
        "hasPrev": False,
    }


def test_last_page_has_no_next():
    """Última página: com anterior, sem próxima"""
    result = compute_pagination(3, 10, 25)

    assert result.skip == 20
    assert result.take == 10
    assert result.meta.total_pages == 3
    assert result.meta.has_next is False
    assert result.meta.has_prev is True


def test_zero_limit_raises_invalid_argument():
    """limit = 0 não pode virar divisão por zero"""
    with pytest.raises(InvalidArgumentException) as exc_info:
        compute_pagination(1, 0, 10)

    assert exc_info.value.field == "limit"


@pytest.mark.parametrize("page,limit,total", [(0, 10, 10), (-1, 10, 10), (1, -5, 10), (1, 10, -1)])
def test_out_of_range_input_is_rejected(page, limit, total):
    with pytest.raises(InvalidArgumentException):
        compute_pagination(page, limit, total)


@pytest.mark.parametrize("total", [0, 1, 9, 10, 11, 99, 100, 101, 1000])
@pytest.mark.parametrize("limit", [1, 3, 10, 25, 100])
def test_total_pages_is_ceil_of_total_over_limit(total, limit):
    meta = calculate_pagination(1, limit, total)
    assert meta.total_pages == math.ceil(total / limit)


@pytest.mark.parametrize("page", [1, 2, 5, 50])
def test_has_prev_only_after_first_page(page):
    meta = calculate_pagination(page, 10, 30)
    assert meta.has_prev == (page > 1)


def test_empty_result_set():
    """Sem resultados: zero páginas e nenhuma navegação"""
    meta = calculate_pagination(1, 20, 0)

    assert meta.total_pages == 0
    assert meta.has_next is False
    assert meta.has_prev is False


def test_page_beyond_total_pages():
    meta = calculate_pagination(5, 10, 25)

    assert meta.has_next is False
    assert meta.has_prev is True


class TestPageRequest:
    """Testes do value object PageRequest."""

    def test_defaults(self):
        request = PageRequest()
        assert request.page == 1
        assert request.limit == 20
        assert request.offset == 0

    def test_offset_and_take(self):
        request = PageRequest(page=3, limit=25)
        assert request.offset == 50
        assert request.skip == 50
        assert request.take == 25

    def test_invalid_page(self):
        with pytest.raises(InvalidArgumentException):
            PageRequest(page=0, limit=10)

    def test_invalid_limit(self):
        with pytest.raises(InvalidArgumentException):
            PageRequest(page=1, limit=0)

    def test_paginate_uses_request_values(self):
        result = PageRequest(page=2, limit=10).paginate(total=15)

        assert result.skip == 10
        assert result.meta.total_pages == 2
        assert result.meta.has_next is False
