import pytest
from pydantic import ValidationError

from shared.application.dtos.base_dto import PaginatedDTO, PaginationMetaDTO
from shared.domain.value_objects.pagination import calculate_pagination
from shared.presentation.schemas.pagination import PaginationQuery


def test_defaults_when_query_is_empty():
    query = PaginationQuery()

    assert query.page == 1
    assert query.limit == 20
    assert query.sort_order == "desc"
    assert query.sort_by is None
    assert query.search is None


def test_coerces_query_string_values():
    """Valores da query string chegam como texto"""
    query = PaginationQuery.model_validate(
        {"page": "3", "limit": "50", "sortBy": "createdAt", "sortOrder": "asc"}
    )

    assert query.page == 3
    assert query.limit == 50
    assert query.sort_by == "createdAt"
    assert query.sort_order == "asc"


def test_accepts_snake_case_names():
    query = PaginationQuery(page=2, limit=10, sort_by="title")
    assert query.sort_by == "title"


@pytest.mark.parametrize("params", [
    {"page": "0"},
    {"page": "abc"},
    {"limit": "0"},
    {"limit": "101"},
    {"sortOrder": "random"},
])
def test_invalid_values_are_rejected(params):
    with pytest.raises(ValidationError):
        PaginationQuery.model_validate(params)


def test_blank_search_becomes_none():
    query = PaginationQuery.model_validate({"search": "   "})
    assert query.search is None


def test_to_page_request():
    request = PaginationQuery.model_validate({"page": "2", "limit": "15"}).to_page_request()

    assert request.offset == 15
    assert request.take == 15


def test_pagination_meta_dto_serializes_camel_case():
    dto = PaginationMetaDTO.from_meta(calculate_pagination(2, 10, 25))

    assert dto.model_dump(by_alias=True) == {
        "page": 2,
        "limit": 10,
        "total": 25,
        "totalPages": 3,
        "hasNext": True,
        "hasPrev": True,
    }


def test_paginated_dto_from_page():
    dto = PaginatedDTO[str].from_page(["a", "b"], page=1, limit=2, total=5)

    assert list(dto.items) == ["a", "b"]
    assert dto.pagination.total_pages == 3
    assert dto.pagination.has_next is True
