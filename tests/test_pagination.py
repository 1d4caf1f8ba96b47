"""Tests unitaires des paramètres de liste et des métadonnées de pagination."""

from domain.entities.pagination import ListQueryParams, PaginationMetadata


def test_defaults():
    params = ListQueryParams()
    assert params.effective_page() == 1
    assert params.effective_page_size() == 10
    assert params.offset() == 0
    assert params.sort_field() == "created_at"
    assert params.sort_descending() is True


def test_page_size_is_clamped():
    assert ListQueryParams(page_size=500).effective_page_size() == 100
    assert ListQueryParams(page_size=0).effective_page_size() == 1
    assert ListQueryParams(page_size=-3).effective_page_size() == 1


def test_page_is_floored_at_one():
    assert ListQueryParams(page=0).effective_page() == 1
    assert ListQueryParams(page=-7).effective_page() == 1


def test_offset():
    assert ListQueryParams(page=3, page_size=20).offset() == 40


def test_unknown_sort_and_order_fall_back():
    params = ListQueryParams(sort="id; DROP TABLE projects", order="sideways")
    assert params.sort_field() == "created_at"
    assert params.sort_descending() is True


def test_ascending_order():
    params = ListQueryParams(sort="name", order="asc")
    assert params.sort_field() == "name"
    assert params.sort_descending() is False


def test_total_pages():
    assert PaginationMetadata.build(1, 10, 0).total_pages == 1
    assert PaginationMetadata.build(1, 10, 10).total_pages == 1
    assert PaginationMetadata.build(1, 10, 11).total_pages == 2
    assert PaginationMetadata.build(2, 100, 250).total_pages == 3


def test_page_is_capped():
    from domain.entities.pagination import MAX_PAGE

    params = ListQueryParams(page=10**19, page_size=100)
    assert params.effective_page() == MAX_PAGE
    assert params.offset() == (MAX_PAGE - 1) * 100
