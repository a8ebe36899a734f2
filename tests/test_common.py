import pytest

from ettu.models.common import ApiResponse, PaginatedResponse, PaginationParams


def test_api_response_from_data():
    response = ApiResponse.from_data({"id": 7})
    assert response.success is True
    assert response.data == {"id": 7}
    assert response.message is None
    assert response.error is None


def test_api_response_from_data_with_message():
    response = ApiResponse.from_data_with_message([1, 2], "created")
    assert response.success is True
    assert response.data == [1, 2]
    assert response.message == "created"
    assert response.error is None


def test_api_response_from_error():
    response = ApiResponse.from_error("boom")
    assert response.success is False
    assert response.data is None
    assert response.error == "boom"


def test_default_pagination_params():
    params = PaginationParams.default()
    assert params.page == 1
    assert params.limit == 20
    assert params.sort is None
    assert params.order == "desc"


def test_empty_params_fall_back_to_defaults():
    params = PaginationParams()
    assert params.current_page() == 1
    assert params.page_size() == 20
    assert params.sort_field() == "created_at"
    assert params.sort_order() == "desc"
    assert params.offset() == 0


def test_explicit_values_are_used():
    params = PaginationParams(page=4, limit=15, sort="name", order="asc")
    assert params.current_page() == 4
    assert params.page_size() == 15
    assert params.sort_field() == "name"
    assert params.sort_order() == "asc"


def test_limit_is_capped():
    params = PaginationParams(page=2, limit=500)
    assert params.page_size() == 100
    assert params.offset() == 100


def test_offset_grows_by_page_size():
    for page in range(1, 6):
        current = PaginationParams(page=page, limit=7)
        following = PaginationParams(page=page + 1, limit=7)
        assert following.offset() - current.offset() == current.page_size()


def test_offset_rejects_page_zero():
    with pytest.raises(ValueError):
        PaginationParams(page=0).offset()


@pytest.mark.parametrize("total", [0, 1, 19, 20, 21, 99, 100, 101])
@pytest.mark.parametrize("limit", [1, 20, 100])
def test_total_pages_is_ceiling(total, limit):
    response = PaginatedResponse.create([], total, 1, limit)
    assert response.total_pages * limit >= total
    assert response.total_pages == 0 or (response.total_pages - 1) * limit < total


def test_paginated_response_keeps_fields():
    response = PaginatedResponse.create(["a", "b"], 2, 1, 20)
    assert response.items == ["a", "b"]
    assert response.total == 2
    assert response.page == 1
    assert response.limit == 20
    assert response.total_pages == 1


def test_paginated_response_rejects_zero_limit():
    with pytest.raises(ValueError):
        PaginatedResponse.create([], 5, 1, 0)