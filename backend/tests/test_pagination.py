from tat_api.core.config import settings
from tat_api.core.pagination import PageParams, build_pagination, parse_page_params

def test_defaults_when_missing():
    params = parse_page_params(None, None, default_limit=10, max_limit=100)
    assert params.page == 1
    assert params.limit == 10
    assert params.skip == 0

def test_defaults_when_not_numeric_or_not_positive():
    params = parse_page_params("abc", "0", default_limit=10, max_limit=100)
    assert (params.page, params.limit) == (1, 10)
    params = parse_page_params("-2", "x", default_limit=10, max_limit=100)
    assert (params.page, params.limit) == (1, 10)

def test_skip_is_page_offset():
    params = parse_page_params("3", "20", default_limit=10, max_limit=100)
    assert params.skip == 40

def test_limit_is_capped():
    params = parse_page_params("1", "5000", default_limit=10, max_limit=100)
    assert params.limit == 100

def test_total_pages_is_ceiling():
    params = PageParams(page=2, limit=10)
    assert build_pagination(params, 25) == {
        "currentPage": 2,
        "totalPages": 3,
        "totalItems": 25,
        "itemsPerPage": 10,
    }
    assert build_pagination(params, 20)["totalPages"] == 2
    assert build_pagination(params, 0)["totalPages"] == 0

def test_page_params_default_limit_follows_settings(monkeypatch):
    monkeypatch.setattr(settings, "DEFAULT_PAGE_LIMIT", 25)
    params = PageParams()
    assert (params.page, params.limit) == (1, 25)
