# tests/test_pagination.py
import pytest
from pydantic import ValidationError

from libroresenas.core.pagination import PageParams

def test_defaults():
    params = PageParams()
    assert params.page == 1
    assert params.limit == 10
    assert params.offset == 0

@pytest.mark.parametrize("page, limit, offset", [(1, 10, 0), (2, 10, 10), (3, 7, 14)])
def test_offset(page, limit, offset):
    assert PageParams(page=page, limit=limit).offset == offset

@pytest.mark.parametrize("total, limit, pages", [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (25, 5, 5)])
def test_page_count(total, limit, pages):
    assert PageParams(limit=limit).page_count(total) == pages

def test_page_count_does_not_depend_on_page():
    assert PageParams(page=1, limit=3).page_count(10) == PageParams(page=4, limit=3).page_count(10)

@pytest.mark.parametrize("kwargs", [{"page": 0}, {"limit": 0}, {"page": "abc"}])
def test_rejects_invalid(kwargs):
    with pytest.raises(ValidationError):
        PageParams(**kwargs)

@pytest.mark.parametrize("kwargs", [
    {"page": 10**19},
    {"limit": 10**19},
    {"page": 2**62, "limit": 10},
])
def test_rejects_offset_beyond_store_integer(kwargs):
    with pytest.raises(ValidationError):
        PageParams(**kwargs)

def test_accepts_largest_representable_offset():
    params = PageParams(page=2**62, limit=2)
    assert params.offset == 2**63 - 2
