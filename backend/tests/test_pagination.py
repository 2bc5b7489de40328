import pytest
from werkzeug.exceptions import BadRequest

from portfolio.utils.pagination import page_sizes, paginate_slice


def test_twenty_items_at_nine_per_page():
    assert page_sizes(20, 9) == [9, 9, 2]


def test_paginate_slice_reports_meta():
    items = list(range(20))
    window, meta = paginate_slice(items, page=3, per_page=9)

    assert window == [18, 19]
    assert meta == {"page": 3, "per_page": 9, "total": 20, "total_pages": 3}


def test_page_past_the_end_is_empty():
    window, meta = paginate_slice(list(range(5)), page=4, per_page=9)
    assert window == []
    assert meta["total_pages"] == 1


def test_non_positive_page_is_rejected():
    with pytest.raises(BadRequest):
        paginate_slice([1, 2], page=0, per_page=9)
    with pytest.raises(BadRequest):
        paginate_slice([1, 2], page=1, per_page=0)
