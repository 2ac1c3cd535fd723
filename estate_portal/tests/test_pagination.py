from __future__ import annotations

import pytest

from estate_portal.interfaces.http.pagination import ELLIPSIS, build_pagination, visible_pages


def test_single_page_renders_nothing() -> None:
    assert build_pagination(1, 1, 4, 12) is None
    assert build_pagination(1, 0, 0, 12) is None


def test_middle_page_window() -> None:
    controls = build_pagination(5, 10, 120, 12)

    assert controls is not None
    assert controls.pages == [1, ELLIPSIS, 4, 5, 6, ELLIPSIS, 10]
    assert controls.has_previous is True
    assert controls.has_next is True


@pytest.mark.parametrize(
    ("current", "total", "expected"),
    [
        (1, 5, [1, 2, 3, 4, 5]),
        (1, 10, [1, 2, 3, ELLIPSIS, 10]),
        (2, 10, [1, 2, 3, ELLIPSIS, 10]),
        (4, 10, [1, ELLIPSIS, 3, 4, 5, ELLIPSIS, 10]),
        (8, 10, [1, ELLIPSIS, 8, 9, 10]),
        (10, 10, [1, ELLIPSIS, 8, 9, 10]),
        (3, 6, [1, 2, 3, ELLIPSIS, 6]),
    ],
)
def test_visible_pages(current: int, total: int, expected: list) -> None:
    assert visible_pages(current, total) == expected


def test_item_range_on_last_page() -> None:
    controls = build_pagination(3, 3, 27, 12)

    assert controls is not None
    assert controls.start_item == 25
    assert controls.end_item == 27
    assert controls.has_next is False
    assert controls.to_dict()["endItem"] == 27


def test_to_dict_is_camel_case() -> None:
    controls = build_pagination(1, 2, 20, 10)

    assert controls is not None
    assert controls.to_dict() == {
        "currentPage": 1,
        "totalPages": 2,
        "totalResults": 20,
        "pages": [1, 2],
        "hasPrevious": False,
        "hasNext": True,
        "startItem": 1,
        "endItem": 10,
    }
