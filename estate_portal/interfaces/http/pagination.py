# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Page-number window for list views."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

ELLIPSIS: Literal["ellipsis"] = "ellipsis"
MAX_VISIBLE_PAGES = 5

PageItem = int | Literal["ellipsis"]


def visible_pages(current_page: int, total_pages: int) -> list[PageItem]:
    if total_pages <= MAX_VISIBLE_PAGES:
        return list(range(1, total_pages + 1))

    pages: list[PageItem] = [1]

    start = max(2, current_page - 1)
    end = min(total_pages - 1, current_page + 1)
    if current_page <= 3:
        start = 2
        end = min(3, total_pages - 1)
    if current_page >= total_pages - 2:
        start = max(total_pages - 2, 2)
        end = total_pages - 1

    if start > 2:
        pages.append(ELLIPSIS)
    pages.extend(range(start, end + 1))
    if end < total_pages - 1:
        pages.append(ELLIPSIS)

    pages.append(total_pages)
    return pages


@dataclass(slots=True, frozen=True)
class PaginationControls:
    current_page: int
    total_pages: int
    total_results: int
    items_per_page: int
    pages: list[PageItem]

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def start_item(self) -> int:
        return (self.current_page - 1) * self.items_per_page + 1

    @property
    def end_item(self) -> int:
        return min(self.current_page * self.items_per_page, self.total_results)

    def to_dict(self) -> dict[str, object]:
        return {
            "currentPage": self.current_page,
            "totalPages": self.total_pages,
            "totalResults": self.total_results,
            "pages": list(self.pages),
            "hasPrevious": self.has_previous,
            "hasNext": self.has_next,
            "startItem": self.start_item,
            "endItem": self.end_item,
        }


def build_pagination(
    current_page: int,
    total_pages: int,
    total_results: int,
    items_per_page: int,
) -> PaginationControls | None:
    """``None`` when there is at most one page."""

    if total_pages <= 1:
        return None
    return PaginationControls(
        current_page=current_page,
        total_pages=total_pages,
        total_results=total_results,
        items_per_page=items_per_page,
        pages=visible_pages(current_page, total_pages),
    )


__all__ = [
    "ELLIPSIS",
    "MAX_VISIBLE_PAGES",
    "PaginationControls",
    "build_pagination",
    "visible_pages",
]
