"""Offset-to-page arithmetic for topping up the cache."""

from top_up_reviewed_preprints.client import MAX_PAGE_SIZE
from top_up_reviewed_preprints.models import PagePlan


def plan_pages(limit: int, offset: int = 0) -> PagePlan:
    """Work out which pages hold the `limit` items following the first `offset`.

    Pages are 1-indexed and `limit` items long. When the offset falls part way
    through a page the window straddles two pages, so both are requested and
    the slice is taken over their concatenation.

    Args:
        limit: Number of new items wanted (> 0).
        offset: Number of items already cached (>= 0).

    Returns:
        PagePlan with the page numbers in request order and the slice bounds.

    Raises:
        ValueError: If limit or offset is out of range.
    """
    if limit < 1:
        raise ValueError(f"limit must be positive, got {limit}")
    if offset < 0:
        raise ValueError(f"offset must not be negative, got {offset}")

    page = (offset + limit) // limit if offset > 0 else 1
    remainder = offset % limit

    pages = [page]
    if remainder > 0:
        pages.append(page + 1)

    return PagePlan(
        pages=pages,
        slice_start=remainder,
        slice_end=remainder + limit,
        page_size=min(limit, MAX_PAGE_SIZE),
    )
