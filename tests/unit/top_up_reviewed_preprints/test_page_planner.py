"""Tests for top_up_reviewed_preprints.page_planner module."""

import pytest

from top_up_reviewed_preprints.page_planner import plan_pages


class TestPlanPages:
    def test_empty_cache_fetches_first_page(self) -> None:
        plan = plan_pages(limit=20, offset=0)
        assert plan.pages == [1]
        assert (plan.slice_start, plan.slice_end) == (0, 20)

    def test_offset_mid_page_fetches_two_pages(self) -> None:
        plan = plan_pages(limit=20, offset=25)
        assert plan.pages == [2, 3]
        assert (plan.slice_start, plan.slice_end) == (5, 25)

    def test_offset_on_page_boundary_fetches_next_page(self) -> None:
        plan = plan_pages(limit=20, offset=20)
        assert plan.pages == [2]
        assert (plan.slice_start, plan.slice_end) == (0, 20)

    def test_offset_smaller_than_limit(self) -> None:
        plan = plan_pages(limit=10, offset=3)
        assert plan.pages == [1, 2]
        assert (plan.slice_start, plan.slice_end) == (3, 13)

    def test_limit_of_one_never_straddles(self) -> None:
        plan = plan_pages(limit=1, offset=7)
        assert plan.pages == [8]
        assert (plan.slice_start, plan.slice_end) == (0, 1)

    def test_page_size_matches_limit(self) -> None:
        assert plan_pages(limit=35, offset=0).page_size == 35

    def test_page_size_capped_at_100(self) -> None:
        assert plan_pages(limit=150, offset=0).page_size == 100

    @pytest.mark.parametrize("limit", [0, -5])
    def test_non_positive_limit_raises(self, limit) -> None:
        with pytest.raises(ValueError):
            plan_pages(limit=limit, offset=0)

    def test_negative_offset_raises(self) -> None:
        with pytest.raises(ValueError):
            plan_pages(limit=20, offset=-1)

    def test_window_starts_right_after_cached_items(self) -> None:
        limit, offset = 7, 23
        remote = list(range(100))
        plan = plan_pages(limit, offset)
        fetched = [x for page in plan.pages for x in remote[(page - 1) * limit:page * limit]]
        assert fetched[plan.slice_start:plan.slice_end] == remote[offset:offset + limit]
