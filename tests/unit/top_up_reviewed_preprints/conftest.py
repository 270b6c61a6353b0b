"""Shared fixtures for top_up_reviewed_preprints tests."""

from datetime import datetime, timedelta, timezone

import pytest

from common.local_io import LocalCacheStore
from top_up_reviewed_preprints.errors import FetchError
from top_up_reviewed_preprints.models import (
    ReviewedPreprint,
    ReviewedPreprintDetail,
    ReviewedPreprintsPage,
)
from top_up_reviewed_preprints.paths import get_cache_paths

BASE_DATE = datetime(2024, 1, 1, tzinfo=timezone.utc)


def make_preprint(n: int, status_day: int | None = None, fingerprint: str | None = None) -> ReviewedPreprint:
    """Build a preprint with id "rp{n}" whose statusDate is BASE_DATE + status_day days."""
    day = n if status_day is None else status_day
    return ReviewedPreprint(
        id=f"rp{n}",
        title=f"Reviewed preprint {n}",
        published=BASE_DATE + timedelta(days=n),
        status_date=BASE_DATE + timedelta(days=day),
        hash=fingerprint,
    )


class FakeClient:
    """In-memory stand-in for ReviewedPreprintsClient over an ordered remote list."""

    def __init__(self, remote: list[ReviewedPreprint], failing_ids=(), failing_pages=()):
        self.remote = remote
        self.failing_ids = set(failing_ids)
        self.failing_pages = set(failing_pages)
        self.page_calls: list[tuple[int, int]] = []
        self.detail_calls: list[str] = []

    def get_page(self, page: int, page_size: int) -> ReviewedPreprintsPage:
        self.page_calls.append((page, page_size))
        if page in self.failing_pages:
            raise FetchError(f"page {page}", RuntimeError("boom"))
        start = (page - 1) * page_size
        items = [
            ReviewedPreprint(
                id=p.id,
                title=p.title,
                published=p.published,
                status_date=p.status_date,
                hash=f"hash-{p.id}",
            )
            for p in self.remote[start:start + page_size]
        ]
        return ReviewedPreprintsPage(total=len(self.remote), items=items)

    def get_detail(self, msid: str) -> ReviewedPreprintDetail:
        self.detail_calls.append(msid)
        if msid in self.failing_ids:
            raise FetchError(f"detail {msid}", RuntimeError("boom"))
        p = next(p for p in self.remote if p.id == msid)
        return ReviewedPreprintDetail(
            id=p.id,
            title=p.title,
            published=p.published,
            status_date=p.status_date,
        )


@pytest.fixture
def store() -> LocalCacheStore:
    return LocalCacheStore()


@pytest.fixture
def paths(tmp_path):
    return get_cache_paths(tmp_path / ".cached")


@pytest.fixture
def cache_dirs(paths):
    paths.detail_dir.mkdir(parents=True)
    return paths
