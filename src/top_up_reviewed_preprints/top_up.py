"""Fetch the next window of reviewed preprints into the delta file."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

from top_up_reviewed_preprints.codecs import encode_preprints, read_cached_preprints
from top_up_reviewed_preprints.models import ReviewedPreprint
from top_up_reviewed_preprints.page_planner import plan_pages
from top_up_reviewed_preprints.paths import CachePaths

logger = logging.getLogger(__name__)


def fetch_top_up(client, limit: int, offset: int = 0, max_workers: int = 2) -> list[ReviewedPreprint]:
    """Fetch up to `limit` items following the first `offset` of the remote list.

    Planned pages are fetched concurrently. Any failure propagates before
    anything is returned.
    """
    plan = plan_pages(limit, offset)

    with ThreadPoolExecutor(max_workers=max(1, min(max_workers, len(plan.pages)))) as executor:
        pages = list(executor.map(lambda page: client.get_page(page, plan.page_size), plan.pages))

    items = [item for page in pages for item in page.items]
    return items[plan.slice_start:plan.slice_end]


def top_up(
    limit: int,
    store,
    client,
    paths: CachePaths,
    max_workers: int = 2,
) -> list[ReviewedPreprint]:
    """Write the next `limit` reviewed preprints beyond the cached ones to the delta file.

    The canonical list is left untouched.

    Returns:
        The delta written.
    """
    cached = read_cached_preprints(store, paths.list_file)
    logger.info("Found %d cached reviewed preprints", len(cached))

    delta = fetch_top_up(client, limit, offset=len(cached), max_workers=max_workers)
    if len(delta) < limit:
        logger.info("Reached end of collection (%d of %d requested)", len(delta), limit)

    store.write_text(paths.new_list_file, encode_preprints(delta))
    logger.info("Wrote %d new reviewed preprints to %s", len(delta), paths.new_list_file)
    return delta
