"""Top up the reviewed preprints cache end to end."""

import logging
from dataclasses import dataclass

from top_up_reviewed_preprints.backfill import backfill
from top_up_reviewed_preprints.invalidate import invalidate
from top_up_reviewed_preprints.merge import merge, tidy_up
from top_up_reviewed_preprints.paths import CachePaths
from top_up_reviewed_preprints.top_up import top_up

logger = logging.getLogger(__name__)


@dataclass
class TopUpResult:
    fetched: int
    total: int
    details_written: int


def create_cache_folder(store, paths: CachePaths) -> None:
    store.make_directory(paths.detail_dir, recursive=True)


def top_up_reviewed_preprints(
    limit: int,
    store,
    client,
    paths: CachePaths,
    max_workers: int = 8,
) -> TopUpResult:
    """Run each stage in order; an exception from any stage stops the run.

    Stages: create cache folder, write delta, invalidate details, merge,
    remove delta, backfill details. A delta left behind by an aborted run
    is overwritten by a fresh fetch of the same window, since the canonical
    list (and so the offset) is unchanged.
    """
    create_cache_folder(store, paths)

    delta = top_up(limit, store, client, paths, max_workers=max_workers)
    invalidate(delta, store, paths)
    merged = merge(store, paths)
    tidy_up(store, paths)
    written = backfill(store, client, paths, max_workers=max_workers)

    logger.info(
        "Top-up complete: %d fetched, %d cached, %d detail files written",
        len(delta),
        len(merged),
        len(written),
    )
    return TopUpResult(fetched=len(delta), total=len(merged), details_written=len(written))


def retrieve_missing_reviewed_preprints(store, client, paths: CachePaths, max_workers: int = 8) -> int:
    """Fill in missing detail files without topping up the list."""
    create_cache_folder(store, paths)
    return len(backfill(store, client, paths, max_workers=max_workers))
