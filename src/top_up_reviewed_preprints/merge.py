"""Combine the delta file into the canonical list."""

from __future__ import annotations

import logging

from top_up_reviewed_preprints.codecs import encode_preprints, read_cached_preprints
from top_up_reviewed_preprints.models import ReviewedPreprint
from top_up_reviewed_preprints.paths import CachePaths

logger = logging.getLogger(__name__)


def combine(
    cached: list[ReviewedPreprint],
    delta: list[ReviewedPreprint],
) -> list[ReviewedPreprint]:
    """Append delta to cached, keep the first record per id, newest statusDate first.

    The cached record wins when both lists hold the same id.
    """
    # TODO: confirm with the API owners whether a re-fetched delta record
    # should replace the cached one; invalidate() already assumes it changed.
    seen: set[str] = set()
    combined = []
    for preprint in cached + delta:
        if preprint.id in seen:
            continue
        seen.add(preprint.id)
        combined.append(preprint)

    return sorted(combined, key=lambda p: p.status_date, reverse=True)


def merge(store, paths: CachePaths) -> list[ReviewedPreprint]:
    """Merge the delta file into the canonical list file and return the result."""
    cached = read_cached_preprints(store, paths.list_file)
    delta = read_cached_preprints(store, paths.new_list_file)

    merged = combine(cached, delta)
    store.write_text(paths.list_file, encode_preprints(merged))

    logger.info(
        "Merged %d new into %d cached reviewed preprints (%d total)",
        len(delta),
        len(cached),
        len(merged),
    )
    return merged


def tidy_up(store, paths: CachePaths) -> None:
    """Delete the delta file once merged."""
    store.remove(paths.new_list_file, force=True)
