"""Drop detail files for reviewed preprints that reappear in a delta."""

import logging

from top_up_reviewed_preprints.models import ReviewedPreprint
from top_up_reviewed_preprints.paths import CachePaths

logger = logging.getLogger(__name__)


def invalidate(delta: list[ReviewedPreprint], store, paths: CachePaths) -> int:
    """Remove the cached detail file for every id in the delta.

    A summary showing up again may carry a new statusDate, so its detail is
    discarded and left for the next backfill. Missing files are ignored.

    Returns:
        Number of ids processed.
    """
    for preprint in delta:
        store.remove(paths.detail_file(preprint.id), force=True)

    logger.info("Invalidated detail files for %d reviewed preprints", len(delta))
    return len(delta)
