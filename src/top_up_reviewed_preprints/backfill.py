"""Fetch detail records for cached reviewed preprints that lack one."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed

from top_up_reviewed_preprints.codecs import encode_detail, read_cached_preprints
from top_up_reviewed_preprints.errors import BackfillError
from top_up_reviewed_preprints.models import MissingDetail, ReviewedPreprintDetail
from top_up_reviewed_preprints.paths import CachePaths

logger = logging.getLogger(__name__)


def _detail_exists(store, missing: MissingDetail) -> bool:
    try:
        return store.exists(missing.path)
    except OSError as e:
        logger.warning("Could not check %s, treating as missing: %s", missing.path, e)
        return False


def find_missing_details(store, paths: CachePaths) -> list[MissingDetail]:
    """List cached summaries with no detail file, in canonical order."""
    cached = read_cached_preprints(store, paths.list_file)
    candidates = [MissingDetail(msid=p.id, path=paths.detail_file(p.id)) for p in cached]
    return [candidate for candidate in candidates if not _detail_exists(store, candidate)]


def fetch_details(
    client,
    missing: list[MissingDetail],
    max_workers: int = 8,
) -> list[tuple[MissingDetail, ReviewedPreprintDetail]]:
    """Fetch every missing detail concurrently.

    All fetches run to completion before returning.

    Raises:
        BackfillError: Naming each id whose fetch failed.
    """
    if not missing:
        return []

    fetched: dict[str, ReviewedPreprintDetail] = {}
    failed: dict[str, Exception] = {}

    with ThreadPoolExecutor(max_workers=max(1, min(max_workers, len(missing)))) as executor:
        futures = {executor.submit(client.get_detail, m.msid): m for m in missing}
        for future in as_completed(futures):
            item = futures[future]
            try:
                fetched[item.msid] = future.result()
            except Exception as e:
                logger.error("Failed to retrieve reviewed preprint %s: %s", item.msid, e)
                failed[item.msid] = e

    if failed:
        raise BackfillError(failed)

    return [(m, fetched[m.msid]) for m in missing]


def write_details(store, results: list[tuple[MissingDetail, ReviewedPreprintDetail]]) -> None:
    for missing, detail in results:
        store.write_text(missing.path, encode_detail(detail))


def backfill(store, client, paths: CachePaths, max_workers: int = 8) -> list[ReviewedPreprintDetail]:
    """Retrieve and write the detail file for each cached id that has none.

    Nothing is written unless every fetch succeeds.

    Returns:
        The detail records written.
    """
    missing = find_missing_details(store, paths)
    logger.info("Retrieving %d missing reviewed preprints", len(missing))

    results = fetch_details(client, missing, max_workers=max_workers)
    write_details(store, results)

    logger.info("Wrote %d reviewed preprint detail files", len(results))
    return [detail for _, detail in results]
