"""CLI for topping up the reviewed preprints cache."""

from __future__ import annotations

import logging
import sys

from dotenv import load_dotenv

from common.cli_helpers import setup_logging
from common.local_io import LocalCacheStore
from top_up_reviewed_preprints.client import ReviewedPreprintsClient
from top_up_reviewed_preprints.config import get_config, load_config, set_config
from top_up_reviewed_preprints.errors import ReviewedPreprintsError
from top_up_reviewed_preprints.helpers import parse_retrieve_missing_args, parse_top_up_args
from top_up_reviewed_preprints.paths import get_cache_paths
from top_up_reviewed_preprints.pipeline import (
    retrieve_missing_reviewed_preprints,
    top_up_reviewed_preprints,
)

load_dotenv()

logger = logging.getLogger(__name__)


def _configure(config_name: str | None):
    if config_name is not None:
        set_config(load_config(config_name))
    return get_config()


def main(argv: list[str] | None = None) -> None:
    setup_logging()
    args = parse_top_up_args(argv)
    config = _configure(args.config)

    try:
        result = top_up_reviewed_preprints(
            limit=args.limit,
            store=LocalCacheStore(),
            client=ReviewedPreprintsClient.from_config(config),
            paths=get_cache_paths(config.cache_dir),
            max_workers=config.max_workers,
        )
    except (ReviewedPreprintsError, OSError):
        logger.exception("Top-up failed")
        sys.exit(1)

    if result.fetched == 0:
        logger.warning("No new reviewed preprints found")


def retrieve_missing_main(argv: list[str] | None = None) -> None:
    setup_logging()
    args = parse_retrieve_missing_args(argv)
    config = _configure(args.config)

    try:
        written = retrieve_missing_reviewed_preprints(
            store=LocalCacheStore(),
            client=ReviewedPreprintsClient.from_config(config),
            paths=get_cache_paths(config.cache_dir),
            max_workers=config.max_workers,
        )
    except (ReviewedPreprintsError, OSError):
        logger.exception("Retrieving missing reviewed preprints failed")
        sys.exit(1)

    logger.info("Retrieved %d reviewed preprints", written)


if __name__ == "__main__":
    main()
