"""Helper functions for the top-up CLIs."""

from __future__ import annotations

import argparse

from common.cli_helpers import parse_bounded_int
from top_up_reviewed_preprints.client import MAX_PAGE_SIZE

DEFAULT_LIMIT = 20


def parse_top_up_args(argv: list[str] | None = None) -> argparse.Namespace:
    '''Parse CLI arguments for top-up-reviewed-preprints.'''

    parser = argparse.ArgumentParser(
        prog="top-up-reviewed-preprints",
        description="Fetch the next reviewed preprints into the local cache",
    )
    parser.add_argument(
        "-l",
        "--limit",
        type=lambda v: parse_bounded_int(v, 1, MAX_PAGE_SIZE, "limit"),
        default=DEFAULT_LIMIT,
        help=f"Number of new reviewed preprints to fetch, 1-{MAX_PAGE_SIZE} (default: {DEFAULT_LIMIT})",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Config name (test/prod) or path to YAML file. Defaults to $CONFIG_ENV or 'prod'",
    )
    return parser.parse_args(argv)


def parse_retrieve_missing_args(argv: list[str] | None = None) -> argparse.Namespace:
    '''Parse CLI arguments for retrieve-missing-reviewed-preprints.'''

    parser = argparse.ArgumentParser(
        prog="retrieve-missing-reviewed-preprints",
        description="Fetch detail records for cached reviewed preprints that lack one",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Config name (test/prod) or path to YAML file. Defaults to $CONFIG_ENV or 'prod'",
    )
    return parser.parse_args(argv)
