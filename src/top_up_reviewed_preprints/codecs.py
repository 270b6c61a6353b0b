"""JSON encoding of cached summary lists and detail records."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from common.serialization import dumps_json, serialize_dataclass
from top_up_reviewed_preprints.models import ReviewedPreprint, ReviewedPreprintDetail
from top_up_reviewed_preprints.schemas import ReviewedPreprintItem, ReviewedPreprintItems

logger = logging.getLogger(__name__)

FIELD_ALIASES = {"status_date": "statusDate"}


def to_preprint(item: ReviewedPreprintItem, fingerprint: str | None = None) -> ReviewedPreprint:
    return ReviewedPreprint(
        id=item.id,
        title=item.title,
        published=item.published,
        status_date=item.status_date,
        hash=fingerprint if fingerprint is not None else item.hash,
    )


def to_detail(item: ReviewedPreprintItem) -> ReviewedPreprintDetail:
    return ReviewedPreprintDetail(
        id=item.id,
        title=item.title,
        published=item.published,
        status_date=item.status_date,
    )


def encode_preprints(preprints: list[ReviewedPreprint]) -> str:
    """Encode a summary list as a JSON array, omitting absent hashes."""
    records = [serialize_dataclass(p, FIELD_ALIASES, exclude_none=True) for p in preprints]
    return dumps_json(records)


def decode_preprints(content: str) -> list[ReviewedPreprint]:
    """Decode a JSON array of summaries.

    Raises:
        pydantic.ValidationError: If the content is not JSON or an item is malformed.
    """
    return [to_preprint(item) for item in ReviewedPreprintItems.validate_json(content)]


def encode_detail(detail: ReviewedPreprintDetail) -> str:
    return dumps_json(serialize_dataclass(detail, FIELD_ALIASES))


def read_cached_preprints(store, path: Path) -> list[ReviewedPreprint]:
    """Read a cached summary list, treating a missing or unreadable file as empty."""
    try:
        content = store.read_text(path)
    except FileNotFoundError:
        return []
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Could not read %s, treating as empty: %s", path, e)
        return []

    try:
        return decode_preprints(content)
    except ValidationError as e:
        logger.warning("Ignoring invalid cache file %s (%d errors)", path, e.error_count())
        return []
