"""Hashing utilities."""

import hashlib
import json
from typing import Any


def content_hash(item: Any) -> str:
    """Return an md5 hex digest over the canonical JSON form of a fetched item.

    Keys are sorted, so key order in the payload does not affect the digest.
    """
    payload = json.dumps(item, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return hashlib.md5(payload.encode("utf-8")).hexdigest()
