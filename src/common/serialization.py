"""Serialization utilities."""

from __future__ import annotations

import json
from dataclasses import asdict
from datetime import datetime
from typing import Any


def serialize_dataclass(
    obj,
    aliases: dict[str, str] | None = None,
    exclude_none: bool = False,
) -> dict:
    """Serialize a dataclass to dict, converting datetimes to ISO strings.

    Args:
        obj: Dataclass instance to serialize.
        aliases: Optional mapping of field name to output key (e.g. "status_date" -> "statusDate").
        exclude_none: Drop fields whose value is None.

    Returns:
        Dict ready for JSON encoding.
    """
    aliases = aliases or {}
    data = {}
    for key, value in asdict(obj).items():
        if value is None and exclude_none:
            continue
        if isinstance(value, datetime):
            value = value.isoformat()
        data[aliases.get(key, key)] = value
    return data


def dumps_json(data: Any, formatted: bool = True) -> str:
    """Encode data as JSON, indented by two spaces unless formatted is False."""
    return json.dumps(data, indent=2 if formatted else None, ensure_ascii=False)
