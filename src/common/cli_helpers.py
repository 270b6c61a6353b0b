"""Common CLI helper utilities."""

from __future__ import annotations

import argparse
import logging


def setup_logging() -> None:
    """Configure standard logging format for CLI tools."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def parse_bounded_int(value: str, minimum: int, maximum: int, field_name: str = "value") -> int:
    """Parse an integer argparse argument that must fall within [minimum, maximum].

    Args:
        value: Raw argument string.
        minimum: Smallest accepted value.
        maximum: Largest accepted value.
        field_name: Name of the field for error messages.

    Returns:
        Parsed integer.

    Raises:
        argparse.ArgumentTypeError: If the value is not an integer or is out of range.
    """
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"{field_name} must be an integer") from exc

    if not minimum <= parsed <= maximum:
        raise argparse.ArgumentTypeError(f"{field_name} must be between {minimum} and {maximum}")
    return parsed
