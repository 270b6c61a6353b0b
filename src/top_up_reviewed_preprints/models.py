"""Data models for the reviewed preprints top-up."""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional


@dataclass
class ReviewedPreprint:
    """Summary record from the paginated list, fingerprinted at fetch time."""
    id: str
    title: str
    published: datetime
    status_date: datetime
    hash: Optional[str] = None


@dataclass
class ReviewedPreprintDetail:
    """Full record for a single reviewed preprint, cached one file per id."""
    id: str
    title: str
    published: datetime
    status_date: datetime


@dataclass
class ReviewedPreprintsPage:
    """One page of the remote list."""
    total: int
    items: list[ReviewedPreprint]


@dataclass(frozen=True)
class PagePlan:
    """Remote pages to request and the slice of their concatenation to keep."""
    pages: list[int]
    slice_start: int
    slice_end: int
    page_size: int


@dataclass(frozen=True)
class MissingDetail:
    """A cached summary whose detail file is absent."""
    msid: str
    path: Path
