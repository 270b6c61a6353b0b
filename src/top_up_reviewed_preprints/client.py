"""HTTP client for the reviewed preprints API."""

from __future__ import annotations

import logging
from typing import Any

import requests
from pydantic import ValidationError

from common.hashing import content_hash
from top_up_reviewed_preprints.codecs import to_detail, to_preprint
from top_up_reviewed_preprints.config import TopUpConfig
from top_up_reviewed_preprints.errors import DecodeError, FetchError
from top_up_reviewed_preprints.models import ReviewedPreprintDetail, ReviewedPreprintsPage
from top_up_reviewed_preprints.schemas import ReviewedPreprintItem, ReviewedPreprintsPageSchema

logger = logging.getLogger(__name__)

MAX_PAGE_SIZE = 100


class ReviewedPreprintsClient:
    """Fetches list pages and single records from the reviewed preprints API."""

    def __init__(
        self,
        base_url: str,
        timeout: int = 30,
        user_agent: str = "reviewed-preprints-cache/0.1.0",
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": user_agent, "Accept": "application/json"})

    @classmethod
    def from_config(cls, config: TopUpConfig) -> ReviewedPreprintsClient:
        return cls(config.api_base_url, timeout=config.request_timeout, user_agent=config.user_agent)

    def page_url(self, page: int = 1, page_size: int = 10) -> str:
        return f"{self.base_url}?order=asc&page={page}&per-page={min(page_size, MAX_PAGE_SIZE)}"

    def detail_url(self, msid: str) -> str:
        return f"{self.base_url}/{msid}"

    def get_page(self, page: int, page_size: int) -> ReviewedPreprintsPage:
        """Fetch one page of the list, fingerprinting each raw item.

        Raises:
            FetchError: On transport or HTTP status failure.
            DecodeError: If the response does not match the page schema.
        """
        url = self.page_url(page, page_size)
        logger.info(url)
        data = self._get_json(url)

        try:
            parsed = ReviewedPreprintsPageSchema.model_validate(data)
        except ValidationError as e:
            raise DecodeError(url, e) from e

        items = [
            to_preprint(item, fingerprint=content_hash(raw))
            for item, raw in zip(parsed.items, data["items"])
        ]
        return ReviewedPreprintsPage(total=parsed.total, items=items)

    def get_detail(self, msid: str) -> ReviewedPreprintDetail:
        """Fetch the full record for one reviewed preprint."""
        url = self.detail_url(msid)
        data = self._get_json(url)

        try:
            item = ReviewedPreprintItem.model_validate(data)
        except ValidationError as e:
            raise DecodeError(url, e) from e
        return to_detail(item)

    def _get_json(self, url: str) -> Any:
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise FetchError(url, e) from e

        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(url, e) from e
