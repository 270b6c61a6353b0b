"""Error types for the reviewed preprints top-up."""


class ReviewedPreprintsError(Exception):
    """Base error for top-up operations."""

    pass


class FetchError(ReviewedPreprintsError):
    """Transport or HTTP failure talking to the remote API."""

    def __init__(self, url: str, cause: Exception) -> None:
        super().__init__(f"Request failed for {url}: {cause}")
        self.url = url
        self.cause = cause


class DecodeError(ReviewedPreprintsError):
    """Remote payload was not JSON or did not match the expected shape."""

    def __init__(self, url: str, cause: Exception) -> None:
        super().__init__(f"Invalid response from {url}: {cause}")
        self.url = url
        self.cause = cause


class BackfillError(ReviewedPreprintsError):
    """One or more detail records could not be retrieved."""

    def __init__(self, failed: dict[str, Exception]) -> None:
        ids = ", ".join(sorted(failed))
        super().__init__(f"Failed to retrieve {len(failed)} reviewed preprint(s): {ids}")
        self.failed = failed

    @property
    def failed_ids(self) -> list[str]:
        return sorted(self.failed)
