"""Pydantic schemas for remote payloads and cached files."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator


class ReviewedPreprintItem(BaseModel):
    """A reviewed preprint as returned by the API or stored in the cache."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    published: datetime
    status_date: datetime = Field(alias="statusDate")
    hash: str | None = None

    @field_validator("published", "status_date")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        # Naive and aware timestamps must stay comparable when sorting.
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


class ReviewedPreprintsPageSchema(BaseModel):
    """Paginated list response."""

    total: int
    items: list[ReviewedPreprintItem]


ReviewedPreprintItems = TypeAdapter(list[ReviewedPreprintItem])
