from datetime import UTC, datetime

from pydantic import BaseModel, Field, field_validator


class ArticleBody(BaseModel):
    """Compiled article body as emitted by the content build step."""

    code: str
    raw: str | None = None

    model_config = {"frozen": True}


class Article(BaseModel):
    """A single record of the generated content index."""

    slug_as_params: str = Field(..., alias="slugAsParams")
    title: str
    description: str | None = None
    date: datetime
    time_to_read: float = Field(..., alias="timeToRead", ge=0)
    published: bool = True
    body: ArticleBody

    model_config = {"frozen": True, "populate_by_name": True, "extra": "ignore"}

    @field_validator("date")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # Index dates without an offset are UTC midnights.
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value


class OpenGraphMetadata(BaseModel):
    title: str
    description: str | None = None
    type: str = "article"
    published_time: datetime
    url: str


class TwitterMetadata(BaseModel):
    card: str = "summary_large_image"
    title: str
    description: str | None = None


class ArticleMetadata(BaseModel):
    title: str
    description: str | None = None
    open_graph: OpenGraphMetadata
    twitter: TwitterMetadata
