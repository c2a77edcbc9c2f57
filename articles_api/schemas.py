from datetime import datetime, timezone

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, field_validator

# Timestamp given to articles whose body omits publishAt.
ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


# --- Article ---

class Article(BaseModel):
    """
    The stored entity; ``id`` is caller supplied and used as the key.

    Omitted or null fields decode to their empty value, so ``{"id": "a1"}``
    is a complete article.
    """

    id: str = ""
    title: str = ""
    tags: list[str] = []
    content: str = ""
    publish_at: AwareDatetime = Field(ZERO_TIME, alias="publishAt")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("id", "title", "content", mode="before")
    @classmethod
    def _null_string(cls, value):
        return "" if value is None else value

    @field_validator("tags", mode="before")
    @classmethod
    def _null_tags(cls, value):
        return [] if value is None else value

    @field_validator("publish_at", mode="before")
    @classmethod
    def _null_publish_at(cls, value):
        return ZERO_TIME if value is None else value


class ArticleUpdate(Article):
    # Accepted for payload compatibility; the path id always wins.
    id: str | None = None

    def to_article(self, article_id: str) -> Article:
        return Article(id=article_id, **self.model_dump(exclude={"id"}))


# --- Health ---

class HealthResponse(BaseModel):
    status: str
    version: str
    articles: int
