"""Catalogue record types."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Naat(BaseModel):
    """A naat document as exported from the backend collection."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    id: str = Field(alias="$id")
    title: str
    channel_name: str | None = None
    channel_id: str | None = None
    youtube_id: str | None = None
    audio_id: str | None = None
    thumbnail_url: str | None = None
    duration: int | None = None  # seconds
    views: int = 0
    upload_date: str | None = None


class Channel(BaseModel):
    id: str
    name: str | None = None
