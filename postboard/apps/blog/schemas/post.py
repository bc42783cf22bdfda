"""Post schemas."""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PostCreateRequest(BaseModel):
    """Raw body of POST /posts; presence is checked by the handler."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: Optional[str] = None
    content: Optional[str] = None
    author_id: Optional[str] = None


class PostCreate(BaseModel):
    """Schema for creating a post."""
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    author_id: str = Field(min_length=1)


class PostRead(BaseModel):
    """Schema for returning a post."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    id: int
    title: str
    content: str
    author_id: str
    created_at: str
