"""Post model."""

from sqlmodel import Field
from postboard.core.database import BaseModel


class Post(BaseModel, table=True):
    """Post model class."""

    __tablename__ = "posts"  # type: ignore
    title: str = Field(nullable=False)
    content: str = Field(nullable=False)
    author_id: str = Field(nullable=False, index=True)
