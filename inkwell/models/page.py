from sqlmodel import Field, Column, Text
from typing import Optional

from inkwell.models.mixins import TimestampMixin


class StaticPage(TimestampMixin, table=True):
    """Standalone pages such as About or Contact."""

    __tablename__ = "static_pages"

    id: Optional[int] = Field(default=None, primary_key=True)
    slug: str = Field(max_length=255, unique=True, index=True)
    title: str = Field(max_length=255)
    content: str = Field(sa_column=Column(Text, nullable=False))
    seo_title: Optional[str] = Field(default=None, max_length=255)
    seo_description: Optional[str] = Field(default=None, max_length=500)
