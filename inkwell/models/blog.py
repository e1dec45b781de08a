# inkwell/models/blog.py
from sqlalchemy import UniqueConstraint
from sqlmodel import SQLModel, Field, Column, Text
from typing import Optional
from enum import Enum

from inkwell.models.mixins import TimestampMixin


class ArticleStatus(str, Enum):
    draft = "draft"
    published = "published"


class Category(TimestampMixin, table=True):
    __tablename__ = "categories"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=100, index=True)
    slug: str = Field(max_length=100, unique=True, index=True)
    description: Optional[str] = Field(default=None, sa_column=Column(Text))


class Tag(TimestampMixin, table=True):
    __tablename__ = "tags"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=50, index=True)
    slug: str = Field(max_length=50, unique=True, index=True)


class Article(TimestampMixin, table=True):
    __tablename__ = "articles"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=255, index=True)
    slug: str = Field(max_length=255, unique=True, index=True)
    content: str = Field(sa_column=Column(Text, nullable=False))
    excerpt: Optional[str] = Field(default=None, sa_column=Column(Text))
    cover_image: Optional[str] = Field(default=None, max_length=500)
    status: ArticleStatus = Field(default=ArticleStatus.draft, index=True)
    # No cascade: a category cannot be removed while articles use it
    category_id: int = Field(foreign_key="categories.id", index=True)
    seo_title: Optional[str] = Field(default=None, max_length=255)
    seo_description: Optional[str] = Field(default=None, max_length=500)


class ArticleTag(SQLModel, table=True):
    __tablename__ = "article_tags"
    __table_args__ = (UniqueConstraint("article_id", "tag_id", name="uq_article_tags_article_tag"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    article_id: int = Field(foreign_key="articles.id", ondelete="CASCADE", index=True)
    tag_id: int = Field(foreign_key="tags.id", ondelete="CASCADE", index=True)
