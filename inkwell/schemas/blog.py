# inkwell/schemas/blog.py
from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
from datetime import datetime

from inkwell.models.blog import ArticleStatus
from inkwell.schemas.common import SLUG_PATTERN, reject_blank, reject_null


# Category Schemas
class CategoryBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    slug: str = Field(..., min_length=1, max_length=100, pattern=SLUG_PATTERN)
    description: Optional[str] = None

    @field_validator('name')
    def validate_not_blank(cls, v, info):
        return reject_blank(v, info)


class CategoryCreate(CategoryBase):
    pass


class CategoryUpdate(BaseModel):
    id: int
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    slug: Optional[str] = Field(None, min_length=1, max_length=100, pattern=SLUG_PATTERN)
    description: Optional[str] = None

    @field_validator('name', 'slug')
    def validate_not_null(cls, v, info):
        return reject_null(v, info)

    @field_validator('name')
    def validate_not_blank(cls, v, info):
        return reject_blank(v, info)


class Category(CategoryBase):
    id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


# Tag Schemas
class TagBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)
    slug: str = Field(..., min_length=1, max_length=50, pattern=SLUG_PATTERN)

    @field_validator('name')
    def validate_not_blank(cls, v, info):
        return reject_blank(v, info)


class TagCreate(TagBase):
    pass


class TagUpdate(BaseModel):
    id: int
    name: Optional[str] = Field(None, min_length=1, max_length=50)
    slug: Optional[str] = Field(None, min_length=1, max_length=50, pattern=SLUG_PATTERN)

    @field_validator('name', 'slug')
    def validate_not_null(cls, v, info):
        return reject_null(v, info)

    @field_validator('name')
    def validate_not_blank(cls, v, info):
        return reject_blank(v, info)


class Tag(TagBase):
    id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


# Article Schemas
class ArticleBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    slug: str = Field(..., min_length=1, max_length=255, pattern=SLUG_PATTERN)
    content: str = Field(..., min_length=1)
    excerpt: Optional[str] = None
    cover_image: Optional[str] = Field(None, max_length=500)
    status: ArticleStatus = ArticleStatus.draft
    category_id: int
    seo_title: Optional[str] = Field(None, max_length=255)
    seo_description: Optional[str] = Field(None, max_length=500)


class ArticleCreate(ArticleBase):
    tag_ids: List[int] = []

    @field_validator('title', 'content')
    def validate_not_blank(cls, v, info):
        return reject_blank(v, info)


class ArticleUpdate(BaseModel):
    """
    Partial article update.

    Fields left out of the payload are not touched. Nullable fields (excerpt,
    cover_image, seo_title, seo_description) may be sent as null to clear them.
    ``tag_ids``, when present, replaces the full tag set; ``[]`` removes every tag.
    """
    id: int
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    slug: Optional[str] = Field(None, min_length=1, max_length=255, pattern=SLUG_PATTERN)
    content: Optional[str] = Field(None, min_length=1)
    excerpt: Optional[str] = None
    cover_image: Optional[str] = Field(None, max_length=500)
    status: Optional[ArticleStatus] = None
    category_id: Optional[int] = None
    tag_ids: Optional[List[int]] = None
    seo_title: Optional[str] = Field(None, max_length=255)
    seo_description: Optional[str] = Field(None, max_length=500)

    @field_validator('title', 'slug', 'content', 'status', 'category_id', 'tag_ids')
    def validate_not_null(cls, v, info):
        return reject_null(v, info)

    @field_validator('title', 'content')
    def validate_not_blank(cls, v, info):
        return reject_blank(v, info)


class Article(ArticleBase):
    id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ArticleWithRelations(Article):
    """Article joined with its category and full tag list."""
    category: Category
    tags: List[Tag] = []


class SearchArticlesInput(BaseModel):
    """
    Article search filters.

    All filters are optional and combine with AND. ``tag_ids`` matches
    articles carrying any of the listed tags. No status filter means drafts
    are included.
    """
    query: Optional[str] = Field(None, description="Case-insensitive match on title or content")
    category_id: Optional[int] = None
    tag_ids: Optional[List[int]] = None
    status: Optional[ArticleStatus] = None
    limit: int = Field(10, ge=1, le=100)
    offset: int = Field(0, ge=0)
