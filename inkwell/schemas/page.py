from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime

from inkwell.schemas.common import SLUG_PATTERN, reject_blank, reject_null


class StaticPageBase(BaseModel):
    slug: str = Field(..., min_length=1, max_length=255, pattern=SLUG_PATTERN)
    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)
    seo_title: Optional[str] = Field(None, max_length=255)
    seo_description: Optional[str] = Field(None, max_length=500)

    @field_validator('title', 'content')
    def validate_not_blank(cls, v, info):
        return reject_blank(v, info)


class StaticPageCreate(StaticPageBase):
    pass


class StaticPageUpdate(BaseModel):
    id: int
    slug: Optional[str] = Field(None, min_length=1, max_length=255, pattern=SLUG_PATTERN)
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    content: Optional[str] = Field(None, min_length=1)
    seo_title: Optional[str] = Field(None, max_length=255)
    seo_description: Optional[str] = Field(None, max_length=500)

    @field_validator('slug', 'title', 'content')
    def validate_not_null(cls, v, info):
        return reject_null(v, info)

    @field_validator('title', 'content')
    def validate_not_blank(cls, v, info):
        return reject_blank(v, info)


class StaticPage(StaticPageBase):
    id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
