# inkwell/routers/blog.py
"""
RPC procedures for categories, tags and articles.

Queries are GET requests (input in the JSON ``input`` query parameter),
mutations are POST requests with the input as JSON body.
"""
from fastapi import APIRouter, Depends
from sqlmodel import Session
from typing import List, Optional

from inkwell.core.deps import get_db, rpc_input
from inkwell.crud.blog import blog_crud
from inkwell.services.search_service import ArticleSearchService
from inkwell.schemas.common import DeleteInput, DeleteResult, SlugInput, ErrorResponse
from inkwell.schemas.blog import (
    # Category schemas
    CategoryCreate, CategoryUpdate, Category,
    # Tag schemas
    TagCreate, TagUpdate, Tag,
    # Article schemas
    ArticleCreate, ArticleUpdate, ArticleWithRelations, SearchArticlesInput
)

router = APIRouter(
    prefix="/rpc",
    tags=["blog"],
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        404: {"model": ErrorResponse, "description": "Referenced entity not found"},
        409: {"model": ErrorResponse, "description": "Slug already in use"},
    },
)


# ========================================
# CATEGORY PROCEDURES
# ========================================

@router.post("/createCategory", response_model=Category)
def create_category(
    category_data: CategoryCreate,
    db: Session = Depends(get_db)
):
    """Create a new category."""
    category = blog_crud.create_category(db, category_data)
    return Category.model_validate(category)


@router.get("/getCategories", response_model=List[Category])
def get_categories(db: Session = Depends(get_db)):
    """Get all categories ordered by name."""
    return [Category.model_validate(c) for c in blog_crud.get_categories(db)]


@router.post("/updateCategory", response_model=Category)
def update_category(
    category_data: CategoryUpdate,
    db: Session = Depends(get_db)
):
    """
    Update a category.

    Only the fields sent are changed; ``description`` may be sent as null to clear it.
    """
    category = blog_crud.update_category(db, category_data)
    return Category.model_validate(category)


@router.post(
    "/deleteCategory",
    response_model=DeleteResult,
    responses={412: {"model": ErrorResponse, "description": "Category still has articles"}}
)
def delete_category(
    delete_data: DeleteInput,
    db: Session = Depends(get_db)
):
    """
    Delete a category.

    **Note**: Unlike the other delete procedures this one fails with 404 for an
    unknown id, and with 412 while articles still use the category.
    """
    return DeleteResult(success=blog_crud.delete_category(db, delete_data.id))


# ========================================
# TAG PROCEDURES
# ========================================

@router.post("/createTag", response_model=Tag)
def create_tag(
    tag_data: TagCreate,
    db: Session = Depends(get_db)
):
    """Create a new tag."""
    tag = blog_crud.create_tag(db, tag_data)
    return Tag.model_validate(tag)


@router.get("/getTags", response_model=List[Tag])
def get_tags(db: Session = Depends(get_db)):
    """Get all tags ordered by name."""
    return [Tag.model_validate(t) for t in blog_crud.get_tags(db)]


@router.post("/updateTag", response_model=Tag)
def update_tag(
    tag_data: TagUpdate,
    db: Session = Depends(get_db)
):
    """Update a tag."""
    tag = blog_crud.update_tag(db, tag_data)
    return Tag.model_validate(tag)


@router.post("/deleteTag", response_model=DeleteResult)
def delete_tag(
    delete_data: DeleteInput,
    db: Session = Depends(get_db)
):
    """
    Delete a tag.

    **Note**: The tag is removed from all its articles; the articles stay.
    Returns ``success: false`` for an unknown id.
    """
    return DeleteResult(success=blog_crud.delete_tag(db, delete_data.id))


# ========================================
# ARTICLE PROCEDURES
# ========================================

@router.post("/createArticle", response_model=ArticleWithRelations)
def create_article(
    article_data: ArticleCreate,
    db: Session = Depends(get_db)
):
    """Create a new article in a category, optionally tagged."""
    return blog_crud.create_article(db, article_data)


@router.get("/getArticles", response_model=List[ArticleWithRelations])
def get_articles(db: Session = Depends(get_db)):
    """Get all articles, drafts included, most recent first."""
    return blog_crud.get_articles(db)


@router.get("/getArticleBySlug", response_model=Optional[ArticleWithRelations])
def get_article_by_slug(
    slug_input: SlugInput = Depends(rpc_input(SlugInput)),
    db: Session = Depends(get_db)
):
    """Get an article by its exact slug. Returns null when there is none."""
    return blog_crud.get_article_by_slug(db, slug_input.slug)


@router.get("/searchArticles", response_model=List[ArticleWithRelations])
def search_articles(
    filters: SearchArticlesInput = Depends(rpc_input(SearchArticlesInput)),
    db: Session = Depends(get_db)
):
    """
    Search articles.

    **Input**:
    - query: Case-insensitive match in title or content
    - category_id: Filter by category
    - tag_ids: Articles with any of these tags
    - status: Filter by status (draft or published); drafts are included when omitted
    - limit: Page size, 1 to 100 (default 10)
    - offset: Number of articles to skip (default 0)
    """
    return ArticleSearchService.search_articles(db, filters)


@router.post("/updateArticle", response_model=ArticleWithRelations)
def update_article(
    article_data: ArticleUpdate,
    db: Session = Depends(get_db)
):
    """
    Update an article.

    ``tag_ids`` replaces the whole tag set when sent (``[]`` clears it) and
    leaves the tags alone when omitted.
    """
    return blog_crud.update_article(db, article_data)


@router.post("/deleteArticle", response_model=DeleteResult)
def delete_article(
    delete_data: DeleteInput,
    db: Session = Depends(get_db)
):
    """Delete an article. Returns ``success: false`` for an unknown id."""
    return DeleteResult(success=blog_crud.delete_article(db, delete_data.id))
