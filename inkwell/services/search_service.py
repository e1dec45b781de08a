# inkwell/services/search_service.py
"""
Article search with optional text, category, tag and status filters.
"""
from sqlmodel import Session, select, col, or_, and_
from typing import List

from inkwell.crud.blog import blog_crud
from inkwell.models.blog import Article, ArticleTag, Category
from inkwell.schemas.blog import ArticleWithRelations, SearchArticlesInput

LIKE_ESCAPE = "\\"


def escape_like(value: str) -> str:
    """Make LIKE wildcards in user input match literally."""
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


class ArticleSearchService:
    """Service for filtered, paginated article search."""

    @staticmethod
    def search_articles(db: Session, filters: SearchArticlesInput) -> List[ArticleWithRelations]:
        """
        Search articles.

        Args:
            db: Database session
            filters: Search filters and pagination

        Returns:
            Matching articles with category and tags, most recent first.
            An empty list when nothing matches.

        Filters combine with AND. ``tag_ids`` matches articles having any of
        the tags, through a subquery so an article tagged twice is returned
        once. Without a status filter drafts are included.
        """
        query = (
            select(Article, Category)
            .join(Category, Article.category_id == Category.id)
        )

        conditions = []

        if filters.query:
            pattern = f"%{escape_like(filters.query)}%"
            conditions.append(
                or_(
                    col(Article.title).ilike(pattern, escape=LIKE_ESCAPE),
                    col(Article.content).ilike(pattern, escape=LIKE_ESCAPE)
                )
            )

        if filters.category_id is not None:
            conditions.append(Article.category_id == filters.category_id)

        if filters.tag_ids:
            tagged_article_ids = select(ArticleTag.article_id).where(
                col(ArticleTag.tag_id).in_(filters.tag_ids)
            )
            conditions.append(col(Article.id).in_(tagged_article_ids))

        if filters.status is not None:
            conditions.append(Article.status == filters.status)

        if conditions:
            query = query.where(and_(*conditions))

        query = (
            query.order_by(col(Article.created_at).desc(), col(Article.id).desc())
            .offset(filters.offset)
            .limit(filters.limit)
        )

        rows = db.exec(query).all()
        return blog_crud.attach_tags(db, rows)
