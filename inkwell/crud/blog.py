# inkwell/crud/blog.py
import logging
from sqlalchemy import delete
from sqlmodel import Session, select, func, col
from typing import List, Optional, Dict, Sequence, Tuple

from inkwell.core.exceptions import NotFoundError, ReferentialIntegrityError
from inkwell.crud.base import write_transaction, ensure_slug_available, ordinal
from inkwell.models.blog import Article, ArticleTag, Category, Tag
from inkwell.models.mixins import utcnow
from inkwell.schemas.blog import (
    ArticleCreate, ArticleUpdate, ArticleWithRelations, CategoryCreate, CategoryUpdate,
    TagCreate, TagUpdate,
    Article as ArticleSchema, Category as CategorySchema, Tag as TagSchema,
)

logger = logging.getLogger(__name__)


def _unique(ids: Sequence[int]) -> List[int]:
    """Drop repeated ids, keeping first-seen order."""
    return list(dict.fromkeys(ids))


class BlogCRUD:
    # ============ Category Operations ============

    def create_category(self, db: Session, category_data: CategoryCreate) -> Category:
        """Create a new category."""
        ensure_slug_available(db, Category, category_data.slug, "Category")

        now = utcnow()
        category = Category(**category_data.model_dump(), created_at=now, updated_at=now)

        with write_transaction(db, "Category"):
            db.add(category)

        db.refresh(category)
        logger.info(f"Created category {category.id} ({category.slug})")
        return category

    def get_category(self, db: Session, category_id: int) -> Optional[Category]:
        """Get category by ID."""
        return db.get(Category, category_id)

    def get_categories(self, db: Session) -> List[Category]:
        """Get all categories ordered by name."""
        query = select(Category).order_by(ordinal(db, Category.name), Category.id)
        return list(db.exec(query).all())

    def update_category(self, db: Session, category_data: CategoryUpdate) -> Category:
        """Update the fields present in ``category_data``."""
        category = db.get(Category, category_data.id)
        if not category:
            raise NotFoundError(f"Category with id {category_data.id} not found")

        update_data = category_data.model_dump(exclude_unset=True, exclude={'id'})

        if 'slug' in update_data:
            ensure_slug_available(db, Category, update_data['slug'], "Category", exclude_id=category.id)

        with write_transaction(db, "Category"):
            for field, value in update_data.items():
                setattr(category, field, value)
            category.touch()

        db.refresh(category)
        logger.info(f"Updated category {category.id}")
        return category

    def delete_category(self, db: Session, category_id: int) -> bool:
        """Delete category if it has no articles. Raises instead of returning False."""
        category = db.get(Category, category_id)
        if not category:
            raise NotFoundError(f"Category with id {category_id} not found")

        article_count = self.get_category_article_count(db, category_id)
        if article_count > 0:
            raise ReferentialIntegrityError(
                f"Cannot delete category: {article_count} article(s) are using this category"
            )

        with write_transaction(db, "Category"):
            db.delete(category)

        logger.info(f"Deleted category {category_id}")
        return True

    def get_category_article_count(self, db: Session, category_id: int) -> int:
        """Get the number of articles in a category."""
        return db.exec(
            select(func.count(Article.id)).where(Article.category_id == category_id)
        ).one()

    # ============ Tag Operations ============

    def create_tag(self, db: Session, tag_data: TagCreate) -> Tag:
        """Create a new tag."""
        ensure_slug_available(db, Tag, tag_data.slug, "Tag")

        now = utcnow()
        tag = Tag(**tag_data.model_dump(), created_at=now, updated_at=now)

        with write_transaction(db, "Tag"):
            db.add(tag)

        db.refresh(tag)
        logger.info(f"Created tag {tag.id} ({tag.slug})")
        return tag

    def get_tag(self, db: Session, tag_id: int) -> Optional[Tag]:
        """Get tag by ID."""
        return db.get(Tag, tag_id)

    def get_tags(self, db: Session) -> List[Tag]:
        """Get all tags ordered by name."""
        query = select(Tag).order_by(ordinal(db, Tag.name), Tag.id)
        return list(db.exec(query).all())

    def update_tag(self, db: Session, tag_data: TagUpdate) -> Tag:
        """Update the fields present in ``tag_data``."""
        tag = db.get(Tag, tag_data.id)
        if not tag:
            raise NotFoundError(f"Tag with id {tag_data.id} not found")

        update_data = tag_data.model_dump(exclude_unset=True, exclude={'id'})

        if 'slug' in update_data:
            ensure_slug_available(db, Tag, update_data['slug'], "Tag", exclude_id=tag.id)

        with write_transaction(db, "Tag"):
            for field, value in update_data.items():
                setattr(tag, field, value)
            tag.touch()

        db.refresh(tag)
        logger.info(f"Updated tag {tag.id}")
        return tag

    def delete_tag(self, db: Session, tag_id: int) -> bool:
        """Delete tag and its article links. Articles are kept."""
        tag = db.get(Tag, tag_id)
        if not tag:
            return False

        with write_transaction(db, "Tag"):
            # Same effect as the ON DELETE CASCADE, for stores that do not enforce it
            db.exec(
                delete(ArticleTag)
                .where(ArticleTag.tag_id == tag_id)
                .execution_options(synchronize_session="fetch")
            )
            db.delete(tag)

        logger.info(f"Deleted tag {tag_id}")
        return True

    # ============ Article Operations ============

    def _require_category(self, db: Session, category_id: int) -> Category:
        category = db.get(Category, category_id)
        if not category:
            raise NotFoundError(f"Category with id {category_id} not found")
        return category

    def _require_tags(self, db: Session, tag_ids: List[int]) -> List[Tag]:
        """Load tags in ``tag_ids`` order, naming every missing id in the error."""
        if not tag_ids:
            return []

        found = {
            tag.id: tag
            for tag in db.exec(select(Tag).where(col(Tag.id).in_(tag_ids))).all()
        }
        missing = [tag_id for tag_id in tag_ids if tag_id not in found]
        if missing:
            raise NotFoundError(f"Tags with ids {', '.join(str(i) for i in missing)} not found")

        return [found[tag_id] for tag_id in tag_ids]

    def _with_relations(self, article: Article, category: Category, tags: List[Tag]) -> ArticleWithRelations:
        return ArticleWithRelations(
            **ArticleSchema.model_validate(article).model_dump(),
            category=CategorySchema.model_validate(category),
            tags=[TagSchema.model_validate(tag) for tag in tags]
        )

    def get_tags_for_articles(self, db: Session, article_ids: List[int]) -> Dict[int, List[Tag]]:
        """Fetch the tags of several articles in one query, in link order."""
        tags_by_article: Dict[int, List[Tag]] = {article_id: [] for article_id in article_ids}
        if not article_ids:
            return tags_by_article

        rows = db.exec(
            select(ArticleTag.article_id, Tag)
            .join(Tag, ArticleTag.tag_id == Tag.id)
            .where(col(ArticleTag.article_id).in_(article_ids))
            .order_by(ArticleTag.id)
        ).all()

        for article_id, tag in rows:
            tags_by_article[article_id].append(tag)

        return tags_by_article

    def attach_tags(
        self,
        db: Session,
        rows: Sequence[Tuple[Article, Category]]
    ) -> List[ArticleWithRelations]:
        """Turn (article, category) rows into ArticleWithRelations, keeping row order."""
        tags_by_article = self.get_tags_for_articles(db, [article.id for article, _ in rows])
        return [
            self._with_relations(article, category, tags_by_article[article.id])
            for article, category in rows
        ]

    def _article_query(self):
        return (
            select(Article, Category)
            .join(Category, Article.category_id == Category.id)
        )

    def create_article(self, db: Session, article_data: ArticleCreate) -> ArticleWithRelations:
        """
        Create a new article with its tag links.

        Raises:
            NotFoundError: the category or any of the tags does not exist
            UniqueConstraintViolation: the slug is already used
        """
        category = self._require_category(db, article_data.category_id)
        tag_ids = _unique(article_data.tag_ids)
        tags = self._require_tags(db, tag_ids)
        ensure_slug_available(db, Article, article_data.slug, "Article")

        now = utcnow()
        article = Article(
            **article_data.model_dump(exclude={'tag_ids'}),
            created_at=now,
            updated_at=now
        )

        with write_transaction(db, "Article"):
            db.add(article)
            db.flush()  # assigns article.id for the link rows
            for tag_id in tag_ids:
                db.add(ArticleTag(article_id=article.id, tag_id=tag_id))

        db.refresh(article)
        logger.info(f"Created article {article.id} ({article.slug}) with {len(tag_ids)} tag(s)")
        return self._with_relations(article, category, tags)

    def get_article(self, db: Session, article_id: int) -> Optional[ArticleWithRelations]:
        """Get article with category and tags by ID."""
        row = db.exec(self._article_query().where(Article.id == article_id)).first()
        if not row:
            return None
        return self.attach_tags(db, [row])[0]

    def get_articles(self, db: Session) -> List[ArticleWithRelations]:
        """Get all articles, most recent first."""
        query = self._article_query().order_by(
            col(Article.created_at).desc(), col(Article.id).desc()
        )
        return self.attach_tags(db, db.exec(query).all())

    def get_article_by_slug(self, db: Session, slug: str) -> Optional[ArticleWithRelations]:
        """Get article by exact slug, or None."""
        row = db.exec(self._article_query().where(Article.slug == slug)).first()
        if not row:
            return None
        return self.attach_tags(db, [row])[0]

    def update_article(self, db: Session, article_data: ArticleUpdate) -> ArticleWithRelations:
        """
        Update an article.

        Only fields present in ``article_data`` change. When ``tag_ids`` is
        present the tag links are replaced in the same transaction as the
        field update; when it is omitted the links are left alone.
        """
        article = db.get(Article, article_data.id)
        if not article:
            raise NotFoundError(f"Article with id {article_data.id} not found")

        update_data = article_data.model_dump(exclude_unset=True, exclude={'id', 'tag_ids'})

        if 'category_id' in update_data:
            self._require_category(db, update_data['category_id'])

        tag_ids: Optional[List[int]] = None
        if 'tag_ids' in article_data.model_fields_set:
            tag_ids = _unique(article_data.tag_ids)
            self._require_tags(db, tag_ids)

        if 'slug' in update_data:
            ensure_slug_available(db, Article, update_data['slug'], "Article", exclude_id=article.id)

        with write_transaction(db, "Article"):
            for field, value in update_data.items():
                setattr(article, field, value)
            article.touch()

            if tag_ids is not None:
                db.exec(
                    delete(ArticleTag)
                    .where(ArticleTag.article_id == article.id)
                    .execution_options(synchronize_session="fetch")
                )
                for tag_id in tag_ids:
                    db.add(ArticleTag(article_id=article.id, tag_id=tag_id))

        logger.info(f"Updated article {article_data.id}")
        return self.get_article(db, article_data.id)

    def delete_article(self, db: Session, article_id: int) -> bool:
        """Delete article and its tag links. Returns False if it does not exist."""
        article = db.get(Article, article_id)
        if not article:
            return False

        with write_transaction(db, "Article"):
            db.exec(
                delete(ArticleTag)
                .where(ArticleTag.article_id == article_id)
                .execution_options(synchronize_session="fetch")
            )
            db.delete(article)

        logger.info(f"Deleted article {article_id}")
        return True


# Create singleton instance
blog_crud = BlogCRUD()
