"""Helpers shared by the CRUD modules."""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select, col

from inkwell.core.exceptions import InkwellError, UniqueConstraintViolation

logger = logging.getLogger(__name__)


def _is_unique_violation(error: IntegrityError) -> bool:
    message = str(error.orig).lower()
    return "unique" in message or "duplicate" in message


@contextmanager
def write_transaction(db: Session, entity: str) -> Iterator[Session]:
    """
    Run a block of writes as one transaction and commit it.

    Every statement issued inside the block commits together or not at all.
    Slug collisions reported by the database become ``UniqueConstraintViolation``;
    any other database error is logged and re-raised after rolling back.

    Usage:
        with write_transaction(db, "Article"):
            db.add(article)
            db.flush()
            db.add(ArticleTag(article_id=article.id, tag_id=tag_id))
    """
    try:
        yield db
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if _is_unique_violation(e):
            raise UniqueConstraintViolation(f"{entity} with this slug already exists") from e
        logger.error(f"Integrity error while saving {entity.lower()}: {e}")
        raise
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Database error while saving {entity.lower()}: {e}")
        raise
    except InkwellError:
        db.rollback()
        raise


def ensure_slug_available(
    db: Session,
    model_class,
    slug: str,
    entity: str,
    exclude_id: Optional[int] = None
) -> None:
    """Raise UniqueConstraintViolation if another row of ``model_class`` uses ``slug``."""
    query = select(model_class.id).where(model_class.slug == slug)
    if exclude_id is not None:
        query = query.where(model_class.id != exclude_id)

    if db.exec(query).first() is not None:
        raise UniqueConstraintViolation(f"{entity} with slug '{slug}' already exists")


def ordinal(db: Session, column):
    """Order by raw code points, independent of the database locale."""
    if db.get_bind().dialect.name == "postgresql":
        return col(column).collate("C")
    # SQLite's default BINARY collation already compares byte-wise
    return column
