# inkwell/crud/page.py
import logging
from sqlmodel import Session, select
from typing import List, Optional

from inkwell.core.exceptions import NotFoundError
from inkwell.crud.base import write_transaction, ensure_slug_available, ordinal
from inkwell.models.mixins import utcnow
from inkwell.models.page import StaticPage
from inkwell.schemas.page import StaticPageCreate, StaticPageUpdate

logger = logging.getLogger(__name__)


class StaticPageCRUD:
    def create_static_page(self, db: Session, page_data: StaticPageCreate) -> StaticPage:
        """Create a new static page."""
        ensure_slug_available(db, StaticPage, page_data.slug, "Static page")

        now = utcnow()
        page = StaticPage(**page_data.model_dump(), created_at=now, updated_at=now)

        with write_transaction(db, "Static page"):
            db.add(page)

        db.refresh(page)
        logger.info(f"Created static page {page.id} ({page.slug})")
        return page

    def get_static_pages(self, db: Session) -> List[StaticPage]:
        """Get all static pages ordered by slug."""
        query = select(StaticPage).order_by(ordinal(db, StaticPage.slug))
        return list(db.exec(query).all())

    def get_static_page_by_slug(self, db: Session, slug: str) -> Optional[StaticPage]:
        """Get static page by exact slug."""
        return db.exec(select(StaticPage).where(StaticPage.slug == slug)).first()

    def update_static_page(self, db: Session, page_data: StaticPageUpdate) -> StaticPage:
        """Update the fields present in ``page_data``."""
        page = db.get(StaticPage, page_data.id)
        if not page:
            raise NotFoundError(f"Static page with id {page_data.id} not found")

        update_data = page_data.model_dump(exclude_unset=True, exclude={'id'})

        if 'slug' in update_data:
            ensure_slug_available(db, StaticPage, update_data['slug'], "Static page", exclude_id=page.id)

        with write_transaction(db, "Static page"):
            for field, value in update_data.items():
                setattr(page, field, value)
            page.touch()

        db.refresh(page)
        logger.info(f"Updated static page {page.id}")
        return page

    def delete_static_page(self, db: Session, page_id: int) -> bool:
        """Delete static page. Returns False if it does not exist."""
        page = db.get(StaticPage, page_id)
        if not page:
            return False

        with write_transaction(db, "Static page"):
            db.delete(page)

        logger.info(f"Deleted static page {page_id}")
        return True


static_page_crud = StaticPageCRUD()
