"""
Demo content for a fresh database.

Creates a couple of categories and tags, one published and one draft
article, and an About page, all through the regular CRUD handlers.

To seed the database, run: python -m inkwell.database.seed
"""

import logging

from sqlmodel import Session, select

from inkwell.crud.blog import blog_crud
from inkwell.crud.page import static_page_crud
from inkwell.models.blog import ArticleStatus, Category
from inkwell.schemas.blog import ArticleCreate, CategoryCreate, TagCreate
from inkwell.schemas.page import StaticPageCreate

logger = logging.getLogger(__name__)


def seed_demo_content(db: Session) -> bool:
    """
    Seed demo content unless the database already has categories.

    Returns:
        True if content was created, False if the database was not empty
    """
    if db.exec(select(Category.id)).first() is not None:
        logger.info("Database already has content, skipping seed")
        return False

    tech = blog_crud.create_category(db, CategoryCreate(
        name="Tech",
        slug="tech",
        description="Programming, tools and the web"
    ))
    life = blog_crud.create_category(db, CategoryCreate(
        name="Life",
        slug="life",
        description=None
    ))

    js = blog_crud.create_tag(db, TagCreate(name="JavaScript", slug="javascript"))
    python = blog_crud.create_tag(db, TagCreate(name="Python", slug="python"))
    notes = blog_crud.create_tag(db, TagCreate(name="Notes", slug="notes"))

    blog_crud.create_article(db, ArticleCreate(
        title="Hello, world",
        slug="hello-world",
        content="Welcome to the blog. This first post is here so the home page is not empty.",
        excerpt="Welcome to the blog.",
        status=ArticleStatus.published,
        category_id=life.id,
        tag_ids=[notes.id]
    ))
    blog_crud.create_article(db, ArticleCreate(
        title="JavaScript and Python side by side",
        slug="javascript-and-python",
        content="A draft comparing how the two languages handle the same small tasks.",
        status=ArticleStatus.draft,
        category_id=tech.id,
        tag_ids=[js.id, python.id]
    ))

    static_page_crud.create_static_page(db, StaticPageCreate(
        slug="about",
        title="About",
        content="This is a personal blog.",
        seo_title="About this blog"
    ))

    logger.info("Demo content seeded successfully")
    return True


if __name__ == "__main__":
    from inkwell.database.engine import engine

    logging.basicConfig(level=logging.INFO)
    with Session(engine) as session:
        seed_demo_content(session)
