from sqlmodel import Session

from inkwell.crud.blog import blog_crud
from inkwell.crud.page import static_page_crud
from inkwell.database.seed import seed_demo_content
from inkwell.models.blog import ArticleStatus
from inkwell.schemas.blog import CategoryCreate


class TestSeedDemoContent:
    def test_seed_empty_database(self, session: Session):
        assert seed_demo_content(session) is True

        assert [c.slug for c in blog_crud.get_categories(session)] == ["life", "tech"]
        assert len(blog_crud.get_tags(session)) == 3
        assert [p.slug for p in static_page_crud.get_static_pages(session)] == ["about"]

        hello = blog_crud.get_article_by_slug(session, "hello-world")
        assert hello.status == ArticleStatus.published
        assert hello.category.slug == "life"
        assert [t.slug for t in hello.tags] == ["notes"]

        draft = blog_crud.get_article_by_slug(session, "javascript-and-python")
        assert draft.status == ArticleStatus.draft
        assert [t.slug for t in draft.tags] == ["javascript", "python"]

    def test_seed_runs_once(self, session: Session):
        assert seed_demo_content(session) is True
        assert seed_demo_content(session) is False
        assert len(blog_crud.get_articles(session)) == 2

    def test_seed_skips_populated_database(self, session: Session):
        blog_crud.create_category(session, CategoryCreate(name="Mine", slug="mine"))

        assert seed_demo_content(session) is False
        assert blog_crud.get_articles(session) == []
