import pytest
from sqlmodel import Session

from inkwell.core.exceptions import NotFoundError, UniqueConstraintViolation
from inkwell.crud.page import static_page_crud
from inkwell.schemas.page import StaticPageCreate, StaticPageUpdate


@pytest.fixture(name="about_page")
def about_page_fixture(session: Session):
    return static_page_crud.create_static_page(session, StaticPageCreate(
        slug="about",
        title="About",
        content="Who writes here",
        seo_title="About the author"
    ))


class TestStaticPageCrud:
    def test_create_and_list(self, session: Session, about_page):
        assert about_page.id is not None
        assert about_page.created_at == about_page.updated_at

        pages = static_page_crud.get_static_pages(session)
        assert [p.slug for p in pages] == ["about"]
        assert pages[0].seo_title == "About the author"

    def test_list_ordered_by_slug(self, session: Session, about_page):
        static_page_crud.create_static_page(session, StaticPageCreate(slug="contact", title="Contact", content="Mail me"))
        static_page_crud.create_static_page(session, StaticPageCreate(slug="0-start", title="Start", content="Begin"))

        assert [p.slug for p in static_page_crud.get_static_pages(session)] == ["0-start", "about", "contact"]

    def test_duplicate_slug(self, session: Session, about_page):
        with pytest.raises(UniqueConstraintViolation) as exc_info:
            static_page_crud.create_static_page(session, StaticPageCreate(slug="about", title="Again", content="x"))
        assert exc_info.value.message == "Static page with slug 'about' already exists"

    def test_get_by_slug(self, session: Session, about_page):
        page = static_page_crud.get_static_page_by_slug(session, "about")
        assert page is not None
        assert page.id == about_page.id

    def test_get_by_slug_case_sensitive(self, session: Session, about_page):
        assert static_page_crud.get_static_page_by_slug(session, "About") is None
        assert static_page_crud.get_static_page_by_slug(session, "missing") is None

    def test_update(self, session: Session, about_page):
        previous = about_page.updated_at

        page = static_page_crud.update_static_page(session, StaticPageUpdate(
            id=about_page.id, content="New content", seo_title=None
        ))

        assert page.content == "New content"
        assert page.seo_title is None
        assert page.title == "About"
        assert page.updated_at > previous

    def test_update_slug_conflict(self, session: Session, about_page):
        other = static_page_crud.create_static_page(session, StaticPageCreate(slug="contact", title="Contact", content="Mail me"))

        with pytest.raises(UniqueConstraintViolation):
            static_page_crud.update_static_page(session, StaticPageUpdate(id=other.id, slug="about"))

    def test_update_unknown_page(self, session: Session):
        with pytest.raises(NotFoundError) as exc_info:
            static_page_crud.update_static_page(session, StaticPageUpdate(id=3, title="Ghost"))
        assert exc_info.value.message == "Static page with id 3 not found"

    def test_delete(self, session: Session, about_page):
        page_id = about_page.id

        assert static_page_crud.delete_static_page(session, page_id) is True
        assert static_page_crud.get_static_pages(session) == []
        assert static_page_crud.delete_static_page(session, page_id) is False
