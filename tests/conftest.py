import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, create_engine
from sqlmodel.pool import StaticPool

from inkwell.main import app
from inkwell.database.engine import get_db, enable_sqlite_foreign_keys
from inkwell.crud.blog import blog_crud
from inkwell.models.blog import ArticleStatus
from inkwell.schemas.blog import ArticleCreate, CategoryCreate, TagCreate

# Test database setup
@pytest.fixture(name="session")
def session_fixture():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    enable_sqlite_foreign_keys(engine)
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session

@pytest.fixture(name="client")
def client_fixture(session: Session):
    def get_session_override():
        return session

    app.dependency_overrides[get_db] = get_session_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()

@pytest.fixture(name="category")
def category_fixture(session: Session):
    return blog_crud.create_category(session, CategoryCreate(
        name="Tech",
        slug="tech",
        description="Programming and tools"
    ))

@pytest.fixture(name="other_category")
def other_category_fixture(session: Session):
    return blog_crud.create_category(session, CategoryCreate(
        name="Travel",
        slug="travel",
        description=None
    ))

@pytest.fixture(name="tags")
def tags_fixture(session: Session):
    js = blog_crud.create_tag(session, TagCreate(name="JS", slug="js"))
    react = blog_crud.create_tag(session, TagCreate(name="React", slug="react"))
    python = blog_crud.create_tag(session, TagCreate(name="Python", slug="python"))

    return {
        "js": js,
        "react": react,
        "python": python
    }

@pytest.fixture(name="make_article")
def make_article_fixture(session: Session, category):
    """Factory creating articles in the ``category`` fixture unless told otherwise."""
    def make_article(slug: str, **fields):
        data = {
            "title": slug.replace("-", " ").title(),
            "slug": slug,
            "content": f"Content of {slug}",
            "status": ArticleStatus.published,
            "category_id": category.id,
        }
        data.update(fields)
        return blog_crud.create_article(session, ArticleCreate(**data))

    return make_article
