import pytest
from pydantic import ValidationError

from inkwell.models.blog import ArticleStatus
from inkwell.schemas.blog import (
    CategoryCreate, CategoryUpdate, TagCreate, TagUpdate,
    ArticleCreate, ArticleUpdate, SearchArticlesInput
)
from inkwell.schemas.page import StaticPageCreate, StaticPageUpdate


class TestSlugValidation:
    @pytest.mark.parametrize("slug", ["tech", "web-dev", "2024-recap", "a"])
    def test_valid_slugs(self, slug):
        category = CategoryCreate(name="Category", slug=slug)
        assert category.slug == slug

    @pytest.mark.parametrize("slug", ["", "Tech", "web dev", "web_dev", "café", "tech/", "-Caps-"])
    def test_invalid_slugs(self, slug):
        with pytest.raises(ValidationError):
            CategoryCreate(name="Category", slug=slug)

    def test_slug_pattern_applies_to_every_entity(self):
        with pytest.raises(ValidationError):
            TagCreate(name="Tag", slug="Bad Slug")
        with pytest.raises(ValidationError):
            StaticPageCreate(slug="About Us", title="About", content="Hi")
        with pytest.raises(ValidationError):
            ArticleCreate(title="T", slug="UPPER", content="C", category_id=1)


class TestCategorySchemas:
    def test_category_create_description_optional(self):
        category = CategoryCreate(name="Tech", slug="tech")
        assert category.description is None

    def test_category_create_empty_name(self):
        with pytest.raises(ValidationError):
            CategoryCreate(name="", slug="tech")

    def test_category_update_tracks_sent_fields(self):
        update = CategoryUpdate(id=1, description=None)
        assert update.model_dump(exclude_unset=True) == {"id": 1, "description": None}

    def test_category_update_rejects_null_name(self):
        with pytest.raises(ValidationError) as exc_info:
            CategoryUpdate(id=1, name=None)
        assert "name cannot be null" in str(exc_info.value)

    def test_category_update_id_required(self):
        with pytest.raises(ValidationError):
            CategoryUpdate(name="Tech")


class TestTagSchemas:
    def test_tag_update_partial(self):
        update = TagUpdate(id=3, slug="new-slug")
        assert update.model_dump(exclude_unset=True) == {"id": 3, "slug": "new-slug"}

    def test_tag_update_rejects_null_slug(self):
        with pytest.raises(ValidationError):
            TagUpdate(id=3, slug=None)


class TestArticleSchemas:
    def test_article_create_defaults(self):
        article = ArticleCreate(title="Intro", slug="intro", content="Body", category_id=1)
        assert article.status == ArticleStatus.draft
        assert article.tag_ids == []
        assert article.excerpt is None
        assert article.cover_image is None
        assert article.seo_title is None
        assert article.seo_description is None

    def test_article_create_blank_title(self):
        with pytest.raises(ValidationError) as exc_info:
            ArticleCreate(title="   ", slug="intro", content="Body", category_id=1)
        assert "Title cannot be empty" in str(exc_info.value)

    def test_article_create_empty_content(self):
        with pytest.raises(ValidationError):
            ArticleCreate(title="Intro", slug="intro", content="", category_id=1)

    def test_article_create_invalid_status(self):
        with pytest.raises(ValidationError):
            ArticleCreate(title="Intro", slug="intro", content="Body", category_id=1, status="archived")

    def test_article_create_requires_category(self):
        with pytest.raises(ValidationError):
            ArticleCreate(title="Intro", slug="intro", content="Body")

    def test_article_update_omitted_vs_null(self):
        update = ArticleUpdate(id=1, excerpt=None)
        sent = update.model_dump(exclude_unset=True)
        assert sent == {"id": 1, "excerpt": None}
        assert "tag_ids" not in update.model_fields_set

    def test_article_update_empty_tag_list_is_sent(self):
        update = ArticleUpdate(id=1, tag_ids=[])
        assert "tag_ids" in update.model_fields_set
        assert update.tag_ids == []

    @pytest.mark.parametrize("field", ["title", "slug", "content", "status", "category_id", "tag_ids"])
    def test_article_update_rejects_null(self, field):
        with pytest.raises(ValidationError):
            ArticleUpdate(id=1, **{field: None})


class TestSearchArticlesInput:
    def test_defaults(self):
        search = SearchArticlesInput()
        assert search.limit == 10
        assert search.offset == 0
        assert search.query is None
        assert search.tag_ids is None
        assert search.status is None

    @pytest.mark.parametrize("limit", [0, 101, -5])
    def test_limit_bounds(self, limit):
        with pytest.raises(ValidationError):
            SearchArticlesInput(limit=limit)

    def test_limit_edges_accepted(self):
        assert SearchArticlesInput(limit=1).limit == 1
        assert SearchArticlesInput(limit=100).limit == 100

    def test_negative_offset(self):
        with pytest.raises(ValidationError):
            SearchArticlesInput(offset=-1)


class TestStaticPageSchemas:
    def test_static_page_create_minimal(self):
        page = StaticPageCreate(slug="about", title="About", content="Hello")
        assert page.seo_title is None
        assert page.seo_description is None

    def test_static_page_update_rejects_null_title(self):
        with pytest.raises(ValidationError):
            StaticPageUpdate(id=1, title=None)

    def test_static_page_update_allows_null_seo(self):
        update = StaticPageUpdate(id=1, seo_title=None)
        assert update.model_dump(exclude_unset=True) == {"id": 1, "seo_title": None}


class TestBlankText:
    @pytest.mark.parametrize("build", [
        lambda: CategoryCreate(name="   ", slug="tech"),
        lambda: CategoryUpdate(id=1, name=" "),
        lambda: TagCreate(name="\t", slug="js"),
        lambda: TagUpdate(id=1, name="  "),
        lambda: StaticPageCreate(slug="about", title="  ", content="Hi"),
        lambda: StaticPageCreate(slug="about", title="About", content="\n"),
        lambda: StaticPageUpdate(id=1, title=" "),
        lambda: StaticPageUpdate(id=1, content="   "),
        lambda: ArticleUpdate(id=1, content="  "),
    ])
    def test_whitespace_only_rejected(self, build):
        with pytest.raises(ValidationError) as exc_info:
            build()
        assert "cannot be empty" in str(exc_info.value)

    def test_surrounding_whitespace_kept(self):
        assert CategoryCreate(name=" Tech ", slug="tech").name == " Tech "
        assert TagUpdate(id=1, name=" JS").name == " JS"
