# inkwell/routers/pages.py
from fastapi import APIRouter, Depends
from sqlmodel import Session
from typing import List, Optional

from inkwell.core.deps import get_db, rpc_input
from inkwell.crud.page import static_page_crud
from inkwell.schemas.common import DeleteInput, DeleteResult, SlugInput, ErrorResponse
from inkwell.schemas.page import StaticPageCreate, StaticPageUpdate, StaticPage

router = APIRouter(
    prefix="/rpc",
    tags=["pages"],
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        409: {"model": ErrorResponse, "description": "Slug already in use"},
    },
)


@router.post("/createStaticPage", response_model=StaticPage)
def create_static_page(
    page_data: StaticPageCreate,
    db: Session = Depends(get_db)
):
    """Create a static page such as About or Contact."""
    page = static_page_crud.create_static_page(db, page_data)
    return StaticPage.model_validate(page)


@router.get("/getStaticPages", response_model=List[StaticPage])
def get_static_pages(db: Session = Depends(get_db)):
    """Get all static pages ordered by slug."""
    return [StaticPage.model_validate(p) for p in static_page_crud.get_static_pages(db)]


@router.get("/getStaticPageBySlug", response_model=Optional[StaticPage])
def get_static_page_by_slug(
    slug_input: SlugInput = Depends(rpc_input(SlugInput)),
    db: Session = Depends(get_db)
):
    """Get a static page by its exact slug. Returns null when there is none."""
    page = static_page_crud.get_static_page_by_slug(db, slug_input.slug)
    return StaticPage.model_validate(page) if page else None


@router.post("/updateStaticPage", response_model=StaticPage)
def update_static_page(
    page_data: StaticPageUpdate,
    db: Session = Depends(get_db)
):
    """Update a static page."""
    page = static_page_crud.update_static_page(db, page_data)
    return StaticPage.model_validate(page)


@router.post("/deleteStaticPage", response_model=DeleteResult)
def delete_static_page(
    delete_data: DeleteInput,
    db: Session = Depends(get_db)
):
    """Delete a static page. Returns ``success: false`` for an unknown id."""
    return DeleteResult(success=static_page_crud.delete_static_page(db, delete_data.id))
