# api/routes/libraries.py

import logging
from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.orm import Session

from core.config import settings
from core.exceptions import ReferenceNotFoundError
from core.sa.database import get_db
from core.sa.repositories.library import LibraryRepository
from api.schemas import Page, LibraryCreate, LibrarySchema

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/libraries", tags=["libraries"])

def _get_or_422(repo: LibraryRepository, library_id: int):
    library = repo.get_by_id(library_id)
    if library is None:
        logger.warning(f"Library {library_id} not found")
        raise ReferenceNotFoundError("Library", library_id)
    return library

@router.post("", response_model=LibrarySchema, status_code=status.HTTP_201_CREATED)
def create_library(
    payload: LibraryCreate,
    request: Request,
    response: Response,
    db: Session = Depends(get_db)
):
    """
    Create a library. The response carries a Location header pointing to the
    new resource.
    """
    repo = LibraryRepository(db)
    library = repo.create(payload.name)
    logger.info(f"Created library {library.id}")
    response.headers["Location"] = str(request.url_for("get_library", library_id=library.id))
    return library

@router.put("/{library_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_library(library_id: int, payload: LibraryCreate, db: Session = Depends(get_db)):
    """
    Replace a library's fields. The library keeps its ID whatever the body says.
    """
    repo = LibraryRepository(db)
    library = _get_or_422(repo, library_id)
    repo.update(library, name=payload.name)
    logger.info(f"Updated library {library_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.delete("/{library_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_library(library_id: int, db: Session = Depends(get_db)):
    """
    Delete a library together with the books it owns.
    """
    repo = LibraryRepository(db)
    library = _get_or_422(repo, library_id)
    repo.delete(library)
    logger.info(f"Deleted library {library_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.get("", response_model=Page[LibrarySchema])
def list_libraries(
    page: int = Query(1, ge=1, description="Page number"),
    size: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size, description="Items per page"),
    sort: str = Query("id", description="Sort field (id, name, created_at)"),
    order: str = Query("asc", description="Sort order (asc or desc)"),
    db: Session = Depends(get_db)
):
    """
    Get a paginated list of libraries.

    Args:
        page: Page number (1-based)
        size: Number of items per page
        sort: Field to sort by
        order: Sort order (asc or desc)
        db: Database session

    Returns:
        Page of libraries. A page past the end has no items.
    """
    repo = LibraryRepository(db)
    libraries, total = repo.find_page(page=page, size=size, sort_field=sort, sort_order=order)
    return Page[LibrarySchema].build(
        items=[LibrarySchema.model_validate(library) for library in libraries],
        total=total,
        page=page,
        size=size
    )

@router.get("/{library_id}", response_model=LibrarySchema)
def get_library(library_id: int, db: Session = Depends(get_db)):
    repo = LibraryRepository(db)
    return _get_or_422(repo, library_id)
