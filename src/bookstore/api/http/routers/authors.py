"""Author API router."""

from fastapi import APIRouter, Depends, HTTPException, status

from src.bookstore.api.http.deps import get_author_service, require_admin
from src.bookstore.core.models.catalog import AuthorCreate, AuthorUpdate
from src.bookstore.core.models.common import CreatedResponse, MessageResponse
from src.bookstore.core.services.catalog import AuthorService
from src.bookstore.entities import Author

router = APIRouter()


@router.get("/", response_model=list[Author])
def list_authors(service: AuthorService = Depends(get_author_service)) -> list[Author]:
    return service.get_all()


@router.get("/{author_id}", response_model=Author)
def get_author(
    author_id: str, service: AuthorService = Depends(get_author_service)
) -> Author:
    author = service.get_by_id(author_id)
    if author is None:
        raise HTTPException(status_code=404, detail="Author not found")
    return author


@router.post(
    "/",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_author(
    payload: AuthorCreate, service: AuthorService = Depends(get_author_service)
) -> CreatedResponse:
    created = service.create(Author(**payload.model_dump()))
    return CreatedResponse(id=created.id)


@router.put("/{author_id}", response_model=Author, dependencies=[Depends(require_admin)])
def update_author(
    author_id: str,
    payload: AuthorUpdate,
    service: AuthorService = Depends(get_author_service),
) -> Author:
    return service.update(author_id, payload.model_dump(exclude_unset=True))


@router.delete(
    "/{author_id}", response_model=MessageResponse, dependencies=[Depends(require_admin)]
)
def delete_author(
    author_id: str, service: AuthorService = Depends(get_author_service)
) -> MessageResponse:
    if not service.delete(author_id):
        raise HTTPException(status_code=404, detail="Author not found")
    return MessageResponse(message="Author deleted successfully")
