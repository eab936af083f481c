"""Book API router: catalog queries, CRUD and photos."""

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile, status

from src.bookstore.api.http.deps import (
    get_book_service,
    get_photo_service,
    require_admin,
)
from src.bookstore.core.models.book import BookCreate, BookDetail, BookUpdate
from src.bookstore.core.models.common import CreatedResponse, MessageResponse, Page
from src.bookstore.core.services.catalog import BookService, PhotoService
from src.bookstore.entities import Book, BookSearchKey, Photo
from src.bookstore.runtime.context import get_config

router = APIRouter()


@router.get("/", response_model=list[Book])
def list_books(service: BookService = Depends(get_book_service)) -> list[Book]:
    """List all books."""
    return service.get_list_books()


@router.get("/paging", response_model=Page[Book])
def list_books_paged(
    search_key: int = Query(default=BookSearchKey.TITLE.value),
    search_title: str = Query(default=""),
    page: int = Query(default=1),
    page_size: int | None = Query(default=None),
    service: BookService = Depends(get_book_service),
) -> Page[Book]:
    """One page of books; ``search_key`` picks the field searched (0 title .. 4 sku)."""
    size = get_config().pagination.default_page_size if page_size is None else page_size
    books, total_row = service.get_all_paging(search_key, search_title, page, size)
    return Page[Book](items=books, total_row=total_row, page=page, page_size=size)


@router.get("/search", response_model=list[Book])
def search_books(
    search_title: str = Query(default=""),
    service: BookService = Depends(get_book_service),
) -> list[Book]:
    return service.get_all_book_by_filter(search_title)


@router.get("/category/{category_name}", response_model=list[Book])
def list_books_by_category(
    category_name: str,
    service: BookService = Depends(get_book_service),
) -> list[Book]:
    return service.get_books_by_category(category_name)


@router.get("/{book_id}", response_model=Book)
def get_book(book_id: str, service: BookService = Depends(get_book_service)) -> Book:
    """Get a book by ID."""
    book = service.get_book_by_id(book_id)
    if book is None:
        raise HTTPException(status_code=404, detail="Book not found")
    return book


@router.get("/{book_id}/detail", response_model=BookDetail)
def get_book_detail(
    book_id: str, service: BookService = Depends(get_book_service)
) -> BookDetail:
    detail = service.get_detail_book_data(book_id)
    if detail is None:
        raise HTTPException(status_code=404, detail="Book not found")
    return detail


@router.post(
    "/",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_book(
    book: BookCreate, service: BookService = Depends(get_book_service)
) -> CreatedResponse:
    """Create a new book."""
    return CreatedResponse(id=service.add_new_book(book))


@router.put("/{book_id}", response_model=Book, dependencies=[Depends(require_admin)])
def update_book(
    book_id: str,
    book_update: BookUpdate,
    service: BookService = Depends(get_book_service),
) -> Book:
    """Update a book."""
    if not service.update_book(book_update, book_id):
        raise HTTPException(status_code=404, detail="Book not found")
    return service.get_book_by_id(book_id)


@router.delete(
    "/{book_id}", response_model=MessageResponse, dependencies=[Depends(require_admin)]
)
async def delete_book(
    book_id: str,
    service: BookService = Depends(get_book_service),
    photos: PhotoService = Depends(get_photo_service),
) -> MessageResponse:
    """Soft-delete a book and drop its hosted photos."""
    if not service.delete_book(book_id):
        raise HTTPException(status_code=404, detail="Book not found")
    await photos.purge_book_photos(book_id)
    return MessageResponse(message="Book deleted successfully")


@router.get("/{book_id}/photos", response_model=list[Photo])
def list_book_photos(
    book_id: str, photos: PhotoService = Depends(get_photo_service)
) -> list[Photo]:
    return photos.list_photos(book_id)


@router.post(
    "/{book_id}/photos",
    response_model=Photo,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def upload_book_photo(
    book_id: str,
    file: UploadFile = File(...),
    photos: PhotoService = Depends(get_photo_service),
) -> Photo:
    content = await file.read()
    return await photos.upload_photo(
        book_id, file.filename or "upload", content, file.content_type
    )


@router.put(
    "/{book_id}/photos/{photo_id}/main",
    response_model=Photo,
    dependencies=[Depends(require_admin)],
)
def set_main_book_photo(
    book_id: str,
    photo_id: str,
    photos: PhotoService = Depends(get_photo_service),
) -> Photo:
    return photos.set_main_photo(book_id, photo_id)


@router.delete(
    "/{book_id}/photos/{photo_id}",
    response_model=MessageResponse,
    dependencies=[Depends(require_admin)],
)
async def delete_book_photo(
    book_id: str,
    photo_id: str,
    photos: PhotoService = Depends(get_photo_service),
) -> MessageResponse:
    if not await photos.delete_photo(book_id, photo_id):
        raise HTTPException(status_code=404, detail="Photo not found")
    return MessageResponse(message="Photo deleted successfully")
