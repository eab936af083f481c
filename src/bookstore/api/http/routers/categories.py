"""Category API router."""

from fastapi import APIRouter, Depends, HTTPException, status

from src.bookstore.api.http.deps import get_category_service, require_admin
from src.bookstore.core.models.catalog import CategoryCreate, CategoryUpdate
from src.bookstore.core.models.common import CreatedResponse, MessageResponse
from src.bookstore.core.services.catalog import CategoryService
from src.bookstore.entities import Category

router = APIRouter()


@router.get("/", response_model=list[Category])
def list_categories(service: CategoryService = Depends(get_category_service)) -> list[Category]:
    return service.get_all()


@router.get("/{category_id}", response_model=Category)
def get_category(
    category_id: str, service: CategoryService = Depends(get_category_service)
) -> Category:
    category = service.get_by_id(category_id)
    if category is None:
        raise HTTPException(status_code=404, detail="Category not found")
    return category


@router.post(
    "/",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_category(
    payload: CategoryCreate, service: CategoryService = Depends(get_category_service)
) -> CreatedResponse:
    created = service.create(Category(**payload.model_dump()))
    return CreatedResponse(id=created.id)


@router.put("/{category_id}", response_model=Category, dependencies=[Depends(require_admin)])
def update_category(
    category_id: str,
    payload: CategoryUpdate,
    service: CategoryService = Depends(get_category_service),
) -> Category:
    return service.update(category_id, payload.model_dump(exclude_unset=True))


@router.delete(
    "/{category_id}", response_model=MessageResponse, dependencies=[Depends(require_admin)]
)
def delete_category(
    category_id: str, service: CategoryService = Depends(get_category_service)
) -> MessageResponse:
    if not service.delete(category_id):
        raise HTTPException(status_code=404, detail="Category not found")
    return MessageResponse(message="Category deleted successfully")
