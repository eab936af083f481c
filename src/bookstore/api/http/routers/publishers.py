"""Publisher API router."""

from fastapi import APIRouter, Depends, HTTPException, status

from src.bookstore.api.http.deps import get_publisher_service, require_admin
from src.bookstore.core.models.catalog import PublisherCreate, PublisherUpdate
from src.bookstore.core.models.common import CreatedResponse, MessageResponse
from src.bookstore.core.services.catalog import PublisherService
from src.bookstore.entities import Publisher

router = APIRouter()


@router.get("/", response_model=list[Publisher])
def list_publishers(service: PublisherService = Depends(get_publisher_service)) -> list[Publisher]:
    return service.get_all()


@router.get("/{publisher_id}", response_model=Publisher)
def get_publisher(
    publisher_id: str, service: PublisherService = Depends(get_publisher_service)
) -> Publisher:
    publisher = service.get_by_id(publisher_id)
    if publisher is None:
        raise HTTPException(status_code=404, detail="Publisher not found")
    return publisher


@router.post(
    "/",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_publisher(
    payload: PublisherCreate, service: PublisherService = Depends(get_publisher_service)
) -> CreatedResponse:
    created = service.create(Publisher(**payload.model_dump()))
    return CreatedResponse(id=created.id)


@router.put("/{publisher_id}", response_model=Publisher, dependencies=[Depends(require_admin)])
def update_publisher(
    publisher_id: str,
    payload: PublisherUpdate,
    service: PublisherService = Depends(get_publisher_service),
) -> Publisher:
    return service.update(publisher_id, payload.model_dump(exclude_unset=True))


@router.delete(
    "/{publisher_id}", response_model=MessageResponse, dependencies=[Depends(require_admin)]
)
def delete_publisher(
    publisher_id: str, service: PublisherService = Depends(get_publisher_service)
) -> MessageResponse:
    if not service.delete(publisher_id):
        raise HTTPException(status_code=404, detail="Publisher not found")
    return MessageResponse(message="Publisher deleted successfully")
