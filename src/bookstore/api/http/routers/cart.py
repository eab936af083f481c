"""Cart API router; always operates on the caller's own cart."""

from fastapi import APIRouter, Depends

from src.bookstore.api.http.deps import get_cart_service, get_current_user
from src.bookstore.core.models.cart import CartDetail, CartItemAdd, CartItemUpdate
from src.bookstore.core.models.common import MessageResponse
from src.bookstore.core.services.sales import CartService
from src.bookstore.entities import User

router = APIRouter()


@router.get("/", response_model=CartDetail)
def get_cart(
    user: User = Depends(get_current_user),
    service: CartService = Depends(get_cart_service),
) -> CartDetail:
    return service.get_cart(user.id)


@router.post("/items", response_model=CartDetail)
def add_cart_item(
    payload: CartItemAdd,
    user: User = Depends(get_current_user),
    service: CartService = Depends(get_cart_service),
) -> CartDetail:
    return service.add_item(user.id, payload.book_id, payload.quantity)


@router.put("/items/{item_id}", response_model=CartDetail)
def update_cart_item(
    item_id: str,
    payload: CartItemUpdate,
    user: User = Depends(get_current_user),
    service: CartService = Depends(get_cart_service),
) -> CartDetail:
    return service.update_item(user.id, item_id, payload.quantity)


@router.delete("/items/{item_id}", response_model=CartDetail)
def remove_cart_item(
    item_id: str,
    user: User = Depends(get_current_user),
    service: CartService = Depends(get_cart_service),
) -> CartDetail:
    return service.remove_item(user.id, item_id)


@router.delete("/", response_model=MessageResponse)
def clear_cart(
    user: User = Depends(get_current_user),
    service: CartService = Depends(get_cart_service),
) -> MessageResponse:
    removed = service.clear(user.id)
    return MessageResponse(message=f"Removed {removed} item(s) from cart")
