"""Order API router: checkout, history and status lifecycle."""

from fastapi import APIRouter, BackgroundTasks, Depends, status
from loguru import logger

from src.bookstore.api.http.deps import (
    get_current_user,
    get_email_service,
    get_order_service,
    require_admin,
)
from src.bookstore.core.exceptions import ExternalServiceError
from src.bookstore.core.models.order import OrderCreate, OrderDetail, OrderStatusUpdate
from src.bookstore.core.services.notifications import EmailService
from src.bookstore.core.services.sales import OrderService
from src.bookstore.entities import Order, User

router = APIRouter()


async def send_order_confirmation(
    email_service: EmailService, order: OrderDetail, user: User
) -> None:
    """Background task; a failed email never fails the order."""
    try:
        await email_service.send_order_confirmation(order, user)
    except ExternalServiceError as e:
        logger.bind(order_id=order.id).warning(
            "Order confirmation email failed: {}", e
        )


@router.post("/", response_model=OrderDetail, status_code=status.HTTP_201_CREATED)
def create_order(
    payload: OrderCreate,
    background_tasks: BackgroundTasks,
    user: User = Depends(get_current_user),
    service: OrderService = Depends(get_order_service),
    email_service: EmailService = Depends(get_email_service),
) -> OrderDetail:
    """Check out the caller's cart."""
    order = service.create_order(user.id, payload)
    background_tasks.add_task(send_order_confirmation, email_service, order, user)
    return order


@router.get("/", response_model=list[Order])
def list_orders(
    user: User = Depends(get_current_user),
    service: OrderService = Depends(get_order_service),
) -> list[Order]:
    """Admins see every order, customers their own."""
    return service.get_orders(None if user.is_admin else user.id)


@router.get("/{order_id}", response_model=OrderDetail)
def get_order(
    order_id: str,
    user: User = Depends(get_current_user),
    service: OrderService = Depends(get_order_service),
) -> OrderDetail:
    return service.get_order_for_user(order_id, user)


@router.put(
    "/{order_id}/status",
    response_model=OrderDetail,
    dependencies=[Depends(require_admin)],
)
def update_order_status(
    order_id: str,
    payload: OrderStatusUpdate,
    service: OrderService = Depends(get_order_service),
) -> OrderDetail:
    return service.update_status(order_id, payload.status)


@router.post("/{order_id}/cancel", response_model=OrderDetail)
def cancel_order(
    order_id: str,
    user: User = Depends(get_current_user),
    service: OrderService = Depends(get_order_service),
) -> OrderDetail:
    return service.cancel_order(order_id, user)
