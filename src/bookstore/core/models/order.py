from datetime import datetime

from pydantic import BaseModel, Field

from src.bookstore.entities import OrderStatus


class OrderCreate(BaseModel):
    shipping_address: str = Field(min_length=1)
    phone: str | None = None
    note: str | None = None


class OrderStatusUpdate(BaseModel):
    status: OrderStatus


class OrderLine(BaseModel):
    id: str
    book_id: str
    book_title: str
    unit_price: float
    quantity: int
    line_total: float


class OrderDetail(BaseModel):
    id: str
    user_id: str
    status: OrderStatus
    total: float
    shipping_address: str
    phone: str | None
    note: str | None
    items: list[OrderLine]
    created_at: datetime
    updated_at: datetime
