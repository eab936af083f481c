from pydantic import BaseModel, Field


class CartItemAdd(BaseModel):
    book_id: str
    quantity: int = Field(default=1, gt=0)


class CartItemUpdate(BaseModel):
    # 0 removes the line
    quantity: int = Field(ge=0)


class CartLine(BaseModel):
    id: str
    book_id: str
    book_title: str
    unit_price: float
    quantity: int
    line_total: float


class CartDetail(BaseModel):
    id: str
    user_id: str
    items: list[CartLine]
    total_quantity: int
    total: float
