from pydantic import BaseModel, Field, ConfigDict, EmailStr
from typing import List, Optional
from datetime import datetime
import uuid

from shop_admin.db.models import OrderStatus


class OrderItemModel(BaseModel):
    product_id: Optional[uuid.UUID] = None
    product_name: str = Field(min_length=1)
    description: Optional[str] = None
    quantity: int = Field(ge=1)
    price: float = Field(ge=0)
    discount: float = Field(default=0.0, ge=0)


class OrderBase(BaseModel):
    order_number: str = Field(min_length=1)
    customer_name: str = Field(min_length=1)
    customer_email: EmailStr
    items: List[OrderItemModel] = Field(min_length=1)
    subtotal: float = Field(ge=0)
    total_discount: float = Field(default=0.0, ge=0)
    total: float = Field(ge=0)
    status: OrderStatus = OrderStatus.pending


class OrderCreate(OrderBase):
    order_date: Optional[datetime] = None


class OrderUpdate(BaseModel):
    order_number: Optional[str] = Field(default=None, min_length=1)
    customer_name: Optional[str] = Field(default=None, min_length=1)
    customer_email: Optional[EmailStr] = None
    items: Optional[List[OrderItemModel]] = Field(default=None, min_length=1)
    subtotal: Optional[float] = Field(default=None, ge=0)
    total_discount: Optional[float] = Field(default=None, ge=0)
    total: Optional[float] = Field(default=None, ge=0)
    status: Optional[OrderStatus] = None
    order_date: Optional[datetime] = None


class OrderResponse(OrderBase):
    uid: uuid.UUID
    order_date: datetime
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
