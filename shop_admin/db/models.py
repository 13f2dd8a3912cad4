from sqlmodel import Relationship, SQLModel, Field
from datetime import datetime, timezone
from typing import List, Optional
import uuid
from sqlalchemy import Column, String, DateTime, JSON
from enum import Enum


def utc_now() -> datetime:
    """Naive UTC timestamp, the form every datetime column is stored in."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


"""
___________________________________________________

1.  Role / User Tables
___________________________________________________

"""
class UserRoleLink(SQLModel, table = True):
    __tablename__ = 'user_roles'

    user_uid : uuid.UUID = Field(foreign_key="users.uid", primary_key=True)
    role_uid : uuid.UUID = Field(foreign_key="roles.uid", primary_key=True)


class Role(SQLModel, table = True):
    __tablename__ = 'roles'

    uid : uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    name : str = Field(sa_column=Column(String, unique=True, index=True, nullable=False))
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime, default=utc_now))

    def __repr__(self):
        return f'<Role {self.name}>'


class User(SQLModel, table = True):
    __tablename__ = 'users'

    uid : uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    name : str
    email : str = Field(sa_column=Column(String, unique=True, index=True, nullable=False))
    password_hash : str = Field(exclude=True)
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime, default=utc_now))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime, default=utc_now))

    roles: List[Role] = Relationship(link_model=UserRoleLink, sa_relationship_kwargs={'lazy':'selectin'})

    @property
    def role_names(self) -> List[str]:
        return [role.name for role in self.roles]

    def __repr__(self):
        return f'<User {self.email}>'


"""
___________________________________________________

2.  Product Table
___________________________________________________

"""
class Product(SQLModel, table=True):
    __tablename__ = "products"

    uid: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    name: str
    description: Optional[str] = None
    price: float = Field(ge=0)
    stock: int = Field(default=0, ge=0)
    category: Optional[str] = None
    brand: Optional[str] = None
    image_url: Optional[str] = None
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime, default=utc_now))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime, default=utc_now))

    def __repr__(self):
        return f"<Product {self.name}>"


"""
___________________________________________________

3.  Order Table
___________________________________________________

"""
class OrderStatus(str, Enum):
    pending = "pending"
    confirmed = "confirmed"
    shipped = "shipped"
    delivered = "delivered"
    cancelled = "cancelled"


class Order(SQLModel, table=True):
    __tablename__ = "orders"

    uid: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    order_number: str = Field(sa_column=Column(String, unique=True, index=True, nullable=False))
    customer_name: str
    customer_email: str
    # line items are kept as an embedded document: product data is copied at purchase time
    items: List[dict] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    subtotal: float = Field(ge=0)
    total_discount: float = Field(default=0.0, ge=0)
    total: float = Field(ge=0)
    status: OrderStatus = Field(default=OrderStatus.pending)
    order_date: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime, default=utc_now))
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime, default=utc_now))

    def __repr__(self):
        return f"<Order {self.order_number}>"


"""
___________________________________________________

4.  Coupon Table
___________________________________________________

"""
class DiscountType(str, Enum):
    percentage = "percentage"
    fixed = "fixed"


class Coupon(SQLModel, table=True):
    __tablename__ = "coupons"

    uid: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    code: str = Field(sa_column=Column(String, unique=True, index=True, nullable=False))  # always upper-case
    discount_type: DiscountType
    discount_value: float = Field(ge=0)  # e.g. 15 for 15% or 15 currency units
    min_purchase: float = Field(default=0.0, ge=0)
    max_uses: Optional[int] = Field(default=None, ge=0)  # None = unlimited
    current_uses: int = Field(default=0, ge=0)
    expiration_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime, nullable=True))  # None = never
    is_active: bool = True
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime, default=utc_now))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime, default=utc_now))

    def __repr__(self):
        return f"<Coupon {self.code}>"
