from pydantic import BaseModel, Field, ConfigDict
from datetime import datetime
import uuid
from typing import Optional


class ProductBase(BaseModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    price: float = Field(ge=0)
    stock: int = Field(default=0, ge=0)
    category: Optional[str] = None
    brand: Optional[str] = None
    image_url: Optional[str] = None


class ProductCreateModel(ProductBase):
    pass


class ProductUpdateModel(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0)
    stock: Optional[int] = Field(default=None, ge=0)
    category: Optional[str] = None
    brand: Optional[str] = None
    image_url: Optional[str] = None


class ProductResponse(ProductBase):
    uid: uuid.UUID
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
