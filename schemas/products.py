from pydantic import BaseModel, Field
from typing import Optional


class ProductCreate(BaseModel):
    title: str = Field(min_length=1)
    description: str = ""
    price: float = Field(ge=0)
    category: str
    rating: Optional[float] = Field(None, ge=0, le=5)
    stock: int = Field(0, ge=0)
    image: Optional[str] = Field(None, description="Path under /images/products")

class ProductUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    category: Optional[str] = None
    rating: Optional[float] = Field(None, ge=0, le=5)
    stock: Optional[int] = Field(None, ge=0)
    image: Optional[str] = None

class Product(ProductCreate):
    id: int
