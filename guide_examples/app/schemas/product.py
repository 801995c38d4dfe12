"""
Pydantic models for the product catalogue.

Products are read-only demo payloads: the catalogue is built once when
the application starts and only ever listed or looked up by id.
"""

from typing import Tuple

from pydantic import BaseModel, Field


class ProductRead(BaseModel):
    """Schema for reading a product from the API."""

    id: int = Field(..., examples=[2])
    name: str = Field(..., examples=["Mouse"])
    price: float = Field(..., ge=0, examples=[29.99])

    model_config = {
        "frozen": True,
        "from_attributes": True,
    }


DEFAULT_PRODUCTS: Tuple[ProductRead, ...] = (
    ProductRead(id=1, name="Laptop", price=999.99),
    ProductRead(id=2, name="Mouse", price=29.99),
    ProductRead(id=3, name="Keyboard", price=79.99),
)
