"""
Pydantic schemas for products.

Request fields are all optional at the schema level: missing or blank
values are reported by ``validate_product`` together with every other
problem, instead of failing one field at a time during parsing.  The
read schema adds the derived ``missingLetter`` attribute.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ProductWrite(BaseModel):
    """Schema for creating or replacing a product."""

    name: Optional[str] = Field(None, description="Product name; must not be blank")
    price: Optional[float] = Field(None, description="Unit price; must be greater than zero")
    sku: Optional[str] = Field(None, description="Stock keeping unit; unique across products")


class ProductRead(BaseModel):
    """Schema for reading a product."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    price: float
    sku: str
    missing_letter: str = Field(
        ...,
        alias="missingLetter",
        description="First letter a-z absent from the name, or '_' if none is missing",
    )
