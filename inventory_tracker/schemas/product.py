from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Range of a 64-bit SQL INTEGER; larger values cannot be bound to a query
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# Fields are snake_case in Python and camelCase on the wire (minStock, lastUpdated)
class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

# Base schema for Product shared properties
class ProductBase(CamelModel):
    name: str
    category: str
    quantity: int = Field(ge=INT64_MIN, le=INT64_MAX)
    min_stock: int = Field(ge=INT64_MIN, le=INT64_MAX)
    price: float
    supplier: str

# Schema for creating a new Product; id and lastUpdated are assigned by the server
class ProductCreate(ProductBase):
    pass

# Schema for updating an existing Product; every mutable field is replaced
class ProductUpdate(ProductBase):
    pass

# Schema for Product in DB (returned to client)
class ProductInDB(ProductBase):
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    last_updated: Optional[datetime] = None

# Aggregate figures for the whole inventory
class InventoryStatistics(CamelModel):
    total_products: int
    low_stock_count: int
    out_of_stock_count: int
    total_value: float
