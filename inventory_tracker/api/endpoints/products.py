from typing import List

from fastapi import APIRouter, Depends, Path, Query, Response, status

from inventory_tracker.api.deps import get_product_service
from inventory_tracker.schemas.product import (
    INT64_MAX,
    INT64_MIN,
    InventoryStatistics,
    ProductCreate,
    ProductInDB,
    ProductUpdate,
)
from inventory_tracker.services.product import ProductService

router = APIRouter()

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"description": "Product not found (empty body)"}}

# Collection routes answer both with and without the trailing slash
@router.get("", response_model=List[ProductInDB])
@router.get("/", response_model=List[ProductInDB], include_in_schema=False)
def get_products(service: ProductService = Depends(get_product_service)):
    """Get all products."""
    return service.get_all_products()

@router.post("", response_model=ProductInDB, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=ProductInDB, status_code=status.HTTP_201_CREATED, include_in_schema=False)
def create_product(
    product: ProductCreate,
    service: ProductService = Depends(get_product_service)
):
    """Create a new product."""
    return service.create_product(product)

# Fixed paths must be registered before /{product_id}

@router.get("/search", response_model=List[ProductInDB])
def search_products(
    query: str = Query(..., description="Case-insensitive text matched against name, category and supplier"),
    service: ProductService = Depends(get_product_service)
):
    """Search for products by name, category or supplier."""
    return service.search_products(query)

@router.get("/low-stock", response_model=List[ProductInDB])
def get_low_stock_products(service: ProductService = Depends(get_product_service)):
    """Products whose quantity is at or below their minimum stock."""
    return service.get_low_stock_products()

@router.get("/out-of-stock", response_model=List[ProductInDB])
def get_out_of_stock_products(service: ProductService = Depends(get_product_service)):
    """Products with zero quantity."""
    return service.get_out_of_stock_products()

@router.get("/statistics", response_model=InventoryStatistics)
def get_statistics(service: ProductService = Depends(get_product_service)):
    """Get product counts and total inventory value."""
    return service.get_statistics()

@router.get("/categories", response_model=List[str])
def get_categories(service: ProductService = Depends(get_product_service)):
    """Distinct product categories, sorted."""
    return service.get_all_categories()

@router.get("/suppliers", response_model=List[str])
def get_suppliers(service: ProductService = Depends(get_product_service)):
    """Distinct suppliers, sorted."""
    return service.get_all_suppliers()

@router.get("/by-category/{category}", response_model=List[ProductInDB])
def get_products_by_category(
    category: str,
    service: ProductService = Depends(get_product_service)
):
    """Get products in exactly this category."""
    return service.get_products_by_category(category)

@router.get("/by-supplier/{supplier}", response_model=List[ProductInDB])
def get_products_by_supplier(
    supplier: str,
    service: ProductService = Depends(get_product_service)
):
    """Get products from exactly this supplier."""
    return service.get_products_by_supplier(supplier)

@router.get("/{product_id}", response_model=ProductInDB, responses=NOT_FOUND)
def get_product(
    product_id: int = Path(..., ge=INT64_MIN, le=INT64_MAX),
    service: ProductService = Depends(get_product_service)
):
    """Get a specific product by ID."""
    product = service.get_product_by_id(product_id)
    if product is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return product

@router.put("/{product_id}", response_model=ProductInDB, responses=NOT_FOUND)
def update_product(
    product_update: ProductUpdate,
    product_id: int = Path(..., ge=INT64_MIN, le=INT64_MAX),
    service: ProductService = Depends(get_product_service)
):
    """Replace every field of a product. Unknown ids are answered with 404."""
    return service.update_product(product_id, product_update)

@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: int = Path(..., ge=INT64_MIN, le=INT64_MAX),
    service: ProductService = Depends(get_product_service)
):
    """Delete a product. Succeeds whether or not it existed."""
    service.delete_product(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
