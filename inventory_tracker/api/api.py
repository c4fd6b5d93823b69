from fastapi import APIRouter

from inventory_tracker.api.endpoints import products

api_router = APIRouter()

# Include all API endpoint routers
api_router.include_router(products.router, prefix="/products", tags=["Products"])
