from fastapi import Depends
from sqlalchemy.orm import Session

from inventory_tracker.database.session import get_db
from inventory_tracker.repositories.product import ProductRepository
from inventory_tracker.services.product import ProductService


def get_product_repository(db: Session = Depends(get_db)) -> ProductRepository:
    return ProductRepository(db)


def get_product_service(
    repository: ProductRepository = Depends(get_product_repository),
) -> ProductService:
    return ProductService(repository)
