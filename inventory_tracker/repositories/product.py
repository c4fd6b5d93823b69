"""Persistence of Product records."""

import logging
from contextlib import contextmanager
from datetime import datetime, timedelta, timezone
from typing import Iterator, List, Optional

from sqlalchemy import delete, func, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from inventory_tracker.core.exceptions import StorageError
from inventory_tracker.models.product import Product

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    # Naive UTC; SQLite drops tzinfo on the way back anyway
    return datetime.now(timezone.utc).replace(tzinfo=None)


class ProductRepository:
    """Repository for Product database operations."""

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _storage_errors(self) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error(f"Storage operation failed: {exc}")
            raise StorageError(str(exc)) from exc

    def find_all(self) -> List[Product]:
        with self._storage_errors():
            return list(self.db.scalars(select(Product).order_by(Product.id)))

    def find_by_id(self, product_id: int) -> Optional[Product]:
        with self._storage_errors():
            return self.db.get(Product, product_id)

    def count(self) -> int:
        with self._storage_errors():
            return self.db.scalar(select(func.count(Product.id))) or 0

    def save(self, product: Product) -> Product:
        """Insert ``product`` when it has no id, otherwise overwrite the stored row.

        ``last_updated`` is stamped here and always moves forward, even when two
        writes land within the clock's resolution.
        """
        now = _utcnow()
        if product.last_updated is not None and now <= product.last_updated:
            now = product.last_updated + timedelta(microseconds=1)
        product.last_updated = now

        with self._storage_errors():
            if product.id is None:
                self.db.add(product)
            else:
                product = self.db.merge(product)
            self.db.commit()
            self.db.refresh(product)
        return product

    def delete_by_id(self, product_id: int) -> None:
        """Remove the product if present; deleting an unknown id is a no-op."""
        with self._storage_errors():
            self.db.execute(delete(Product).where(Product.id == product_id))
            self.db.commit()

    def find_by_category(self, category: str) -> List[Product]:
        with self._storage_errors():
            return list(self.db.scalars(
                select(Product).where(Product.category == category).order_by(Product.id)
            ))

    def find_by_supplier(self, supplier: str) -> List[Product]:
        with self._storage_errors():
            return list(self.db.scalars(
                select(Product).where(Product.supplier == supplier).order_by(Product.id)
            ))

    def find_low_stock(self) -> List[Product]:
        with self._storage_errors():
            return list(self.db.scalars(
                select(Product).where(Product.quantity <= Product.min_stock).order_by(Product.id)
            ))

    def find_out_of_stock(self) -> List[Product]:
        with self._storage_errors():
            return list(self.db.scalars(
                select(Product).where(Product.quantity == 0).order_by(Product.id)
            ))

    def search(self, term: str) -> List[Product]:
        """Products whose name, category or supplier contains ``term``, ignoring case."""
        # autoescape makes % and _ in the term match literally
        condition = or_(
            Product.name.icontains(term, autoescape=True),
            Product.category.icontains(term, autoescape=True),
            Product.supplier.icontains(term, autoescape=True),
        )
        with self._storage_errors():
            return list(self.db.scalars(select(Product).where(condition).order_by(Product.id)))
