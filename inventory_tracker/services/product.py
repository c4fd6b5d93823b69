import logging
from typing import List, Optional

from inventory_tracker.core.exceptions import ProductNotFoundError
from inventory_tracker.models.product import Product
from inventory_tracker.repositories.product import ProductRepository
from inventory_tracker.schemas.product import InventoryStatistics, ProductCreate, ProductUpdate

# Configure logging
logger = logging.getLogger(__name__)

# Fields a caller may set; id and last_updated are owned by the storage layer
MUTABLE_FIELDS = ("name", "category", "quantity", "min_stock", "price", "supplier")

class ProductService:
    """
    Business rules for the product inventory, layered over a ProductRepository.

    The service is the only place that decides whether a product is "not found";
    the repository just reports what is stored.
    """

    def __init__(self, repository: ProductRepository):
        """
        Initialize the service.

        Args:
            repository: Repository used for every read and write
        """
        self.repository = repository

    def get_all_products(self) -> List[Product]:
        return self.repository.find_all()

    def get_product_by_id(self, product_id: int) -> Optional[Product]:
        """Return the product, or None so the caller can choose the response."""
        return self.repository.find_by_id(product_id)

    def create_product(self, data: ProductCreate) -> Product:
        """
        Store a new product.

        Any id supplied by the caller is ignored so a new row is always inserted.

        Args:
            data: Product fields supplied by the caller

        Returns:
            The persisted product with id and last_updated populated
        """
        product = Product(**data.model_dump(include=set(MUTABLE_FIELDS)))
        product = self.repository.save(product)
        logger.info(f"Created product {product.id} ({product.name})")
        return product

    def update_product(self, product_id: int, data: ProductUpdate) -> Product:
        """
        Overwrite every mutable field of an existing product.

        Args:
            product_id: Id of the product to update
            data: Replacement values for all mutable fields

        Returns:
            The updated product; its id is unchanged and last_updated refreshed

        Raises:
            ProductNotFoundError: if no product has this id
        """
        product = self.repository.find_by_id(product_id)
        if product is None:
            logger.warning(f"Update requested for missing product {product_id}")
            raise ProductNotFoundError(product_id)

        for field in MUTABLE_FIELDS:
            setattr(product, field, getattr(data, field))

        product = self.repository.save(product)
        logger.info(f"Updated product {product.id}")
        return product

    def delete_product(self, product_id: int) -> None:
        # Existence is not checked; deleting an unknown id is not an error
        self.repository.delete_by_id(product_id)
        logger.info(f"Deleted product {product_id}")

    def search_products(self, term: str) -> List[Product]:
        return self.repository.search(term)

    def get_low_stock_products(self) -> List[Product]:
        return self.repository.find_low_stock()

    def get_out_of_stock_products(self) -> List[Product]:
        return self.repository.find_out_of_stock()

    def get_total_inventory_value(self) -> float:
        """Sum of quantity * price over every product; 0 for an empty inventory."""
        return float(sum(p.quantity * p.price for p in self.repository.find_all()))

    def get_all_categories(self) -> List[str]:
        return sorted({p.category for p in self.repository.find_all()})

    def get_all_suppliers(self) -> List[str]:
        return sorted({p.supplier for p in self.repository.find_all()})

    def get_products_by_category(self, category: str) -> List[Product]:
        return self.repository.find_by_category(category)

    def get_products_by_supplier(self, supplier: str) -> List[Product]:
        return self.repository.find_by_supplier(supplier)

    def get_statistics(self) -> InventoryStatistics:
        """Collect the dashboard figures for the whole inventory."""
        return InventoryStatistics(
            total_products=self.repository.count(),
            low_stock_count=len(self.get_low_stock_products()),
            out_of_stock_count=len(self.get_out_of_stock_products()),
            total_value=self.get_total_inventory_value(),
        )
