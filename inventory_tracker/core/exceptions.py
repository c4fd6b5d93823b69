class InventoryError(Exception):
    """Base class for errors raised by the inventory backend."""


class ProductNotFoundError(InventoryError):
    """Raised when an operation references a product id that does not exist."""

    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(f"Product not found with id: {product_id}")


class StorageError(InventoryError):
    """Raised when the persistence layer fails (connectivity, constraints, ...)."""
