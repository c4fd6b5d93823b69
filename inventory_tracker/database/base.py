from inventory_tracker.database.session import Base

# Import all models here so that Base has them registered
# before the tables are created
from inventory_tracker.models.product import Product
