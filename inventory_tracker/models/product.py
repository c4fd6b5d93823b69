from sqlalchemy import Column, DateTime, Float, Integer, String

from inventory_tracker.database.session import Base

class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String, nullable=False)
    category = Column(String, nullable=False, index=True)
    quantity = Column(Integer, nullable=False)
    min_stock = Column(Integer, nullable=False)
    price = Column(Float, nullable=False)
    supplier = Column(String, nullable=False, index=True)
    # Stamped by the repository on every insert and update
    last_updated = Column(DateTime, nullable=False)

    def __repr__(self) -> str:
        return f"<Product id={self.id} name={self.name!r}>"
