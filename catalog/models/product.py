from sqlalchemy import Column, DateTime, Float, Index, Integer, String

from catalog.database.base import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True)

    name = Column(String, nullable=False)
    description = Column(String, nullable=False)
    image = Column(String, nullable=False)
    category = Column(String, nullable=False)

    price = Column(Float, nullable=False)
    quantity = Column(Integer, nullable=False)
    rating = Column(Float, nullable=False)

    internal_reference = Column(String, nullable=False)
    shell_id = Column(String, nullable=False)
    inventory_status = Column(String, nullable=False)

    # Both timestamps are supplied by the client on create and update.
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    __table_args__ = (
        Index("idx_products_category", "category"),
        Index("idx_products_name", "name"),
        {"sqlite_autoincrement": True},
    )

    def __repr__(self) -> str:
        return f"<Product id={self.id} name={self.name!r}>"


__all__ = ["Product"]
