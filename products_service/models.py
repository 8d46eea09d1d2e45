from sqlalchemy import CheckConstraint, Column, Integer, Numeric, String

from .database import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_products_price_nonneg"),
    )

    def __repr__(self) -> str:
        return f"<Product id={self.id} name={self.name!r}>"
