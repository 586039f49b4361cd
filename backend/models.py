from sqlalchemy import Column, String, Integer, Float, Boolean, DateTime, ForeignKey, JSON, CheckConstraint, Index
from sqlalchemy.orm import relationship, declared_attr
from datetime import datetime
import uuid
from database import Base


def generate_uuid():
    return str(uuid.uuid4())


class UserDetails(Base):
    """Personal details owned by exactly one user account."""
    __tablename__ = 'user_details'

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(100))
    last_name = Column(String(100))
    phone_number = Column(String(30))
    address = Column(String(255))


class UserMixin:
    """
    Columns shared by every kind of user account.

    Each account owns at most one UserDetails row; deleting the account
    (or detaching the details) deletes the row as well.
    """
    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    is_deleted = Column(Boolean, nullable=False, default=False)
    is_verified = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    @declared_attr
    def user_details_id(cls):
        return Column(Integer, ForeignKey('user_details.id'), nullable=True, unique=True)

    @declared_attr
    def user_details(cls):
        return relationship(
            "UserDetails",
            cascade="all, delete-orphan",
            single_parent=True,
            uselist=False,
        )


class Customer(UserMixin, Base):
    __tablename__ = 'customers'

    __table_args__ = (
        CheckConstraint("email != ''"),
        Index('idx_customers_flags', 'is_deleted', 'is_verified'),
    )

    def __repr__(self) -> str:
        return f"<Customer id={self.id} email={self.email!r}>"


class Product(Base):
    """
    A product on sale.

    The id is a string so it can be assigned by an external catalogue;
    when none is given a UUID is generated. Ingredients keep their order.
    Category tags live in product_type_links so they can be filtered in SQL.
    """
    __tablename__ = 'products'

    id = Column(String, primary_key=True, default=generate_uuid)
    name = Column(String(255), nullable=False)
    price = Column(Float, nullable=False, default=0.0)
    ingredients = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    type_links = relationship(
        "ProductTypeLink",
        back_populates="product",
        cascade="all, delete-orphan",
        order_by="ProductTypeLink.position",
    )

    __table_args__ = (
        CheckConstraint("name != ''"),
        CheckConstraint("price >= 0"),
    )

    @property
    def product_types(self) -> list[str]:
        """Category tag values in their stored order"""
        return [link.product_type for link in self.type_links]

    def __repr__(self) -> str:
        return f"<Product id={self.id!r} name={self.name!r}>"


class ProductTypeLink(Base):
    __tablename__ = 'product_type_links'

    id = Column(Integer, primary_key=True, autoincrement=True)
    product_id = Column(String, ForeignKey('products.id', ondelete='CASCADE'), nullable=False)
    product_type = Column(String(30), nullable=False)
    position = Column(Integer, nullable=False, default=0)

    product = relationship("Product", back_populates="type_links")

    __table_args__ = (
        Index('idx_product_type_links_type', 'product_type'),
    )
