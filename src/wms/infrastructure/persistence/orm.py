"""Relational schema of the warehouse.

Only ``category``, ``product`` and ``person`` are reached by the
application services. The remaining tables are the reference targets
around them: warehouses and their documents, stock availability and
transaction lines.
"""

from __future__ import annotations

from sqlalchemy import (
    Column,
    Date,
    ForeignKey,
    Integer,
    Numeric,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from wms.infrastructure.persistence.database import Base

# Quantities are tracked to the gram / millilitre
QUANTITY = Numeric(12, 3)


class CategoryRow(Base):
    __tablename__ = "category"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, unique=True)

    # Deletion is guarded by the service; never null out product rows
    products = relationship("ProductRow", back_populates="category", passive_deletes="all")


class ProductRow(Base):
    __tablename__ = "product"
    __table_args__ = (
        UniqueConstraint("name", "category_id", name="product_name_cat_unique"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(150), nullable=False)
    category_id = Column(
        Integer, ForeignKey("category.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    date_added = Column(Date, nullable=False, server_default=func.current_date())

    category = relationship("CategoryRow", back_populates="products", lazy="joined")


class PersonRow(Base):
    __tablename__ = "person"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    position = Column(String(100), nullable=True)


class WarehouseRow(Base):
    __tablename__ = "warehouse"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(150), nullable=False, unique=True)
    address = Column(String(255), nullable=False)
    responsible_person_id = Column(
        Integer, ForeignKey("person.id", ondelete="SET NULL"), nullable=True
    )

    responsible_person = relationship("PersonRow")


class DeliveryDocumentRow(Base):
    __tablename__ = "delivery_document"

    id = Column(Integer, primary_key=True, autoincrement=True)
    delivery_date = Column(Date, nullable=False, server_default=func.current_date())
    supplier_id = Column(
        "supplier", Integer, ForeignKey("person.id", ondelete="SET NULL"), nullable=True
    )
    warehouse_id = Column(
        Integer, ForeignKey("warehouse.id", ondelete="RESTRICT"), nullable=False
    )


class ShippingDocumentRow(Base):
    __tablename__ = "shipping_document"

    id = Column(Integer, primary_key=True, autoincrement=True)
    shipping_date = Column(Date, nullable=False, server_default=func.current_date())
    recipient_id = Column(
        "recipient", Integer, ForeignKey("person.id", ondelete="SET NULL"), nullable=True
    )
    warehouse_id = Column(
        Integer, ForeignKey("warehouse.id", ondelete="RESTRICT"), nullable=False
    )


class TransferDocumentRow(Base):
    __tablename__ = "transfer_document"

    id = Column(Integer, primary_key=True, autoincrement=True)
    transfer_date = Column(Date, nullable=False, server_default=func.current_date())
    source_warehouse_id = Column(
        Integer, ForeignKey("warehouse.id", ondelete="RESTRICT"), nullable=False
    )
    receiving_warehouse_id = Column(
        Integer, ForeignKey("warehouse.id", ondelete="RESTRICT"), nullable=False
    )


class AvailabilityRow(Base):
    __tablename__ = "availability"
    __table_args__ = (
        UniqueConstraint("product_id", "warehouse_id", name="availability_unique"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    product_id = Column(Integer, ForeignKey("product.id"), nullable=False)
    warehouse_id = Column(Integer, ForeignKey("warehouse.id"), nullable=False)
    quantity = Column(QUANTITY, nullable=False, default=0)


class TransactionLineRow(Base):
    __tablename__ = "transaction_line"

    id = Column(Integer, primary_key=True, autoincrement=True)
    transaction_id = Column(Integer, nullable=False, index=True)
    product_id = Column(
        Integer, ForeignKey("product.id", ondelete="RESTRICT"), nullable=False
    )
    quantity = Column(QUANTITY, nullable=False)
