"""Order ORM — a customer's cart or placed order.

Invariants:
    - status is an OrderStatus; created_at always set
    - Status timestamps are nullable and chronologically non-decreasing (DB checks)
    - delivered_at and cancelled_at are never both set (DB check)
    - At most one Cart per customer (partial unique index)
    - Total price is NOT stored; core.order_lifecycle.total_price derives it

Design Decisions:
    - Lines and payment selectin-loaded: every order view needs both
    - Orders are never deleted except expired carts (cancellation is a status)
"""

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Index, Integer, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookshop.core.domain_types import OrderStatus
from bookshop.db.base import Base
from bookshop.infrastructure.clock import utc_now
from bookshop.models.enum_column import enum_column_type


class Order(Base):
    __tablename__ = "orders"
    __table_args__ = (
        CheckConstraint(
            "confirmed_at IS NULL OR confirmed_at >= created_at",
            name="confirmed_after_created",
        ),
        CheckConstraint(
            "preparation_started_at IS NULL OR preparation_started_at >= confirmed_at",
            name="preparation_after_confirmed",
        ),
        CheckConstraint(
            "shipped_at IS NULL OR shipped_at >= preparation_started_at",
            name="shipped_after_preparation",
        ),
        CheckConstraint(
            "delivered_at IS NULL OR delivered_at >= shipped_at",
            name="delivered_after_shipped",
        ),
        CheckConstraint(
            "cancelled_at IS NULL OR cancelled_at >= created_at",
            name="cancelled_after_created",
        ),
        CheckConstraint(
            "delivered_at IS NULL OR cancelled_at IS NULL",
            name="single_terminal",
        ),
        Index(
            "uq_orders_one_cart_per_customer", "customer_id", unique=True,
            sqlite_where=text("status = 'Cart'"),
            postgresql_where=text("status = 'Cart'"),
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    customer_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("customers.id"), nullable=False,
    )
    status: Mapped[OrderStatus] = mapped_column(
        enum_column_type(OrderStatus), nullable=False, default=OrderStatus.CART,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=utc_now,
    )
    confirmed_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    preparation_started_at: Mapped[datetime | None] = mapped_column(
        DateTime, nullable=True,
    )
    shipped_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    delivered_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    cancelled_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)

    lines: Mapped[list["OrderItem"]] = relationship(
        "OrderItem", back_populates="order",
        cascade="all, delete-orphan", lazy="selectin",
        order_by="OrderItem.item_id",
    )
    payment: Mapped["Payment | None"] = relationship(
        "Payment", back_populates="order", uselist=False,
        cascade="all, delete-orphan", lazy="selectin",
    )
