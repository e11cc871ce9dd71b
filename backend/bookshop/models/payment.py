"""Payment ORM — one-to-one with a confirmed order."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookshop.core.domain_types import PaymentType
from bookshop.db.base import Base
from bookshop.infrastructure.clock import utc_now
from bookshop.models.enum_column import enum_column_type


class Payment(Base):
    __tablename__ = "payments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    order_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("orders.id", ondelete="CASCADE"),
        nullable=False, unique=True,
    )
    payment_type: Mapped[PaymentType] = mapped_column(
        enum_column_type(PaymentType), nullable=False,
    )
    paid_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=utc_now,
    )
    amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)

    order: Mapped["Order"] = relationship("Order", back_populates="payment")
