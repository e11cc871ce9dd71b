"""Customer ORM — the minimum the order/review core needs from a user.

Invariants:
    - username unique; the configured placeholder ("DeletedUser") owns
      the placed orders of removed accounts and may not shop or review
"""

from datetime import date

from sqlalchemy import Integer, String, Date
from sqlalchemy.orm import Mapped, mapped_column

from bookshop.db.base import Base


class Customer(Base):
    __tablename__ = "customers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
