"""Service test fixtures — async DB, seeded catalog and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with foreign keys on
    - get_db dependency overridden to use the test DB session
    - db_manager patched for the cart sweeper, which bypasses get_db

Design Decisions:
    - SQLite in-memory: fast, no external dependency; the one concurrency test
      builds its own file-backed database (tests/services/test_inventory_ledger.py)
    - Seed rows inserted through the ORM, not the services under test
    - Fixtures hand out ids, not ORM instances: a rolled-back operation
      expires every instance in the shared session
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from bookshop.core.domain_types import ConditionKind, CoverType, UsedGrade
from bookshop.db.base import Base
from bookshop.infrastructure.clock import utc_now
from bookshop.infrastructure.database import get_db, DatabaseSessionManager
import bookshop.infrastructure.database as db_module
from bookshop.main import app
from bookshop.models import (
    AgeCategory, Author, Book, Customer, Genre, Item, Magazine, Newspaper,
    Publisher,
)


def _enable_foreign_keys(dbapi_connection, _record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    event.listen(engine.sync_engine, "connect", _enable_foreign_keys)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


# ─── Seed data ───────────────────────────────────────────────────

@dataclass
class Catalog:
    publisher_id: int
    other_publisher_id: int
    all_ages_id: int
    adults_id: int
    author_id: int
    genre_id: int
    book_id: int
    magazine_id: int
    newspaper_id: int
    used_book_id: int


@pytest.fixture
async def catalog(test_db) -> Catalog:
    """Publisher, two age categories, one item of each content type, one used book.

    book: 10.00 x5 (all ages), magazine: 5.50 x3 (all ages),
    newspaper: 2.00 x10 (18+), used book: 4.00 x1 (all ages, other publisher).
    """
    publisher = Publisher(name="Penguin", address="London", email="p@example.com", phone="1")
    other = Publisher(name="Tor", address="", email="t@example.com", phone="2")
    all_ages = AgeCategory(tag="All", description="Everyone", minimum_age=0)
    adults = AgeCategory(tag="18+", description="Adults only", minimum_age=18)
    author = Author(name="Eric", surname="Blair", date_of_birth=date(1903, 6, 25), pseudonym="George Orwell")
    genre = Genre(name="Dystopia", description="")
    test_db.add_all([publisher, other, all_ages, adults, author, genre])
    await test_db.flush()

    def _item(name, price, stock, category, pub=publisher, **kwargs):
        base = dict(
            name=name, description="", image_url="", language="English",
            publishing_date=date(2020, 1, 1), price=Decimal(price),
            stock_quantity=stock, publisher_id=pub.id, age_category_id=category.id,
            condition_kind=ConditionKind.NEW, is_sealed=True,
        )
        base.update(kwargs)
        return Item(**base)

    book = _item("1984", "10.00", 5, all_ages)
    book.book = Book(pages=328, cover=CoverType.SOFT, authors=[author], genres=[genre])
    magazine = _item("Monthly", "5.50", 3, all_ages)
    magazine.magazine = Magazine(is_special_edition=False)
    newspaper = _item("Daily", "2.00", 10, adults)
    newspaper.newspaper = Newspaper(headline="Election", topics=["politics"])
    used = _item(
        "Animal Farm", "4.00", 1, all_ages, pub=other,
        condition_kind=ConditionKind.USED, is_sealed=None,
        used_grade=UsedGrade.GOOD, has_annotations=True,
    )
    used.book = Book(pages=112, cover=CoverType.HARD, authors=[author], genres=[])
    test_db.add_all([book, magazine, newspaper, used])
    await test_db.commit()

    return Catalog(
        publisher_id=publisher.id, other_publisher_id=other.id,
        all_ages_id=all_ages.id, adults_id=adults.id,
        author_id=author.id, genre_id=genre.id,
        book_id=book.id, magazine_id=magazine.id,
        newspaper_id=newspaper.id, used_book_id=used.id,
    )


def _years_ago(years: int) -> date:
    today = utc_now().date()
    return date(today.year - years, 1, 1)


@pytest.fixture
async def adult(test_db) -> int:
    customer = Customer(username="alice", date_of_birth=_years_ago(30))
    test_db.add(customer)
    await test_db.commit()
    return customer.id


@pytest.fixture
async def child(test_db) -> int:
    customer = Customer(username="timmy", date_of_birth=_years_ago(10))
    test_db.add(customer)
    await test_db.commit()
    return customer.id


@pytest.fixture
async def deleted_customer(test_db) -> int:
    customer = Customer(username="DeletedUser", date_of_birth=date(1970, 1, 1))
    test_db.add(customer)
    await test_db.commit()
    return customer.id
