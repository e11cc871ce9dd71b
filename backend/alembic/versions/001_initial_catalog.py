"""Initial catalog, order and review schema.

Revision ID: 001_initial_catalog
Revises:
Create Date: 2026-10-19

Enum columns are VARCHAR holding the enum value ("Confirmed", "SpiralBound").
Every child of items and orders carries ON DELETE CASCADE so a deleted item
takes its facets, author/genre links, reviews and order lines with it.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial_catalog"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_ONE_CART = sa.text("status = 'Cart'")


def upgrade() -> None:
    op.create_table(
        "publishers",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("address", sa.Text(), nullable=False),
        sa.Column("email", sa.String(200), nullable=False),
        sa.Column("phone", sa.String(50), nullable=False),
        sa.CheckConstraint("name <> ''", name=op.f("ck_publishers_name_not_blank")),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_publishers")),
    )
    op.create_table(
        "age_categories",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("tag", sa.String(50), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("minimum_age", sa.Integer(), nullable=False),
        sa.CheckConstraint(
            "minimum_age BETWEEN 0 AND 100",
            name=op.f("ck_age_categories_minimum_age_range"),
        ),
        sa.CheckConstraint("tag <> ''", name=op.f("ck_age_categories_tag_not_blank")),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_age_categories")),
    )
    op.create_table(
        "authors",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("surname", sa.String(100), nullable=False),
        sa.Column("date_of_birth", sa.Date(), nullable=False),
        sa.Column("pseudonym", sa.String(100), nullable=True),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_authors")),
    )
    op.create_table(
        "genres",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_genres")),
        sa.UniqueConstraint("name", name=op.f("uq_genres_name")),
    )
    op.create_table(
        "customers",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("username", sa.String(100), nullable=False),
        sa.Column("date_of_birth", sa.Date(), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_customers")),
        sa.UniqueConstraint("username", name=op.f("uq_customers_username")),
    )
    op.create_table(
        "items",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("image_url", sa.String(500), nullable=False),
        sa.Column("publishing_date", sa.Date(), nullable=False),
        sa.Column("language", sa.String(50), nullable=False),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("stock_quantity", sa.Integer(), nullable=False),
        sa.Column("publisher_id", sa.Integer(), nullable=False),
        sa.Column("age_category_id", sa.Integer(), nullable=False),
        sa.Column("condition_kind", sa.String(10), nullable=False),
        sa.Column("is_sealed", sa.Boolean(), nullable=True),
        sa.Column("used_grade", sa.String(10), nullable=True),
        sa.Column("has_annotations", sa.Boolean(), nullable=True),
        sa.CheckConstraint("price > 0", name=op.f("ck_items_price_positive")),
        sa.CheckConstraint(
            "stock_quantity >= 0", name=op.f("ck_items_stock_non_negative"),
        ),
        sa.CheckConstraint(
            "(condition_kind = 'New' AND is_sealed IS NOT NULL"
            " AND used_grade IS NULL AND has_annotations IS NULL)"
            " OR (condition_kind = 'Used' AND is_sealed IS NULL"
            " AND used_grade IS NOT NULL AND has_annotations IS NOT NULL)",
            name=op.f("ck_items_condition_payload"),
        ),
        sa.ForeignKeyConstraint(
            ["publisher_id"], ["publishers.id"],
            name=op.f("fk_items_publisher_id_publishers"),
        ),
        sa.ForeignKeyConstraint(
            ["age_category_id"], ["age_categories.id"],
            name=op.f("fk_items_age_category_id_age_categories"),
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_items")),
    )
    op.create_table(
        "books",
        sa.Column("item_id", sa.Integer(), nullable=False),
        sa.Column("pages", sa.Integer(), nullable=False),
        sa.Column("cover", sa.String(20), nullable=False),
        sa.CheckConstraint("pages >= 1", name=op.f("ck_books_pages_positive")),
        sa.ForeignKeyConstraint(
            ["item_id"], ["items.id"], ondelete="CASCADE",
            name=op.f("fk_books_item_id_items"),
        ),
        sa.PrimaryKeyConstraint("item_id", name=op.f("pk_books")),
    )
    op.create_table(
        "magazines",
        sa.Column("item_id", sa.Integer(), nullable=False),
        sa.Column("is_special_edition", sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(
            ["item_id"], ["items.id"], ondelete="CASCADE",
            name=op.f("fk_magazines_item_id_items"),
        ),
        sa.PrimaryKeyConstraint("item_id", name=op.f("pk_magazines")),
    )
    op.create_table(
        "newspapers",
        sa.Column("item_id", sa.Integer(), nullable=False),
        sa.Column("headline", sa.String(300), nullable=False),
        sa.Column("topics", sa.JSON(), nullable=False),
        sa.CheckConstraint(
            "headline <> ''", name=op.f("ck_newspapers_headline_not_blank"),
        ),
        sa.ForeignKeyConstraint(
            ["item_id"], ["items.id"], ondelete="CASCADE",
            name=op.f("fk_newspapers_item_id_items"),
        ),
        sa.PrimaryKeyConstraint("item_id", name=op.f("pk_newspapers")),
    )
    for link, column, target in (
        ("book_authors", "author_id", "authors"),
        ("book_genres", "genre_id", "genres"),
    ):
        op.create_table(
            link,
            sa.Column("book_id", sa.Integer(), nullable=False),
            sa.Column(column, sa.Integer(), nullable=False),
            sa.ForeignKeyConstraint(
                ["book_id"], ["books.item_id"], ondelete="CASCADE",
                name=op.f(f"fk_{link}_book_id_books"),
            ),
            sa.ForeignKeyConstraint(
                [column], [f"{target}.id"], ondelete="CASCADE",
                name=op.f(f"fk_{link}_{column}_{target}"),
            ),
            sa.PrimaryKeyConstraint("book_id", column, name=op.f(f"pk_{link}")),
        )
    op.create_table(
        "reviews",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("customer_id", sa.Integer(), nullable=False),
        sa.Column("item_id", sa.Integer(), nullable=False),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.CheckConstraint("rating BETWEEN 1 AND 5", name=op.f("ck_reviews_rating_range")),
        sa.CheckConstraint("text <> ''", name=op.f("ck_reviews_text_not_blank")),
        sa.ForeignKeyConstraint(
            ["customer_id"], ["customers.id"],
            name=op.f("fk_reviews_customer_id_customers"),
        ),
        sa.ForeignKeyConstraint(
            ["item_id"], ["items.id"], ondelete="CASCADE",
            name=op.f("fk_reviews_item_id_items"),
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_reviews")),
        sa.UniqueConstraint("customer_id", "item_id", name="uq_reviews_customer_item"),
    )
    op.create_table(
        "orders",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("customer_id", sa.Integer(), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("confirmed_at", sa.DateTime(), nullable=True),
        sa.Column("preparation_started_at", sa.DateTime(), nullable=True),
        sa.Column("shipped_at", sa.DateTime(), nullable=True),
        sa.Column("delivered_at", sa.DateTime(), nullable=True),
        sa.Column("cancelled_at", sa.DateTime(), nullable=True),
        sa.CheckConstraint(
            "confirmed_at IS NULL OR confirmed_at >= created_at",
            name=op.f("ck_orders_confirmed_after_created"),
        ),
        sa.CheckConstraint(
            "preparation_started_at IS NULL OR preparation_started_at >= confirmed_at",
            name=op.f("ck_orders_preparation_after_confirmed"),
        ),
        sa.CheckConstraint(
            "shipped_at IS NULL OR shipped_at >= preparation_started_at",
            name=op.f("ck_orders_shipped_after_preparation"),
        ),
        sa.CheckConstraint(
            "delivered_at IS NULL OR delivered_at >= shipped_at",
            name=op.f("ck_orders_delivered_after_shipped"),
        ),
        sa.CheckConstraint(
            "cancelled_at IS NULL OR cancelled_at >= created_at",
            name=op.f("ck_orders_cancelled_after_created"),
        ),
        sa.CheckConstraint(
            "delivered_at IS NULL OR cancelled_at IS NULL",
            name=op.f("ck_orders_single_terminal"),
        ),
        sa.ForeignKeyConstraint(
            ["customer_id"], ["customers.id"],
            name=op.f("fk_orders_customer_id_customers"),
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_orders")),
    )
    op.create_index(
        "uq_orders_one_cart_per_customer", "orders", ["customer_id"],
        unique=True, postgresql_where=_ONE_CART, sqlite_where=_ONE_CART,
    )
    op.create_table(
        "order_items",
        sa.Column("order_id", sa.Integer(), nullable=False),
        sa.Column("item_id", sa.Integer(), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.CheckConstraint("quantity > 0", name=op.f("ck_order_items_quantity_positive")),
        sa.ForeignKeyConstraint(
            ["order_id"], ["orders.id"], ondelete="CASCADE",
            name=op.f("fk_order_items_order_id_orders"),
        ),
        sa.ForeignKeyConstraint(
            ["item_id"], ["items.id"], ondelete="CASCADE",
            name=op.f("fk_order_items_item_id_items"),
        ),
        sa.PrimaryKeyConstraint("order_id", "item_id", name=op.f("pk_order_items")),
    )
    op.create_table(
        "payments",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("order_id", sa.Integer(), nullable=False),
        sa.Column("payment_type", sa.String(20), nullable=False),
        sa.Column("paid_at", sa.DateTime(), nullable=False),
        sa.Column("amount", sa.Numeric(10, 2), nullable=False),
        sa.ForeignKeyConstraint(
            ["order_id"], ["orders.id"], ondelete="CASCADE",
            name=op.f("fk_payments_order_id_orders"),
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_payments")),
        sa.UniqueConstraint("order_id", name=op.f("uq_payments_order_id")),
    )


def downgrade() -> None:
    op.drop_table("payments")
    op.drop_table("order_items")
    op.drop_index("uq_orders_one_cart_per_customer", table_name="orders")
    op.drop_table("orders")
    op.drop_table("reviews")
    op.drop_table("book_genres")
    op.drop_table("book_authors")
    op.drop_table("newspapers")
    op.drop_table("magazines")
    op.drop_table("books")
    op.drop_table("items")
    op.drop_table("customers")
    op.drop_table("genres")
    op.drop_table("authors")
    op.drop_table("age_categories")
    op.drop_table("publishers")
