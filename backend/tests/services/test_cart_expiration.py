"""Cart Expiration Sweeper — one sweep through the shared session manager."""

from datetime import timedelta

from bookshop.config import Settings
from bookshop.infrastructure.clock import utc_now
from bookshop.core.domain_types import OrderStatus
from bookshop.models import Order
from bookshop.services.cart_expiration import sweep_expired_carts


async def test_sweep_purges_old_carts(client, test_db, catalog, adult):
    test_db.add(Order(
        customer_id=adult, status=OrderStatus.CART,
        created_at=utc_now() - timedelta(days=45),
    ))
    await test_db.commit()

    purged = await sweep_expired_carts(Settings(cart_expiration_days=30))

    assert purged == 1
