from datetime import datetime, timedelta
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from product_management.models.product import Product


def sample_products() -> list[Product]:
    """Keyboard (qty 10), Mouse (qty 25) and an inactive Mona Lisa Painting (qty 5)."""
    now = datetime.now()
    return [
        Product(
            id=1,
            product_name="Keyboard",
            category="Hardware",
            price=Decimal("12.99"),
            quantity=10,
            date_added=now,
            is_active=True,
        ),
        Product(
            id=2,
            product_name="Mouse",
            category="Hardware",
            price=Decimal("8.49"),
            quantity=25,
            date_added=now - timedelta(hours=12),
            is_active=True,
        ),
        Product(
            id=3,
            product_name="Mona Lisa Painting",
            category="Decorations",
            price=Decimal("199.99"),
            quantity=5,
            date_added=now - timedelta(hours=18),
            is_active=False,
        ),
    ]


async def count_products(session: AsyncSession) -> int:
    return await session.scalar(select(func.count()).select_from(Product))
