import csv
import logging
from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from product_management.models.product import Product

logger = logging.getLogger(__name__)

DEFAULT_SEED_FILE = Path(__file__).resolve().parent.parent / "data" / "seed_products.csv"


def _parse_row(row: dict[str, str]) -> dict[str, Any]:
    """Convert one CSV row to Product column values. Blank cells become None."""
    row_normalized = {k.strip().lower(): (v.strip() or None) if v else None for k, v in row.items()}
    price = row_normalized.get("price")
    quantity = row_normalized.get("quantity")
    date_added = row_normalized.get("date_added")
    return {
        "product_name": row_normalized.get("product_name"),
        "sku": row_normalized.get("sku"),
        "category": row_normalized.get("category"),
        "price": Decimal(price) if price else None,
        "quantity": int(quantity) if quantity else None,
        "date_added": datetime.fromisoformat(date_added) if date_added else None,
        "location": row_normalized.get("location"),
        "is_active": (row_normalized.get("is_active") or "").lower() in ("true", "1", "yes"),
    }


def read_seed_file(file_path: str | Path = DEFAULT_SEED_FILE) -> list[dict[str, Any]]:
    with open(file_path, "r", encoding="utf-8", newline="") as csvfile:
        reader = csv.DictReader(csvfile)
        return [_parse_row(row) for row in reader]


async def seed_products(session: AsyncSession, file_path: str | Path | None = None) -> int:
    """
    Load the sample catalog when the products table is empty.

    Returns the number of products inserted, 0 if the table already had rows.
    """
    existing = await session.scalar(select(func.count()).select_from(Product))
    if existing:
        logger.info(f"Products table already has {existing} rows, skipping seed")
        return 0

    rows = read_seed_file(file_path or DEFAULT_SEED_FILE)
    session.add_all([Product(**row) for row in rows])
    await session.commit()
    logger.info(f"Seeded {len(rows)} products")
    return len(rows)
