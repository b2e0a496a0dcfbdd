from datetime import datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, computed_field


class StockStatus(str, Enum):
    """Stock level classification derived from a product's quantity."""

    IN_STOCK = "InStock"
    LOW_STOCK = "LowStock"
    OUT_OF_STOCK = "OutOfStock"

    @property
    def label(self) -> str:
        return _STOCK_STATUS_LABELS[self]


_STOCK_STATUS_LABELS = {
    StockStatus.IN_STOCK: "In Stock",
    StockStatus.LOW_STOCK: "Low Stock",
    StockStatus.OUT_OF_STOCK: "Out of Stock",
}

LOW_STOCK_THRESHOLD = 10


def stock_status_for(quantity: int | None) -> StockStatus:
    """Classify a quantity. An unknown quantity counts as in stock."""
    if quantity is None:
        return StockStatus.IN_STOCK
    if quantity == 0:
        return StockStatus.OUT_OF_STOCK
    if quantity < LOW_STOCK_THRESHOLD:
        return StockStatus.LOW_STOCK
    return StockStatus.IN_STOCK


class ProductBase(BaseModel):
    product_name: str | None = None
    sku: str | None = None
    category: str | None = None
    price: Decimal | None = None
    quantity: int | None = None
    date_added: datetime | None = None
    location: str | None = None
    is_active: bool = False


class ProductAddRequest(ProductBase):
    pass


class ProductUpdateRequest(ProductBase):
    """Full replacement of a product's fields; omitted fields are cleared."""
    id: int


class ProductResponse(ProductBase):
    id: int | None = None

    model_config = {"from_attributes": True}

    @computed_field
    @property
    def status(self) -> StockStatus:
        return stock_status_for(self.quantity)
