"""Pure transforms between product request/response schemas and the ORM entity."""
from product_management.models.product import Product
from product_management.schemas.product import (
    ProductAddRequest,
    ProductBase,
    ProductResponse,
    ProductUpdateRequest,
)

# Every column a request may write; id is never copied from a request
MUTABLE_FIELDS = tuple(ProductBase.model_fields)


def _field_values(request: ProductBase) -> dict:
    return {field: getattr(request, field) for field in MUTABLE_FIELDS}


def add_request_to_product(request: ProductAddRequest) -> Product:
    return Product(**_field_values(request))


def update_request_to_product(request: ProductUpdateRequest) -> Product:
    """Build a detached entity from an update request, leaving id unset."""
    return Product(**_field_values(request))


def apply_update(product: Product, request: ProductUpdateRequest) -> Product:
    """Overwrite every mutable field of `product` with the request's values."""
    for field, value in _field_values(request).items():
        setattr(product, field, value)
    return product


def product_to_response(product: Product) -> ProductResponse:
    return ProductResponse.model_validate(product)
