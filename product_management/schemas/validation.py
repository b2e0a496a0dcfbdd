"""
Boundary validation for product requests.

Field shape is checked here, before a request reaches the product service.
The service itself only checks for presence and row existence.
"""
from pydantic import BaseModel

from product_management.schemas.product import ProductAddRequest, ProductBase, ProductUpdateRequest


class FieldViolation(BaseModel):
    field: str
    message: str


# field -> (display name, min length, max length)
STRING_LENGTH_RULES: dict[str, tuple[str, int, int]] = {
    "product_name": ("Product Name", 3, 50),
    "sku": ("Sku", 8, 10),
    "category": ("Category", 3, 20),
    "location": ("Location", 4, 4),
}


def _check_length(field: str, value: str | None) -> FieldViolation | None:
    if value is None:
        return None
    display, min_len, max_len = STRING_LENGTH_RULES[field]
    if min_len <= len(value) <= max_len:
        return None
    if min_len == max_len:
        message = f"{display} length must be exactly {max_len} characters long."
    else:
        message = f"{display} length must be between {min_len} and {max_len} characters."
    return FieldViolation(field=field, message=message)


def _validate_fields(request: ProductBase) -> list[FieldViolation]:
    violations = []
    for field in STRING_LENGTH_RULES:
        violation = _check_length(field, getattr(request, field))
        if violation:
            violations.append(violation)
    return violations


def validate_product_add_request(request: ProductAddRequest) -> list[FieldViolation]:
    """Return every field-level violation of an add request (empty when valid)."""
    return _validate_fields(request)


def validate_product_update_request(request: ProductUpdateRequest) -> list[FieldViolation]:
    """Return every field-level violation of an update request (empty when valid)."""
    return _validate_fields(request)
