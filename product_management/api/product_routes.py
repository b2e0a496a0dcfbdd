import logging
from typing import Annotated

from fastapi import APIRouter, Body, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from product_management.database import get_db
from product_management.schemas.product import ProductAddRequest, ProductResponse, ProductUpdateRequest
from product_management.schemas.validation import (
    FieldViolation,
    validate_product_add_request,
    validate_product_update_request,
)
from product_management.services.errors import InvalidArgumentError, ProductNotFoundError
from product_management.services.product_service import ProductService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["products"])


def get_product_service(db: Annotated[AsyncSession, Depends(get_db)]) -> ProductService:
    """Dependency to get a product service bound to the request's session."""
    return ProductService(db)


def _raise_for_violations(violations: list[FieldViolation]) -> None:
    if violations:
        logger.info(f"Rejected product request: {len(violations)} validation error(s)")
        raise HTTPException(status_code=422, detail=[v.model_dump() for v in violations])


@router.post("/", response_model=ProductResponse, status_code=201)
async def create_product(
    service: Annotated[ProductService, Depends(get_product_service)],
    product: Annotated[ProductAddRequest | None, Body()] = None,
):
    """Create a new product."""
    if product is not None:
        _raise_for_violations(validate_product_add_request(product))
    try:
        return await service.add_product(product)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/", response_model=list[ProductResponse])
async def list_products(
    service: Annotated[ProductService, Depends(get_product_service)],
):
    """List all products."""
    return await service.get_all_products()


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: int,
    service: Annotated[ProductService, Depends(get_product_service)],
):
    """Get a product by ID."""
    product = await service.get_product(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: int,
    service: Annotated[ProductService, Depends(get_product_service)],
    product_update: Annotated[ProductUpdateRequest | None, Body()] = None,
):
    """Replace every field of a product."""
    if product_update is not None:
        if product_update.id != product_id:
            raise HTTPException(status_code=400, detail="Product ID in path and body do not match")
        _raise_for_violations(validate_product_update_request(product_update))
    try:
        return await service.update_product(product_update)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ProductNotFoundError:
        raise HTTPException(status_code=404, detail="Product not found")


@router.delete("/{product_id}")
async def delete_product(
    product_id: int,
    service: Annotated[ProductService, Depends(get_product_service)],
):
    """Delete a product."""
    deleted = await service.delete_product(product_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Product not found")
    return {"ok": True}
