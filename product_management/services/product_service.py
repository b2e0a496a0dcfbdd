import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from product_management.models.product import Product
from product_management.schemas.product import ProductAddRequest, ProductResponse, ProductUpdateRequest
from product_management.services.errors import InvalidArgumentError, ProductNotFoundError
from product_management.services.mapping import add_request_to_product, apply_update, product_to_response

logger = logging.getLogger(__name__)


class ProductService:
    """
    Validates, maps and commits product mutations against one session.

    Commit failures are not raised to the caller. They are logged, the session
    is rolled back, and add/update hand back the in-memory state of the entity
    while delete reports False. A successful-looking response therefore does not
    guarantee the change was stored.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def add_product(self, add_request: ProductAddRequest | None) -> ProductResponse:
        if add_request is None:
            raise InvalidArgumentError("add_request must not be None")

        product = add_request_to_product(add_request)
        self._session.add(product)
        pending = product_to_response(product)

        if not await self._commit("adding product"):
            return pending

        logger.info(f"Product with ID: {product.id} added.")
        return product_to_response(product)

    async def get_all_products(self) -> list[ProductResponse]:
        result = await self._session.execute(select(Product))
        return [product_to_response(p) for p in result.scalars().all()]

    async def get_product(self, product_id: int | None) -> ProductResponse | None:
        if product_id is None:
            return None

        product = await self._session.get(Product, product_id)
        if product is None:
            return None
        return product_to_response(product)

    async def update_product(self, update_request: ProductUpdateRequest | None) -> ProductResponse:
        if update_request is None:
            raise InvalidArgumentError("update_request must not be None")

        product = await self._find(update_request.id)
        if product is None:
            raise ProductNotFoundError(update_request.id)

        apply_update(product, update_request)
        pending = product_to_response(product)

        if not await self._commit("updating product"):
            return pending

        logger.info(f"Product with ID: {product.id} updated.")
        return product_to_response(product)

    async def delete_product(self, product_id: int | None) -> bool:
        if product_id is None:
            raise InvalidArgumentError("product_id must not be None")

        product = await self._find(product_id)
        if product is None:
            return False

        await self._session.delete(product)

        if not await self._commit("deleting product"):
            return False

        logger.info(f"Product with ID: {product_id} removed.")
        return True

    async def _find(self, product_id: int) -> Product | None:
        result = await self._session.execute(select(Product).where(Product.id == product_id))
        return result.scalar_one_or_none()

    async def _commit(self, action: str) -> bool:
        """Commit the session, returning False (after rollback) if the store rejected it."""
        try:
            await self._session.commit()
        except StaleDataError:
            logger.warning(f"Concurrency conflict while {action}.", exc_info=True)
        except SQLAlchemyError:
            logger.error(f"Database update failed while {action}.", exc_info=True)
        else:
            return True

        await self._session.rollback()
        return False
