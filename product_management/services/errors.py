class InvalidArgumentError(ValueError):
    """A required request or id was not supplied."""


class ProductNotFoundError(LookupError):
    """The product targeted by an update does not exist."""

    def __init__(self, product_id: int, message: str = "ID does not exist."):
        super().__init__(message)
        self.product_id = product_id
