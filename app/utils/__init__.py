"""
Utilities module for the Storefront API.
"""
from .exceptions import (
    StorefrontException,
    UnauthorizedError,
    MissingFieldsError,
    CategoryExistsError,
    StoreUnavailableError,
    ProductNotFoundError,
    OperationFailedError
)

__all__ = [
    "StorefrontException",
    "UnauthorizedError",
    "MissingFieldsError",
    "CategoryExistsError",
    "StoreUnavailableError",
    "ProductNotFoundError",
    "OperationFailedError"
]
