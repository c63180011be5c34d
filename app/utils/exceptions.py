"""
Custom exceptions for the Storefront API.

Each exception carries the HTTP status it is reported with; the handlers in
``app.core.app`` render them as ``{"error": message}``.
"""


class StorefrontException(Exception):
    """Base exception for the Storefront API."""
    status_code = 500

    def __init__(self, message: str = "Internal server error"):
        self.message = message
        super().__init__(message)


class UnauthorizedError(StorefrontException):
    """Raised when the caller has no session or lacks the admin role."""
    status_code = 401

    def __init__(self):
        super().__init__("Unauthorized")


class MissingFieldsError(StorefrontException):
    """Raised when a required field is absent or blank."""
    status_code = 400

    def __init__(self, fields=None):
        self.fields = list(fields or [])
        super().__init__("Missing required fields")


class CategoryExistsError(StorefrontException):
    """Raised when an active category with the same name already exists."""
    status_code = 400

    def __init__(self, name: str):
        self.name = name
        super().__init__("Category with this name already exists")


class StoreUnavailableError(StorefrontException):
    """Raised on write paths when MongoDB cannot be reached."""
    status_code = 503

    def __init__(self):
        super().__init__("Database not connected")


class ProductNotFoundError(StorefrontException):
    """Raised when a product is not found."""
    status_code = 404

    def __init__(self, product_id: str):
        self.product_id = product_id
        super().__init__("Product not found")


class OperationFailedError(StorefrontException):
    """Raised when a store operation fails unexpectedly."""
    pass
