"""
Application-wide constants.

This module centralizes the fixed response messages, HTTP status codes and
server defaults used throughout the application so that services, routers
and tests agree on a single wording.
"""


class HTTPStatus:
    """HTTP status codes used throughout the application"""

    # Success
    OK = 200
    CREATED = 201

    # Client Errors
    BAD_REQUEST = 400
    NOT_FOUND = 404

    # Server Errors
    INTERNAL_SERVER_ERROR = 500


class ServerConfig:
    """Server configuration constants"""

    API_PREFIX = "/api"
    TITLE = "Storefront API"
    VERSION = "1.0.0"


class LoggingConfig:
    """Log file rotation settings"""

    FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    FILE_NAME = "backend.log"
    MAX_BYTES = 10 * 1024 * 1024  # 10MB
    BACKUP_COUNT = 5


class ResponseMessages:
    """Detail messages attached to non-payload envelopes"""

    NULL_BODY = "Impossible to update, the body should not be null"

    # Customers
    CUSTOMER_NOT_FOUND_BY_ID = "Customer not found with the selected ID"
    CUSTOMER_NOT_FOUND_BY_EMAIL = "Customer not found with the selected email"
    CUSTOMERS_EMPTY = "No customers were found, the list may be empty"
    CUSTOMERS_NOT_FOUND_BY_PARAMETER = "No customers were found with the selected parameter"
    CUSTOMER_EMAIL_TAKEN = "Email already registered"
    CUSTOMER_DELETED = "Customer eliminated"
    CUSTOMERS_DELETED = "All customers eliminated"

    # Products
    PRODUCT_NOT_FOUND_BY_ID = "Product not found with the selected ID"
    PRODUCTS_EMPTY = "No products were found, the list may be empty"
    PRODUCTS_NOT_FOUND_BY_TYPE = "No products were found with the selected type"
    PRODUCT_ID_TAKEN = "Product already exists with the selected ID"
    PRODUCT_DELETED = "Product eliminated"
    PRODUCTS_DELETED = "All products eliminated"
