"""Book store management API.

This package contains the HTTP API, business services, persistence layer and
runtime configuration for managing books, catalog data, carts, orders and users.
"""

__version__ = "0.1.0"
