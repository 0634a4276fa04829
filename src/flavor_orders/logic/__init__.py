"""
Business Logic Layer Module.

Holds the fixed flavor catalog served by the list_flavors handler.
"""

from flavor_orders.logic.flavor_catalog import FLAVOR_NAMES, list_flavors

__all__ = [
    "FLAVOR_NAMES",
    "list_flavors",
]
