"""
Service Models Package

This package contains the Pydantic models used throughout the service: the
Order and Flavor domain models and the request bodies accepted by the handlers.
"""

from .input import CreateOrderRequest, UpdateOrderRequest
from .order import Flavor, Order

__all__ = [
    # Input models
    "CreateOrderRequest",
    "UpdateOrderRequest",

    # Domain models
    "Order",
    "Flavor",
]
