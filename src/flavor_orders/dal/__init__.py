"""
Data Access Layer (DAL) for the orders table.

This module provides the repository interface and the factory returning the
process-wide repository instance shared by all handler invocations.
"""

from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Any, Dict, List

from flavor_orders.models.order import Order


class BaseOrderRepository(ABC):
    """Abstract base class for order repository implementations."""

    def __init__(self, table_name: str) -> None:
        """
        Initialize the repository.

        Args:
            table_name: Name of the database table
        """
        self.table_name = table_name

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order:
        """Retrieve an order by its ID."""
        pass

    @abstractmethod
    def put(self, customer: str, flavor: str) -> Order:
        """Store a new order under a generated ID."""
        pass

    @abstractmethod
    def update_flavor(self, order_id: str, flavor: str) -> Dict[str, Any]:
        """Set the flavor of an order."""
        pass

    @abstractmethod
    def delete_by_id(self, order_id: str) -> None:
        """Delete an order by its ID."""
        pass

    @abstractmethod
    def scan_all(self) -> List[Order]:
        """Return every stored order."""
        pass


@lru_cache(maxsize=1)
def get_order_repository() -> BaseOrderRepository:
    """
    Return the repository shared by every invocation in this process.

    The DynamoDB resource is built on first use and reused while the Lambda
    execution environment stays warm.

    Returns:
        Order repository instance
    """
    # Import here to avoid circular imports
    from flavor_orders.dal.order_repository import OrderRepository
    from flavor_orders.handlers.models.env_vars import get_handler_env_vars

    env_vars = get_handler_env_vars()
    return OrderRepository(
        table_name=env_vars.ORDERS_TABLE_NAME,
        endpoint_url=env_vars.DYNAMODB_ENDPOINT,
    )


__all__ = [
    'BaseOrderRepository',
    'get_order_repository',
]
