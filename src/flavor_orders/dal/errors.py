"""
Exceptions raised by the orders data access layer.

Handlers only ever see these types; boto3 and botocore errors are wrapped at
the repository boundary and the original exception is kept as ``__cause__``.
"""

from typing import Optional


class OrderRepositoryError(Exception):
    """Base exception for order repository errors."""


class OrderNotFoundError(OrderRepositoryError):
    """Raised when no order is stored under the requested id."""

    def __init__(self, order_id: str) -> None:
        super().__init__(f"Order {order_id} not found")
        self.order_id = order_id


class OrderStorageError(OrderRepositoryError):
    """Raised when a DynamoDB operation fails or returns an item that is not an order."""

    def __init__(self, operation: str, table_name: str, error_code: Optional[str] = None) -> None:
        super().__init__(f"DynamoDB {operation} on table {table_name} failed: {error_code or 'unknown error'}")
        self.operation = operation
        self.table_name = table_name
        self.error_code = error_code
