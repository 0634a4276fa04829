"""
Flavor Orders - serverless CRUD service for ice-cream orders.

This package contains the Lambda handlers, flavor catalog and DynamoDB data
access layer for the orders API:

- handlers: API Gateway entry points, one module per Lambda function
- logic: the flavor catalog
- dal: data access layer for the orders table
- models: Pydantic models for orders, flavors and request bodies
"""

__version__ = "1.0.0"

__all__ = [
    "__version__",
]
