"""
AWS Lambda Handlers Module.

Each module in this package is the entry point of one Lambda function and
exposes ``lambda_handler(event, context)``:

- create_order: POST /orders
- get_order: GET /orders/{id}
- list_orders: GET /orders
- update_order: PUT /orders/{id}
- delete_order: DELETE /orders/{id}
- list_flavors: GET /flavors
- api: all of the above behind a single API Gateway resolver

The handlers use AWS Lambda Powertools for structured logging with correlation
IDs, X-Ray tracing and custom metrics.
"""

# Re-export handler utilities for convenience
from flavor_orders.handlers.utils.observability import logger, metrics, tracer
from flavor_orders.handlers.utils.responses import build_response

__all__ = [
    "logger",
    "tracer",
    "metrics",
    "build_response",
]
