"""
List Orders Lambda function.

GET /orders returns every stored order. The scan is not paginated for the
caller; an empty table yields an empty array.
"""

from http import HTTPStatus
from typing import Any, Dict

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.typing import LambdaContext

from flavor_orders.dal import BaseOrderRepository, get_order_repository
from flavor_orders.dal.errors import OrderStorageError
from flavor_orders.handlers.utils.observability import logger, metrics, tracer
from flavor_orders.handlers.utils.responses import build_response


@tracer.capture_method
def list_orders(event: Dict[str, Any], repository: BaseOrderRepository) -> Dict[str, Any]:
    """Return 200 with all orders, or 500 if the table scan fails."""
    try:
        orders = repository.scan_all()
    except OrderStorageError:
        logger.exception('Unable to scan the orders table')
        return build_response(HTTPStatus.INTERNAL_SERVER_ERROR)

    return build_response(HTTPStatus.OK, orders)


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics(capture_cold_start_metric=True)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """Lambda function entry point for GET /orders."""
    return list_orders(event, get_order_repository())
