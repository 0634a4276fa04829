"""
Get Order Lambda function.

GET /orders/{id}. An unknown id answers with the configured not-found status,
500 unless ORDER_NOT_FOUND_STATUS says otherwise.
"""

from http import HTTPStatus
from typing import Any, Dict

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent
from aws_lambda_powertools.utilities.typing import LambdaContext

from flavor_orders.dal import BaseOrderRepository, get_order_repository
from flavor_orders.dal.errors import OrderNotFoundError, OrderStorageError
from flavor_orders.handlers.models.env_vars import get_handler_env_vars
from flavor_orders.handlers.utils.events import get_path_parameter
from flavor_orders.handlers.utils.observability import logger, metrics, tracer
from flavor_orders.handlers.utils.responses import build_response


@tracer.capture_method
def get_order(
    event: Dict[str, Any],
    repository: BaseOrderRepository,
    not_found_status: int = HTTPStatus.INTERNAL_SERVER_ERROR,
) -> Dict[str, Any]:
    """
    Look up a single order.

    Args:
        event: API Gateway proxy event with an ``id`` path parameter
        repository: Order repository
        not_found_status: Status returned when the order does not exist

    Returns:
        200 with the order, 400 without an id, ``not_found_status`` for an
        unknown id, 500 on storage failure
    """
    order_id = get_path_parameter(APIGatewayProxyEvent(event), 'id')
    if order_id is None:
        logger.error('Get order request has no id path parameter')
        return build_response(HTTPStatus.BAD_REQUEST)

    try:
        order = repository.get_by_id(order_id)
    except OrderNotFoundError:
        logger.warning('Order not found', extra={'order_id': order_id})
        return build_response(not_found_status)
    except OrderStorageError:
        logger.exception('Unable to read order', extra={'order_id': order_id})
        return build_response(HTTPStatus.INTERNAL_SERVER_ERROR)

    return build_response(HTTPStatus.OK, order)


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics(capture_cold_start_metric=True)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """Lambda function entry point for GET /orders/{id}."""
    env_vars = get_handler_env_vars()
    return get_order(event, get_order_repository(), not_found_status=env_vars.ORDER_NOT_FOUND_STATUS)
