"""
Delete Order Lambda function.

DELETE /orders/{id} answers 204 whether or not the order existed.
"""

from http import HTTPStatus
from typing import Any, Dict

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent
from aws_lambda_powertools.utilities.typing import LambdaContext

from flavor_orders.dal import BaseOrderRepository, get_order_repository
from flavor_orders.dal.errors import OrderStorageError
from flavor_orders.handlers.utils.events import get_path_parameter
from flavor_orders.handlers.utils.observability import logger, metrics, tracer
from flavor_orders.handlers.utils.responses import build_response


@tracer.capture_method
def delete_order(event: Dict[str, Any], repository: BaseOrderRepository) -> Dict[str, Any]:
    """
    Delete an order by the ``id`` path parameter.

    Returns:
        204 on success, 400 without an id, 500 on storage failure
    """
    order_id = get_path_parameter(APIGatewayProxyEvent(event), 'id')
    if order_id is None:
        logger.error('Delete order request has no id path parameter')
        return build_response(HTTPStatus.BAD_REQUEST)

    try:
        repository.delete_by_id(order_id)
    except OrderStorageError:
        logger.exception('Unable to delete order', extra={'order_id': order_id})
        return build_response(HTTPStatus.INTERNAL_SERVER_ERROR)

    metrics.add_metric(name='OrderDeleted', unit=MetricUnit.Count, value=1)
    return build_response(HTTPStatus.NO_CONTENT)


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics(capture_cold_start_metric=True)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """Lambda function entry point for DELETE /orders/{id}."""
    return delete_order(event, get_order_repository())
