"""
Update Order Lambda function.

Changes the flavor of an order. The order id is read from the ``id`` path
parameter (PUT /orders/{id}) or, when UPDATE_ORDER_ID_SOURCE is ``body``, from
the ``Id`` field of the request body. Customer is never changed.
"""

from http import HTTPStatus
from typing import Any, Dict, Literal

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from flavor_orders.dal import BaseOrderRepository, get_order_repository
from flavor_orders.dal.errors import OrderStorageError
from flavor_orders.handlers.models.env_vars import get_handler_env_vars
from flavor_orders.handlers.utils.events import UndecodableBodyError, get_body, get_path_parameter
from flavor_orders.handlers.utils.observability import logger, metrics, tracer
from flavor_orders.handlers.utils.responses import build_response
from flavor_orders.models.input import UpdateOrderRequest

IdSource = Literal['path', 'body']


@tracer.capture_method
def update_order(
    event: Dict[str, Any],
    repository: BaseOrderRepository,
    id_source: IdSource = 'path',
) -> Dict[str, Any]:
    """
    Set the flavor of an order.

    Args:
        event: API Gateway proxy event
        repository: Order repository
        id_source: ``path`` to read the id from the path, ``body`` to read it from the body

    Returns:
        204 on success, 400 when the id or body is missing, 500 for a malformed
        body or a storage failure
    """
    proxy_event = APIGatewayProxyEvent(event)
    order_id = get_path_parameter(proxy_event, 'id') if id_source == 'path' else None

    if not proxy_event.body or (id_source == 'path' and order_id is None):
        logger.error('Update order request is missing the id or body', extra={'order_id': order_id})
        return build_response(HTTPStatus.BAD_REQUEST)

    try:
        body = get_body(proxy_event)
        request = UpdateOrderRequest.model_validate_json(body)
    except (UndecodableBodyError, ValidationError) as e:
        logger.error('Unable to parse update order request', extra={
            'body': proxy_event.body,
            'validation_errors': str(e),
        })
        return build_response(HTTPStatus.INTERNAL_SERVER_ERROR)

    if id_source == 'body':
        order_id = request.id or None
        if order_id is None:
            logger.error('Update order request body has no Id', extra={'body': body})
            return build_response(HTTPStatus.BAD_REQUEST)

    try:
        repository.update_flavor(order_id, request.flavor)
    except OrderStorageError:
        logger.exception('Unable to update order', extra={'order_id': order_id, 'body': body})
        return build_response(HTTPStatus.INTERNAL_SERVER_ERROR)

    metrics.add_metric(name='OrderUpdated', unit=MetricUnit.Count, value=1)
    return build_response(HTTPStatus.NO_CONTENT)


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics(capture_cold_start_metric=True)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """Lambda function entry point for PUT /orders/{id}."""
    env_vars = get_handler_env_vars()
    return update_order(event, get_order_repository(), id_source=env_vars.UPDATE_ORDER_ID_SOURCE)
