"""
DynamoDB implementation of the order repository.

Each method performs a single DynamoDB call (a scan may page) against the
orders table. Storage failures are logged here and surfaced as
OrderStorageError so callers never handle boto exceptions directly.
"""

from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

import boto3
from aws_lambda_powertools.metrics import MetricUnit
from botocore.exceptions import BotoCoreError, ClientError
from pydantic import ValidationError

from flavor_orders.dal import BaseOrderRepository
from flavor_orders.dal.errors import OrderNotFoundError, OrderStorageError
from flavor_orders.handlers.utils.observability import logger, metrics, tracer
from flavor_orders.models.order import Order

# Attributes returned by a full table scan
ORDER_PROJECTION = 'Id, Customer, Flavor'


class OrderRepository(BaseOrderRepository):
    """DynamoDB backed order repository."""

    def __init__(self, table_name: str, endpoint_url: Optional[str] = None) -> None:
        """
        Initialize the repository.

        Args:
            table_name: Name of the DynamoDB orders table
            endpoint_url: DynamoDB endpoint URL (for DynamoDB Local)
        """
        super().__init__(table_name)
        self.dynamodb = boto3.resource('dynamodb', endpoint_url=endpoint_url)
        self.table = self.dynamodb.Table(table_name)
        logger.debug('Order repository initialized', extra={
            'table_name': table_name,
            'endpoint_url': endpoint_url,
        })

    @contextmanager
    def _storage_errors(self, operation: str, **log_fields: Any) -> Iterator[None]:
        """Log and wrap boto errors and unreadable items from a DynamoDB call."""
        try:
            yield
        except ClientError as e:
            error_code = e.response['Error']['Code']
            metrics.add_metric(name='OrderStorageError', unit=MetricUnit.Count, value=1)
            logger.error(f'DynamoDB {operation} error', extra={
                'error_code': error_code,
                'error_message': e.response['Error'].get('Message'),
                'table_name': self.table_name,
                **log_fields,
            })
            raise OrderStorageError(operation, self.table_name, error_code) from e
        except BotoCoreError as e:
            metrics.add_metric(name='OrderStorageError', unit=MetricUnit.Count, value=1)
            logger.error(f'DynamoDB connection error during {operation}', extra={
                'error': str(e),
                'table_name': self.table_name,
                **log_fields,
            })
            raise OrderStorageError(operation, self.table_name) from e
        except ValidationError as e:
            metrics.add_metric(name='OrderStorageError', unit=MetricUnit.Count, value=1)
            logger.error(f'Stored item is not a valid order during {operation}', extra={
                'validation_errors': str(e),
                'table_name': self.table_name,
                **log_fields,
            })
            raise OrderStorageError(operation, self.table_name, 'InvalidItem') from e

    @tracer.capture_method
    def get_by_id(self, order_id: str) -> Order:
        """
        Retrieve an order by its ID.

        Args:
            order_id: Unique identifier of the order

        Returns:
            The stored order

        Raises:
            OrderNotFoundError: If no item is stored under the ID
            OrderStorageError: If the DynamoDB operation fails or the item is not a valid order
        """
        with self._storage_errors('GetItem', order_id=order_id):
            response = self.table.get_item(Key={'Id': order_id})
            item = response.get('Item')
            if not item:
                logger.info('Order not found', extra={'order_id': order_id})
                raise OrderNotFoundError(order_id)
            order = self._item_to_order(item)

        tracer.put_annotation('order_id', order_id)
        return order

    @tracer.capture_method
    def put(self, customer: str, flavor: str) -> Order:
        """
        Store a new order under a freshly generated ID.

        Args:
            customer: Name of the customer
            flavor: Selected flavor

        Returns:
            The created order

        Raises:
            OrderStorageError: If the DynamoDB operation fails
        """
        order = Order.create(customer=customer, flavor=flavor)

        with self._storage_errors('PutItem', customer=customer, flavor=flavor):
            self.table.put_item(Item=order.to_item())

        logger.info('Order created', extra={'order_id': order.id})
        tracer.put_annotation('order_id', order.id)
        return order

    @tracer.capture_method
    def update_flavor(self, order_id: str, flavor: str) -> Dict[str, Any]:
        """
        Set the flavor of an order.

        The item is not checked for existence first, so updating an unknown ID
        creates an item holding only ``Id`` and ``Flavor``.

        Args:
            order_id: Unique identifier of the order
            flavor: New flavor

        Returns:
            The updated attributes

        Raises:
            OrderStorageError: If the DynamoDB operation fails
        """
        with self._storage_errors('UpdateItem', order_id=order_id, flavor=flavor):
            response = self.table.update_item(
                Key={'Id': order_id},
                UpdateExpression='SET Flavor = :flavor',
                ExpressionAttributeValues={':flavor': flavor},
                ReturnValues='UPDATED_NEW',
            )

        updated = response.get('Attributes', {})
        logger.info('Order flavor updated', extra={'order_id': order_id, 'attributes': updated})
        return updated

    @tracer.capture_method
    def delete_by_id(self, order_id: str) -> None:
        """
        Delete an order. Deleting an unknown ID is not an error.

        Args:
            order_id: Unique identifier of the order

        Raises:
            OrderStorageError: If the DynamoDB operation fails
        """
        with self._storage_errors('DeleteItem', order_id=order_id):
            self.table.delete_item(Key={'Id': order_id})

        logger.info('Order deleted', extra={'order_id': order_id})

    @tracer.capture_method
    def scan_all(self) -> List[Order]:
        """
        Return every order in the table, in DynamoDB's natural scan order.

        Returns:
            List of orders, empty when the table is empty

        Raises:
            OrderStorageError: If the DynamoDB operation fails or an item is not a valid order
        """
        scan_kwargs: Dict[str, Any] = {'ProjectionExpression': ORDER_PROJECTION}
        orders: List[Order] = []

        with self._storage_errors('Scan'):
            while True:
                response = self.table.scan(**scan_kwargs)
                orders.extend(self._item_to_order(item) for item in response.get('Items', []))

                last_evaluated_key = response.get('LastEvaluatedKey')
                if not last_evaluated_key:
                    break
                scan_kwargs['ExclusiveStartKey'] = last_evaluated_key

        logger.info(f'Scanned {len(orders)} orders', extra={'table_name': self.table_name})
        tracer.put_annotation('orders_listed', len(orders))
        return orders

    @staticmethod
    def _item_to_order(item: Dict[str, Any]) -> Order:
        """Convert a DynamoDB item to an Order."""
        return Order.model_validate(item)
