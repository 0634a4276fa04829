"""
Logger, tracer and metrics for the flavor orders service.

The per-route Lambda functions, the routed API and the order repository all
import these instances, so the log lines, trace segments and metrics of one
invocation carry the same service name. Order metrics (``OrderCreated``,
``OrderUpdated``, ``OrderDeleted``, ``OrderStorageError`` and the router's
``RequestCount``) are published under ``FlavorOrders``.
"""

from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.metrics import Metrics
from aws_lambda_powertools.tracing import Tracer

METRICS_NAMESPACE = 'FlavorOrders'

# Service name and level come from POWERTOOLS_SERVICE_NAME and LOG_LEVEL
logger: Logger = Logger()

# Off in tests via POWERTOOLS_TRACE_DISABLED
tracer: Tracer = Tracer()

# Explicit namespace, so POWERTOOLS_METRICS_NAMESPACE is ignored
metrics = Metrics(namespace=METRICS_NAMESPACE)
