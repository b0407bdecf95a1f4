"""Interceptor recording request counts and latency."""

import time

from app.interceptors.base import HandlerInterceptor, RequestContext, RequestOutcome
from app.services.metrics_service import MetricsService

_START_ATTRIBUTE = "metrics.start"


class RequestMetricsInterceptor(HandlerInterceptor):
    """Times every request from its first before-hook to its completion."""

    def __init__(self, metrics_service: MetricsService) -> None:
        self.metrics_service = metrics_service

    def pre_handle(self, context: RequestContext) -> bool:
        context.attributes[_START_ATTRIBUTE] = time.perf_counter()
        return True

    def after_completion(self, context: RequestContext, outcome: RequestOutcome) -> None:
        started = context.attributes.get(_START_ATTRIBUTE)
        duration = time.perf_counter() - started if started is not None else 0.0

        if outcome.aborted:
            status = "aborted"
        elif outcome.error is not None:
            status = "error"
        else:
            status = "success"

        endpoint = str(context.handler_ref) if context.handler_ref else context.path
        self.metrics_service.record_request(context.method, endpoint, status, duration)
