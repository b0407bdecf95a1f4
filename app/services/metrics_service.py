"""Prometheus metrics service for collecting and exposing application metrics."""

import logging

from prometheus_client import Counter, Histogram, generate_latest

logger = logging.getLogger(__name__)


class MetricsService:
    """Owns the application's Prometheus metric objects."""

    def __init__(self) -> None:
        self.initialize_metrics()

    def initialize_metrics(self) -> None:
        """Initialize metric objects."""
        self.http_requests_total = Counter(
            'http_requests_total',
            'Total HTTP requests handled through the interceptor chain',
            ['method', 'endpoint', 'outcome']
        )
        self.http_request_duration_seconds = Histogram(
            'http_request_duration_seconds',
            'Time spent handling HTTP requests',
            ['method', 'endpoint']
        )
        self.interceptor_aborts_total = Counter(
            'interceptor_aborts_total',
            'Requests stopped by an interceptor before reaching the handler',
            ['endpoint']
        )

    def record_request(self, method: str, endpoint: str, outcome: str, duration: float) -> None:
        """Record a finished request.

        Args:
            method: HTTP method
            endpoint: Flask endpoint name, or the path when unrouted
            outcome: One of success, error or aborted
            duration: Handling time in seconds
        """
        try:
            self.http_requests_total.labels(method=method, endpoint=endpoint, outcome=outcome).inc()
            self.http_request_duration_seconds.labels(method=method, endpoint=endpoint).observe(duration)
            if outcome == "aborted":
                self.interceptor_aborts_total.labels(endpoint=endpoint).inc()
        except Exception as e:
            logger.error(f"Error recording request metrics: {e}")

    def get_metrics_text(self) -> str:
        """Generate metrics in Prometheus text format.

        Returns:
            Metrics data in Prometheus exposition format
        """
        return generate_latest().decode('utf-8')
