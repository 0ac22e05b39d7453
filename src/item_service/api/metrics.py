"""Application metrics collection for the item service API."""

import time
from collections import Counter as CounterType
from dataclasses import dataclass, field
from threading import Lock
from typing import Any, Dict


@dataclass
class Metrics:
    """Application metrics collection."""

    # API Metrics
    api_requests_total: int = 0
    api_response_time_total: float = 0.0
    api_errors_by_endpoint: Dict[str, int] = field(default_factory=dict)

    # Item Metrics
    item_operations: CounterType[str] = field(default_factory=CounterType)

    _lock: Lock = field(default_factory=Lock, init=False)


class MetricsCollector:
    """Collects and manages application metrics."""

    def __init__(self):
        self.metrics = Metrics()
        self.start_time = time.time()

    def record_api_request(self, endpoint: str, response_time: float, success: bool) -> None:
        """Record API request metrics."""
        with self.metrics._lock:
            self.metrics.api_requests_total += 1
            self.metrics.api_response_time_total += response_time

            if not success:
                self.metrics.api_errors_by_endpoint[endpoint] = (
                    self.metrics.api_errors_by_endpoint.get(endpoint, 0) + 1
                )

    def record_item_operation(self, operation: str) -> None:
        """Record a successful item operation (list, get, create, update, delete)."""
        with self.metrics._lock:
            self.metrics.item_operations[operation] += 1

    def get_summary(self, item_count: int = 0) -> Dict[str, Any]:
        """Get metrics summary."""
        with self.metrics._lock:
            avg_response_time = (
                self.metrics.api_response_time_total / self.metrics.api_requests_total
                if self.metrics.api_requests_total
                else 0
            )

            return {
                "api_metrics": {
                    "requests_total": self.metrics.api_requests_total,
                    "average_response_time_ms": avg_response_time * 1000,
                    "errors_by_endpoint": dict(self.metrics.api_errors_by_endpoint),
                    "uptime_seconds": time.time() - self.start_time,
                },
                "item_metrics": {
                    "operations": dict(self.metrics.item_operations),
                    "item_count": item_count,
                },
            }

    def reset_metrics(self) -> None:
        """Reset all metrics (useful for testing)."""
        with self.metrics._lock:
            self.metrics = Metrics()
            self.start_time = time.time()
