# metrics.py
# Prometheus metrics for the dispute root monitor.
# Each Metrics instance owns its registry; the process-wide default one is never used.

from prometheus_client import CollectorRegistry, Histogram, generate_latest, CONTENT_TYPE_LATEST

NAMESPACE = "dispute_mon"


class Metrics:
    def __init__(self, registry: CollectorRegistry = None):
        self.registry = registry if registry is not None else CollectorRegistry()
        self.output_fetch_time = Histogram(
            "output_fetch_time_seconds",
            "Time taken to fetch an output root from the rollup node",
            namespace=NAMESPACE,
            buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2, 5, 10),
            registry=self.registry,
        )

    def record_output_fetch_time(self, seconds: float) -> None:
        self.output_fetch_time.observe(seconds)

    def exposition(self) -> bytes:
        return generate_latest(self.registry)


class NoopMetrics:
    def record_output_fetch_time(self, seconds: float) -> None:
        pass


__all__ = ["Metrics", "NoopMetrics", "CONTENT_TYPE_LATEST"]
