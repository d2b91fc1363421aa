# src/keyscope/performance.py
"""
Performance monitoring utilities for keyscope.

Optional timing and memory tracking for document and project scans, enabled
through ``[logging] enable_performance_logging``.

Classes:
    PerformanceMonitor: Context manager for tracking operation performance
"""
import time
import psutil
import os
import logging
from typing import Dict, Any, Optional
from contextlib import contextmanager

from .config import config
logger = logging.getLogger(__name__)


class PerformanceMonitor:
    """
    Monitor performance metrics during scans.

    Records wall time and resident-memory change per named operation using
    psutil.  Repeated operations accumulate a call count and total duration.

    Attributes:
        metrics (Dict[str, Any]): Collected performance metrics
        enabled (bool): Whether performance monitoring is active
    """

    def __init__(self, enabled: Optional[bool] = None):
        self.metrics = {}
        if enabled is None:
            enabled = config.get('logging', 'enable_performance_logging', False)
        self.enabled = enabled

    @contextmanager
    def track_operation(self, operation_name: str):
        """
        Context manager to track operation performance metrics.

        Args:
            operation_name (str): Name identifier for the operation being tracked

        Example:
            with performance_monitor.track_operation("scan_project"):
                scan_paths(files, frameworks)
        """
        if not self.enabled:
            yield
            return

        process = psutil.Process(os.getpid())
        start_time = time.perf_counter()
        start_memory = process.memory_info().rss

        try:
            yield
        finally:
            duration = time.perf_counter() - start_time
            memory_delta = process.memory_info().rss - start_memory

            entry = self.metrics.setdefault(operation_name, {
                'calls': 0,
                'duration_seconds': 0.0,
                'memory_delta_bytes': 0,
            })
            entry['calls'] += 1
            entry['duration_seconds'] += duration
            entry['memory_delta_bytes'] += memory_delta
            entry['memory_delta_mb'] = entry['memory_delta_bytes'] / (1024 * 1024)

            logger.info(
                "Performance: %s took %.3fs, memory change: %.2fMB",
                operation_name, duration, memory_delta / (1024 * 1024),
            )

    def get_metrics(self) -> Dict[str, Any]:
        """Return a copy of the collected metrics."""
        return {name: dict(values) for name, values in self.metrics.items()}

    def reset(self):
        """Reset performance metrics to start fresh collection."""
        self.metrics.clear()


# Global performance monitor instance
performance_monitor = PerformanceMonitor()
