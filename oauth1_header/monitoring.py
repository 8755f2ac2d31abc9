"""
Monitoring and observability configuration.

Provides Prometheus metrics and structured logging for request signing.
"""

from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
import time
from functools import wraps
from typing import Callable, Optional
import logging
import os
from pythonjsonlogger import jsonlogger


# Prometheus Metrics
SIGN_REQUESTS_TOTAL = Counter(
    'oauth1_sign_requests_total',
    'Total number of OAuth 1.0a signing calls',
    ['result']
)

SIGN_DURATION_SECONDS = Histogram(
    'oauth1_sign_duration_seconds',
    'Time spent computing an OAuth 1.0a Authorization header',
    buckets=(0.00001, 0.00005, 0.0001, 0.00025, 0.0005, 0.001, 0.005, 0.01)
)

SIGN_ERRORS_TOTAL = Counter(
    'oauth1_sign_errors_total',
    'Total number of OAuth 1.0a signing errors',
    ['error_type']
)

VERIFY_REQUESTS_TOTAL = Counter(
    'oauth1_verify_requests_total',
    'Total number of OAuth 1.0a signature verifications',
    ['result']
)


def setup_json_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configure JSON structured logging on the root logger.

    Args:
        level: Log level name. Defaults to the LOG_LEVEL environment
               variable, then INFO.

    Returns:
        The root logger
    """
    log_handler = logging.StreamHandler()
    formatter = jsonlogger.JsonFormatter(
        '%(asctime)s %(name)s %(levelname)s %(message)s',
        timestamp=True
    )
    log_handler.setFormatter(formatter)

    log_level_name = (level or os.environ.get('LOG_LEVEL', 'INFO')).upper()
    log_level = getattr(logging, log_level_name, logging.INFO)

    logging.root.handlers = []
    logging.root.addHandler(log_handler)
    logging.root.setLevel(log_level)

    return logging.root


def track_signing(func: Callable) -> Callable:
    """
    Decorator to track signing metrics and timing.

    Counts successes and failures, records duration and the error type of
    any exception, which is re-raised unchanged.

    Args:
        func: Signing function to decorate

    Returns:
        Wrapped function with metrics tracking
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        start_time = time.perf_counter()

        try:
            result = func(*args, **kwargs)
        except Exception as e:
            SIGN_REQUESTS_TOTAL.labels(result='failed').inc()
            SIGN_ERRORS_TOTAL.labels(error_type=type(e).__name__).inc()
            raise

        SIGN_DURATION_SECONDS.observe(time.perf_counter() - start_time)
        SIGN_REQUESTS_TOTAL.labels(result='signed').inc()
        return result

    return wrapper


def record_verification(valid: bool) -> None:
    """Count one verification attempt."""
    VERIFY_REQUESTS_TOTAL.labels(result='valid' if valid else 'invalid').inc()


def get_metrics():
    """
    Generate Prometheus metrics in exposition format.

    Returns:
        Tuple of (metrics_data, content_type)
    """
    return generate_latest(), CONTENT_TYPE_LATEST
