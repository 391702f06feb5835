"""Logging setup and per-stage latency tracking."""

import asyncio
import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Callable


def setup_logging(level: int = logging.INFO):
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@contextmanager
def stage_timer(operation_name: str, logger: logging.Logger):
    """Log how long the enclosed block took and whether it raised. Errors propagate."""
    start = time.perf_counter()
    try:
        yield
    except Exception as e:
        elapsed = (time.perf_counter() - start) * 1000
        logger.error(f"{operation_name} | latency_ms={elapsed:.2f} | status=error | error={e}")
        raise
    elapsed = (time.perf_counter() - start) * 1000
    logger.info(f"{operation_name} | latency_ms={elapsed:.2f} | status=success")


def log_latency(operation_name: str):
    def decorator(func: Callable):
        logger = logging.getLogger(func.__module__)

        if asyncio.iscoroutinefunction(func):
            @wraps(func)
            async def timed_coroutine(*args, **kwargs):
                with stage_timer(operation_name, logger):
                    return await func(*args, **kwargs)

            return timed_coroutine

        @wraps(func)
        def timed(*args, **kwargs):
            with stage_timer(operation_name, logger):
                return func(*args, **kwargs)

        return timed

    return decorator
