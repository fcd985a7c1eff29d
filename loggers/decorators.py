# -*- coding: utf-8 -*-
"""
Logging Decorators and Context Managers
=======================================

``log_execution`` / ``log_exceptions`` wrap pipeline stages;
``timed_operation`` scopes timing to a block.  Everything goes through
stdlib loggers under ``abc_mcdm``, so the debug logger picks it up while
a run is active.
"""

from __future__ import annotations

import time
import logging
from contextlib import contextmanager
from functools import wraps
from typing import Callable, Generator, Optional


_DEFAULT_LOGGER = 'abc_mcdm'


# =============================================================================
# Decorators
# =============================================================================

def log_execution(
    logger: Optional[logging.Logger] = None,
    level: int = logging.DEBUG,
    show_result: bool = False,
) -> Callable:
    """Decorator that logs stage entry, exit and timing."""

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            log = logger or logging.getLogger(_DEFAULT_LOGGER)
            func_name = func.__qualname__
            log.log(level, 'Calling %s', func_name)

            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as exc:
                log.error('%s failed after %.3fs: %s',
                          func_name, time.perf_counter() - start, exc)
                raise
            elapsed = time.perf_counter() - start
            if show_result:
                log.log(level, '%s returned %s (%.3fs)',
                        func_name, repr(result)[:100], elapsed)
            else:
                log.log(level, '%s completed (%.3fs)', func_name, elapsed)
            return result

        return wrapper
    return decorator


def log_exceptions(
    logger: Optional[logging.Logger] = None,
    level: int = logging.ERROR,
    reraise: bool = True,
) -> Callable:
    """Decorator that logs unhandled exceptions with their traceback."""

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            log = logger or logging.getLogger(_DEFAULT_LOGGER)
            try:
                return func(*args, **kwargs)
            except Exception as exc:
                log.log(level, 'Exception in %s: %s', func.__qualname__, exc,
                        exc_info=True)
                if reraise:
                    raise
                return None
        return wrapper
    return decorator


# =============================================================================
# Context Managers
# =============================================================================

@contextmanager
def timed_operation(
    logger: logging.Logger,
    operation: str,
    level: int = logging.INFO,
) -> Generator[None, None, None]:
    """Log start / finish of *operation* with the elapsed wall time."""
    start = time.perf_counter()
    logger.log(level, 'Starting: %s', operation)
    try:
        yield
    finally:
        logger.log(level, 'Finished: %s (%.3fs)',
                   operation, time.perf_counter() - start)


__all__ = [
    'log_execution',
    'log_exceptions',
    'timed_operation',
]
