# -*- coding: utf-8 -*-
"""
Inventory ABC-MCDM Logging Package
===================================

Two-channel logging system:
  * **ConsoleLogger** - concise, colour-coded monitoring output
  * **DebugLogger** - exhaustive structured JSON for post-hoc inspection

Core modules never print; they log through stdlib loggers under the
``abc_mcdm`` hierarchy (see :func:`get_module_logger`), which the debug
logger intercepts while a run is active.

Usage::

    from loggers import setup_logging
    console, debug = setup_logging('result')
"""

import logging
from typing import Optional, Tuple

from .context import Colors, LogContext, PhaseMetrics
from .console_logger import ConsoleLogger
from .debug_logger import DebugLogger
from .decorators import log_execution, log_exceptions, timed_operation


ROOT_LOGGER_NAME = 'abc_mcdm'


def setup_logging(
    output_dir: str = 'result',
    use_color: Optional[bool] = None,
    debug_json: bool = True,
    quiet: bool = False,
) -> Tuple[ConsoleLogger, Optional[DebugLogger]]:
    """Create and return both loggers.

    Parameters
    ----------
    output_dir : str
        Root output directory; debug JSON goes to ``<output_dir>/logs/``.
    use_color : bool, optional
        Force colour on/off; ``None`` detects terminal support.
    debug_json : bool
        When False no debug logger is created and ``None`` is returned
        in its place.
    quiet : bool
        Silence the console channel.

    Returns
    -------
    tuple[ConsoleLogger, DebugLogger | None]
    """
    console = ConsoleLogger(use_color=use_color, quiet=quiet)
    debug = DebugLogger(output_dir=f'{output_dir}/logs') if debug_json else None
    return console, debug


def get_module_logger(module_name: str) -> logging.Logger:
    """Return the ``abc_mcdm.<module_name>`` stdlib logger."""
    return logging.getLogger(f'{ROOT_LOGGER_NAME}.{module_name}')


__all__ = [
    # Primary API
    'setup_logging',
    'ConsoleLogger',
    'DebugLogger',

    # Context & metrics
    'Colors',
    'LogContext',
    'PhaseMetrics',

    # Decorators & context managers
    'log_execution',
    'log_exceptions',
    'timed_operation',

    # stdlib loggers
    'ROOT_LOGGER_NAME',
    'get_module_logger',
]
