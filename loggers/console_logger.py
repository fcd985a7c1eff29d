# -*- coding: utf-8 -*-
"""
Console Logger for the ABC-MCDM Pipeline
=========================================

Concise, colour-coded output for following a run in the terminal.  All
console output of the pipeline is routed through this single class; the
calculation modules themselves never print.

Design goals
------------
* One-line status per step
* Phase banners with timing
* Compact metric / table display
* End-of-run summary of weights, rankings and tiers
"""

from __future__ import annotations

import sys
import time
from contextlib import contextmanager
from typing import Any, Dict, Generator, List, Optional, Sequence, TextIO

from .context import Colors, LogContext, PhaseMetrics


# Width of the banner / separator lines
_LINE_W = 70


class ConsoleLogger:
    """Structured console logger for monitoring pipeline runs."""

    def __init__(self, use_color: Optional[bool] = None, quiet: bool = False,
                 stream: Optional[TextIO] = None):
        self._color = Colors.supports_color() if use_color is None else use_color
        self._quiet = quiet
        self._stream = stream
        self._phase_stack: List[PhaseMetrics] = []
        self._all_phases: List[PhaseMetrics] = []

    @property
    def phases(self) -> List[PhaseMetrics]:
        return list(self._all_phases)

    # ------------------------------------------------------------------
    # Colour helpers
    # ------------------------------------------------------------------

    def _c(self, text: str, *codes: str) -> str:
        if not self._color:
            return text
        return ''.join(codes) + text + Colors.RESET

    # ------------------------------------------------------------------
    # Low-level write
    # ------------------------------------------------------------------

    def _write(self, msg: str) -> None:
        if self._quiet:
            return
        out = self._stream or sys.stdout
        out.write(msg + '\n')
        out.flush()

    # ------------------------------------------------------------------
    # Banners & separators
    # ------------------------------------------------------------------

    def banner(self, title: str, subtitle: str = '') -> None:
        """Print a prominent banner (e.g. at startup)."""
        self._write('')
        self._write(self._c('=' * _LINE_W, Colors.BOLD, Colors.BLUE))
        self._write(self._c(f'  {title}', Colors.BOLD, Colors.BRIGHT_WHITE))
        if subtitle:
            self._write(self._c(f'  {subtitle}', Colors.DIM))
        self._write(self._c('=' * _LINE_W, Colors.BOLD, Colors.BLUE))

    def separator(self, char: str = '-') -> None:
        self._write(self._c(char * _LINE_W, Colors.DIM))

    # ------------------------------------------------------------------
    # Phase management (context manager)
    # ------------------------------------------------------------------

    @contextmanager
    def phase(self, name: str, number: Optional[int] = None,
              total_phases: int = 6) -> Generator[_PhaseCtx, None, None]:
        """Context manager that prints phase start / end with timing.

        Example::

            with console.phase('Entropy Weighting') as p:
                weights = calculate_entropy_weights(items)
                p.metric('Criteria', len(weights.weights))
        """
        if number is None:
            number = len(self._all_phases) + 1
        label = f'[{number}/{total_phases}] {name}'
        metrics = PhaseMetrics(name=name, start_time=time.time())
        self._phase_stack.append(metrics)
        self._all_phases.append(metrics)
        LogContext.set('phase', name)

        self._write('')
        self._write(self._c(f'>> {label}', Colors.BOLD, Colors.CYAN))

        ctx = _PhaseCtx(self, metrics)
        try:
            yield ctx
        except Exception as exc:
            metrics.finish('failed')
            LogContext.remove('phase')
            self._phase_stack.pop()
            self._write(self._c(
                f'   FAIL  {label}  ({metrics.elapsed:.2f}s) {type(exc).__name__}: {exc}',
                Colors.RED, Colors.BOLD,
            ))
            raise
        else:
            metrics.finish('completed')
            LogContext.remove('phase')
            self._phase_stack.pop()
            self._write(self._c(
                f'   OK    {label}  ({metrics.elapsed:.2f}s)',
                Colors.GREEN,
            ))

    # ------------------------------------------------------------------
    # Step / metric / table helpers (used inside phases)
    # ------------------------------------------------------------------

    def step(self, message: str) -> None:
        """Print a substep inside the current phase."""
        self._write(self._c(f'   . {message}', Colors.WHITE))

    def metric(self, label: str, value: Any, unit: str = '') -> None:
        """Print a key-value metric."""
        if isinstance(value, float):
            val_str = f'{value:.4f}'
        else:
            val_str = str(value)
        suffix = f' {unit}' if unit else ''
        self._write(self._c(f'     {label}: ', Colors.DIM) + f'{val_str}{suffix}')

    def metrics(self, data: Dict[str, Any]) -> None:
        """Print a set of metrics on a single line, comma-separated."""
        parts = []
        for k, v in data.items():
            if isinstance(v, float):
                parts.append(f'{k}={v:.4f}')
            else:
                parts.append(f'{k}={v}')
        self._write(self._c('     ', Colors.DIM) + ', '.join(parts))

    def table(self, headers: Sequence[str], rows: Sequence[Sequence[str]],
              col_widths: Optional[Sequence[int]] = None, indent: int = 6) -> None:
        """Print a compact fixed-width table; numeric cells are right-aligned."""
        if col_widths is None:
            col_widths = [max(len(h) + 2, 10) for h in headers]
        pad = ' ' * indent
        hdr = pad + '  '.join(f'{h:^{w}}' for h, w in zip(headers, col_widths))
        self._write(self._c(hdr, Colors.BOLD))
        self._write(pad + '  '.join('-' * w for w in col_widths))
        for row in rows:
            cells = []
            for c, w in zip(row, col_widths):
                try:
                    float(str(c).replace('%', ''))
                    cells.append(f'{c:>{w}}')
                except ValueError:
                    cells.append(f'{c:<{w}}')
            self._write(pad + '  '.join(cells))

    # ------------------------------------------------------------------
    # Informational / warning / error
    # ------------------------------------------------------------------

    def info(self, message: str) -> None:
        self._write(self._c(f'  i {message}', Colors.GREEN))

    def success(self, message: str) -> None:
        self._write(self._c(f'  OK {message}', Colors.BRIGHT_GREEN, Colors.BOLD))

    def warning(self, message: str) -> None:
        self._write(self._c(f'  ! {message}', Colors.YELLOW))

    def error(self, message: str) -> None:
        self._write(self._c(f'  X {message}', Colors.RED, Colors.BOLD))

    # ------------------------------------------------------------------
    # Run summary
    # ------------------------------------------------------------------

    def show_run_summary(self, result: Any, top_n: int = 10) -> None:
        """Print an end-of-run summary of a ``PipelineResult``."""
        self._write('')
        self._write(self._c('=' * _LINE_W, Colors.BOLD, Colors.BLUE))
        self._write(self._c('  RESULTS SUMMARY', Colors.BOLD, Colors.BRIGHT_WHITE))
        self._write(self._c('=' * _LINE_W, Colors.BOLD, Colors.BLUE))

        self._write(self._c('\n  DATA', Colors.BOLD))
        self.metric('Items', len(result.items))

        self._write(self._c('\n  ENTROPY WEIGHTS', Colors.BOLD))
        rows = [[name, f'{w:.4f}'] for name, w in result.entropy_weights.weights.items()]
        self.table(['Criterion', 'Weight'], rows, [18, 10])

        self._write(self._c(f'\n  TOP {top_n} ITEMS (TOPSIS)', Colors.BOLD))
        ranking = result.get_ranking_df().head(top_n)
        rows = [
            [str(int(r['Rank'])), str(r['id']), f'{r["TOPSIS_Score"]:.4f}', r['Class'],
             f'{r["Fuzzy_TOPSIS_Score"]:.4f}', r['Fuzzy_Class']]
            for _, r in ranking.iterrows()
        ]
        self.table(['Rank', 'Item', 'TOPSIS', 'Class', 'Fuzzy', 'F.Class'], rows,
                   [6, 8, 10, 7, 10, 8])

        self._write(self._c('\n  ABC DISTRIBUTION', Colors.BOLD))
        crisp = result.class_distribution()
        fuzzy = result.class_distribution(fuzzy=True)
        rows = [[label, str(crisp[label]), str(fuzzy[label])] for label in crisp]
        self.table(['Class', 'TOPSIS', 'Fuzzy'], rows, [7, 8, 8])

        if result.comparison is not None:
            self._write(self._c('\n  CRISP vs FUZZY', Colors.BOLD))
            self.metric('Agreement', f'{result.comparison.agreement_rate:.1%}')
            self.metric('Spearman rho', result.comparison.spearman_rho)

        self._write(self._c(f'\n  RUNTIME : {result.execution_time:.2f}s', Colors.BOLD))
        self._write(self._c('=' * _LINE_W, Colors.BOLD, Colors.BLUE))

    # ------------------------------------------------------------------
    # Completion banner
    # ------------------------------------------------------------------

    def show_completion(self, debug_log_path: Optional[str] = None) -> None:
        """Print the final 'analysis complete' box."""
        self._write('')
        self._write(self._c('=' * _LINE_W, Colors.BOLD, Colors.GREEN))
        self._write(self._c('  ANALYSIS COMPLETE', Colors.BOLD, Colors.BRIGHT_GREEN))
        if debug_log_path:
            self._write(f'  Debug log: {debug_log_path}')
        self._write(self._c('=' * _LINE_W, Colors.BOLD, Colors.GREEN))
        self._write('')


# ------------------------------------------------------------------
# Phase context helper returned by ConsoleLogger.phase()
# ------------------------------------------------------------------

class _PhaseCtx:
    """Lightweight proxy for logging detail inside a phase block."""

    def __init__(self, logger: ConsoleLogger, metrics: PhaseMetrics):
        self._logger = logger
        self.record = metrics

    def detail(self, message: str) -> None:
        self._logger.step(message)

    def metric(self, label: str, value: Any, unit: str = '') -> None:
        self.record.counters[label] = value
        self._logger.metric(label, value, unit)

    def metrics(self, data: Dict[str, Any]) -> None:
        self.record.counters.update(data)
        self._logger.metrics(data)

    def warning(self, message: str) -> None:
        self._logger.warning(message)


__all__ = ['ConsoleLogger']
