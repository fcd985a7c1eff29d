#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Inventory ABC-MCDM - Main Entry Point
=====================================

Usage
-----
    python main.py path/to/inventory.csv [--debug-json] [--no-color]

Pipeline Phases
---------------
1. Data Loading          – CSV with the eight inventory columns
2. Transformation        – qualitative mapping + Criticality/Demand/Supply
3. Entropy Weighting     – objective weights of the five crisp criteria
4. TOPSIS Ranking        – entropy-weighted closeness coefficients
5. Fuzzy TOPSIS Ranking  – vertex method over eight TFN criteria
6. ABC Classification    – A/B/C tiers for both tracks
"""

import dataclasses
import sys


def main(argv=None) -> None:
    """Configure and execute the inventory ABC pipeline."""
    argv = list(sys.argv[1:] if argv is None else argv)
    flags = {a for a in argv if a.startswith('--')}
    paths = [a for a in argv if not a.startswith('--')]
    if len(paths) != 1 or '--help' in flags:
        print(__doc__)
        sys.exit(0 if '--help' in flags else 2)

    # ------------------------------------------------------------------
    # Lazy imports (avoids heavy loading on --help)
    # ------------------------------------------------------------------
    from pipeline import InventoryABCPipeline
    from config import get_default_config

    config = get_default_config()
    config = dataclasses.replace(
        config,
        logging=dataclasses.replace(
            config.logging,
            debug_json='--debug-json' in flags,
            use_color=False if '--no-color' in flags else config.logging.use_color,
        ),
    )

    # ------------------------------------------------------------------
    # Execute
    # ------------------------------------------------------------------
    pipeline = InventoryABCPipeline(config)

    try:
        result = pipeline.run(paths[0])

        pipeline.console.show_run_summary(result)
        pipeline.console.show_completion(
            pipeline.debug_log.path if pipeline.debug_log is not None else None)

    except Exception as e:
        print(f"\n  ERROR: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == '__main__':
    main()
