# conftest.py - root-level pytest configuration
import sys
import os

import pandas as pd
import pytest

# Ensure the project root is on sys.path so that
# ``import weighting`` etc. work without editable install.
sys.path.insert(0, os.path.dirname(__file__))

# Tell pytest not to try collecting tests from __init__.py files.
collect_ignore_glob = ["__init__.py"]


# ---------------------------------------------------------------------------
# Shared fixtures
# ---------------------------------------------------------------------------

RAW_RECORDS = [
    # Risk, Demand fluctuation, Average stock, Daily usage, Unit cost, Lead time,
    # Consignment stock, Unit size
    ("High", "Increasing", 120.0, 40.0, 15.0, 30, "No", "Large"),
    ("Normal", "Stable", 80.0, 25.0, 8.0, 14, "Yes", "Medium"),
    ("Low", "Decreasing", 20.0, 5.0, 2.5, 7, "Yes", "Small"),
    ("High", "Stable", 200.0, 60.0, 22.0, 45, "No", "Large"),
    ("Normal", "Unknown", 60.0, 12.0, 5.0, 10, "No", "Small"),
    ("Low", "Ending", 10.0, 1.0, 1.0, 3, "Yes", "Small"),
    ("High", "Decreasing", 150.0, 30.0, 30.0, 60, "Yes", "Medium"),
    ("Normal", "Increasing", 90.0, 35.0, 12.0, 21, "No", "Medium"),
    ("Low", "Stable", 40.0, 8.0, 3.0, 5, "No", "Large"),
    ("Normal", "Decreasing", 70.0, 15.0, 6.0, 12, "Yes", "Small"),
]

RAW_COLUMNS = [
    "Risk", "Demand fluctuation", "Average stock", "Daily usage",
    "Unit cost", "Lead time", "Consignment stock", "Unit size",
]


@pytest.fixture
def raw_records():
    """The ten inventory records as dicts, as the import collaborator hands them over."""
    return [dict(zip(RAW_COLUMNS, rec)) for rec in RAW_RECORDS]


@pytest.fixture
def raw_items():
    """Ten-item frame with 1-based ids and the eight raw columns."""
    df = pd.DataFrame(RAW_RECORDS, columns=RAW_COLUMNS)
    df.insert(0, "id", range(1, len(df) + 1))
    return df
