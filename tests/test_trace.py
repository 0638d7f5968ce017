# tests/test_trace.py
"""Tests for convergence traces."""

import pandas as pd
import pytest
from rich.console import Console

from bnet.core.trace import ConvergenceTrace


@pytest.fixture
def trace():
    t = ConvergenceTrace(every=10)
    t.record("rejection", 10, None)
    t.record("rejection", 20, 0.5)
    t.record("likelihood", 10, 0.25)
    t.record("likelihood", 20, 0.75)
    return t


def test_should_record():
    t = ConvergenceTrace(every=10)
    assert t.should_record(10, 25)
    assert not t.should_record(11, 25)
    assert t.should_record(25, 25)


def test_bad_interval():
    with pytest.raises(ValueError):
        ConvergenceTrace(every=0)


def test_rows(trace):
    assert trace.rows() == [
        {"draw": 10, "rejection": None, "likelihood": 0.25},
        {"draw": 20, "rejection": 0.5, "likelihood": 0.75},
    ]


def test_to_csv(trace, tmp_path):
    path = tmp_path / "trace.csv"
    trace.to_csv(path)

    df = pd.read_csv(path)
    assert list(df.columns) == ["draw", "rejection", "likelihood"]
    assert df["draw"].tolist() == [10, 20]
    assert pd.isna(df["rejection"][0])
    assert df["likelihood"].tolist() == [0.25, 0.75]


def test_print_table(trace):
    console = Console(record=True, width=80)
    trace.print_table(console)
    text = console.export_text()
    assert "Convergence" in text
    assert "0.7500" in text
