"""
Formatting and Summary Export Tests
===================================
Run with: python3 -m pytest tests/test_summary.py -v
"""

import sys
import os

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from liquidgen_app.schemas import CalculatorInput
from liquidgen_app.services.calculator import compute_yield_buyback
from liquidgen_app.services.summary import (
    ExportSink,
    FileSink,
    MemorySink,
    build_summary_text,
    export_summary,
    format_results,
)
from liquidgen_app.utils.formatting import format_amount, format_percent, format_whole_percent


EXPECTED_EXAMPLE_SUMMARY = (
    "LiquidGen summary:\n"
    "Locked: $10,000,000\n"
    "APR: 20%\n"
    "Monthly yield: $166,666.67\n"
    "Buyback pool/month: $147,000\n"
    "Per buyback (avg): $9,800\n"
    "Allocations: A $88,200, B $44,100, C $14,700\n"
    "Simulated LQ burned (units): 1.47"
)


# ── format_amount ────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "value, expected",
    [
        (10_000_000, "10,000,000"),
        (166_666.666666, "166,666.67"),
        (1_234.5, "1,234.5"),
        (1, "1"),
        (1.125, "1.13"),          # exact binary tie rounds up
        (2.675, "2.67"),          # 2.675 is really 2.67499999...
        (0.5, "0.500000"),
        (0.123456789, "0.123457"),
        (0, "0.000000"),
        (-0.0, "0.000000"),
        (-5, "-5.000000"),
        (-1234.5, "-1234.500000"),
    ],
)
def test_format_amount(value, expected):
    assert format_amount(value) == expected


def test_format_amount_non_finite():
    assert format_amount(float("nan")) == "NaN"
    assert format_amount(float("inf")) == "∞"
    assert format_amount(float("-inf")) == "-Infinity"


def test_format_amount_huge_value():
    text = format_amount(1e30)
    assert text.startswith("1,000,000,000,000,")
    assert "." not in text


# ── Summary text ─────────────────────────────────────────────────────────────

def test_example_summary_text():
    params = CalculatorInput()
    text = build_summary_text(params, compute_yield_buyback(params))
    assert text == EXPECTED_EXAMPLE_SUMMARY


def test_small_values_use_six_decimals():
    params = CalculatorInput(locked_value=100, apr_percent=1, buybacks_per_month=15)
    text = build_summary_text(params, compute_yield_buyback(params))
    # burned = 7.35e-7, which rounds up at six decimals
    assert "Simulated LQ burned (units): 0.000001" in text
    assert "Monthly yield: $0.083333" in text


def test_format_results_panel():
    params = CalculatorInput()
    display = format_results(params, compute_yield_buyback(params))
    assert display["annual_yield"] == "$2,000,000"
    assert display["yield_after_platform_fee"] == "$163,333.33"
    assert display["allocation_c"] == "$14,700"
    assert display["buyback_allocation"] == "90%"
    assert display["platform_fee"] == "2.00%"


def test_percent_ties_round_up():
    # 0.125 * 100 = 12.5 and 0.03125 * 100 = 3.125 are exact binary ties
    params = CalculatorInput(buyback_allocation_fraction=0.125, platform_fee_fraction=0.03125)
    display = format_results(params, compute_yield_buyback(params))
    assert display["buyback_allocation"] == "13%"
    assert display["platform_fee"] == "3.13%"


@pytest.mark.parametrize(
    "fraction, expected",
    [(0.125, "13%"), (0.005, "1%"), (0.0, "0%"), (1.0, "100%"), (-0.125, "-12%"), (float("nan"), "NaN%")],
)
def test_format_whole_percent(fraction, expected):
    assert format_whole_percent(fraction) == expected


@pytest.mark.parametrize(
    "fraction, expected",
    [(0.02, "2.00%"), (0.03125, "3.13%"), (0.1, "10.00%"), (-0.0, "0.00%"), (float("inf"), "∞%")],
)
def test_format_percent(fraction, expected):
    assert format_percent(fraction) == expected


# ── Export sinks ─────────────────────────────────────────────────────────────

def test_export_writes_once_to_memory_sink():
    params = CalculatorInput()
    sink = MemorySink()
    text = export_summary(params, compute_yield_buyback(params), sink)
    assert sink.items == [text]
    assert sink.last == EXPECTED_EXAMPLE_SUMMARY


def test_file_sink(tmp_path):
    params = CalculatorInput()
    target = tmp_path / "exports" / "summary.txt"
    export_summary(params, compute_yield_buyback(params), FileSink(target))
    assert target.read_text(encoding="utf-8") == EXPECTED_EXAMPLE_SUMMARY + "\n"


def test_custom_sink():
    class UpperSink(ExportSink):
        def __init__(self):
            self.seen = None

        def write(self, text):
            self.seen = text.upper()

    params = CalculatorInput()
    sink = UpperSink()
    export_summary(params, compute_yield_buyback(params), sink)
    assert sink.seen.startswith("LIQUIDGEN SUMMARY:")


def test_export_sink_is_abstract():
    with pytest.raises(TypeError):
        ExportSink()
