"""
Summary text for the "Copy summary" button, and the sinks it can be sent to.

The clipboard and print dialog live in the browser; on this side a summary
is handed to an ``ExportSink`` exactly once and never read back.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List

from liquidgen_app.schemas import CalculatorInput, CalculatorResult
from liquidgen_app.utils.formatting import format_amount, format_percent, format_whole_percent


logger = logging.getLogger(__name__)

SUMMARY_TITLE = "LiquidGen summary:"


class ExportSink(ABC):
    """Destination for an exported summary (clipboard, printer, file...)."""

    @abstractmethod
    def write(self, text: str) -> None:
        pass


class MemorySink(ExportSink):
    def __init__(self):
        self.items: List[str] = []

    def write(self, text: str) -> None:
        self.items.append(text)

    @property
    def last(self) -> str:
        return self.items[-1] if self.items else ""


class FileSink(ExportSink):
    def __init__(self, path):
        self.path = Path(path)

    def write(self, text: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(text + "\n", encoding="utf-8")


def build_summary_text(params: CalculatorInput, result: CalculatorResult) -> str:
    alloc = result.allocation
    lines = [
        SUMMARY_TITLE,
        f"Locked: ${format_amount(params.locked_value)}",
        f"APR: {format_amount(params.apr_percent)}%",
        f"Monthly yield: ${format_amount(result.monthly_yield)}",
        f"Buyback pool/month: ${format_amount(result.buyback_pool)}",
        f"Per buyback (avg): ${format_amount(result.per_buyback)}",
        (
            f"Allocations: A ${format_amount(alloc.A)}, "
            f"B ${format_amount(alloc.B)}, C ${format_amount(alloc.C)}"
        ),
        f"Simulated LQ burned (units): {format_amount(result.burned_units)}",
    ]
    return "\n".join(lines)


def format_results(params: CalculatorInput, result: CalculatorResult) -> Dict[str, str]:
    """Display strings for the results panel and the quick-overview cards."""
    alloc = result.allocation
    return {
        "locked_value": f"${format_amount(params.locked_value)}",
        "apr": f"{format_amount(params.apr_percent)}%",
        "annual_yield": f"${format_amount(result.annual_yield)}",
        "monthly_yield": f"${format_amount(result.monthly_yield)}",
        "yield_after_platform_fee": f"${format_amount(result.yield_after_platform_fee)}",
        "buyback_pool": f"${format_amount(result.buyback_pool)}",
        "per_buyback": f"${format_amount(result.per_buyback)}",
        "allocation_a": f"${format_amount(alloc.A)}",
        "allocation_b": f"${format_amount(alloc.B)}",
        "allocation_c": f"${format_amount(alloc.C)}",
        "burned_units": format_amount(result.burned_units),
        "buyback_allocation": format_whole_percent(params.buyback_allocation_fraction),
        "platform_fee": format_percent(params.platform_fee_fraction),
    }


def export_summary(params: CalculatorInput, result: CalculatorResult, sink: ExportSink) -> str:
    text = build_summary_text(params, result)
    sink.write(text)
    logger.info("summary exported to %s", type(sink).__name__)
    return text
