from liquidgen_app.services.calculator import compute_yield_buyback
from liquidgen_app.services.schedule import build_chart_data, simulate_buyback_schedule
from liquidgen_app.services.summary import build_summary_text, export_summary

__all__ = [
    "build_chart_data",
    "build_summary_text",
    "compute_yield_buyback",
    "export_summary",
    "simulate_buyback_schedule",
]
