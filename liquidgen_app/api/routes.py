from fastapi import APIRouter

from liquidgen_app.content import landing_content
from liquidgen_app.schemas import CalculatorInput, ScheduleRequest
from liquidgen_app.services.calculator import compute_yield_buyback
from liquidgen_app.services.schedule import build_chart_data, schedule_total, simulate_buyback_schedule
from liquidgen_app.services.summary import MemorySink, export_summary, format_results
from liquidgen_app.utils.json_safety import sanitize_floats


router = APIRouter()


@router.post("/calculate")
async def api_calculate(data: CalculatorInput):
    result = compute_yield_buyback(data)
    return sanitize_floats({
        "results": result,
        "display": format_results(data, result),
    })


@router.post("/schedule")
async def api_schedule(data: ScheduleRequest):
    result = compute_yield_buyback(data)
    schedule = simulate_buyback_schedule(
        result.buyback_pool,
        data.buybacks_per_month,
        random_seed=data.random_seed,
    )
    return sanitize_floats({
        "results": result,
        "schedule": schedule,
        "chart": build_chart_data(schedule),
        "total": schedule_total(schedule),
    })


@router.post("/summary")
async def api_summary(data: CalculatorInput):
    # The browser owns the clipboard; the text is staged in memory and returned.
    sink = MemorySink()
    export_summary(data, compute_yield_buyback(data), sink)
    return {"summary": sink.last}


@router.get("/landing")
async def api_landing():
    return landing_content()


@router.get("/health")
async def health():
    return {"status": "ok"}
