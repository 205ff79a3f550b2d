import logging
from typing import Dict, List

import numpy as np

from liquidgen_app.schemas import ScheduleEntry


logger = logging.getLogger(__name__)

SCHEDULE_DAYS = 30
# Each executed buyback lands within ±30% of the average size
JITTER_SPAN = 0.6


def _round_half_up(x: float) -> float:
    # np.floor keeps inf/nan as floats instead of raising like math.floor
    return float(np.floor(x + 0.5))


def simulate_buyback_schedule(
    buyback_pool: float,
    buybacks_per_month: float,
    rng=None,
    random_seed: int = None,
) -> List[ScheduleEntry]:
    """Spread a monthly buyback pool over a randomized 30-day schedule.

    Each day a buyback fires with probability ``buybacks_per_month / 30``
    (not capped, so more than 30 per month fires every day). A fired buyback
    is the average size times a jitter in [0.7, 1.3], clamped to what is left
    of the pool. Whatever the random draws leave unspent is added to day 30,
    so the amounts always add up to the rounded pool.

    ``rng`` is anything with a ``random()`` method returning floats in
    [0, 1); by default a numpy Generator seeded with ``random_seed``.
    """
    if rng is None:
        rng = np.random.default_rng(random_seed)

    prob = buybacks_per_month / SCHEDULE_DAYS
    avg_buyback = buyback_pool / max(1, buybacks_per_month)

    amounts = np.zeros(SCHEDULE_DAYS, dtype=float)
    remaining = buyback_pool
    fired = 0

    for d in range(SCHEDULE_DAYS):
        if rng.random() < prob:
            jitter = 1.0 + (rng.random() - 0.5) * JITTER_SPAN
            amt = max(0.0, min(remaining, avg_buyback * jitter))
            amounts[d] = _round_half_up(amt)
            # Subtract the recorded (rounded) amount so the 30 days sum to the rounded pool
            remaining -= amounts[d]
            fired += 1

    if remaining > 0:
        amounts[-1] += _round_half_up(remaining)

    logger.debug(
        "simulated %d buybacks over %d days, %.2f reconciled into last day",
        fired,
        SCHEDULE_DAYS,
        remaining if remaining > 0 else 0.0,
    )

    return [ScheduleEntry(day=d + 1, amount=float(amounts[d])) for d in range(SCHEDULE_DAYS)]


def schedule_total(schedule: List[ScheduleEntry]) -> float:
    return float(sum(e.amount for e in schedule))


def build_chart_data(schedule: List[ScheduleEntry]) -> List[Dict[str, object]]:
    """Series for the schedule line chart: one point per day labelled D1..D30."""
    return [{"name": f"D{e.day}", "amount": e.amount} for e in schedule]
