import logging

from liquidgen_app.schemas import AllocationSplit, CalculatorInput, CalculatorResult


logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12
# Burn is quoted per $100k of buyback volume
BURN_UNIT_USD = 100_000.0


def compute_yield_buyback(params: CalculatorInput) -> CalculatorResult:
    """Derive yield, buyback pool, vote allocation and simulated burn.

    Order matters: the platform fee comes off the monthly yield before the
    buyback share is taken, and the pool is split before it is divided
    across individual buybacks. Inputs are not range-checked; zero, negative
    or NaN values flow straight through the arithmetic.
    """
    annual_yield = params.locked_value * (params.apr_percent / 100.0)
    monthly_yield = annual_yield / MONTHS_PER_YEAR
    yield_after_fee = monthly_yield * (1.0 - params.platform_fee_fraction)
    buyback_pool = yield_after_fee * params.buyback_allocation_fraction
    per_buyback = buyback_pool / max(1, params.buybacks_per_month)

    w = params.allocation_weights
    weight_sum = max(1.0, w.A + w.B + w.C)
    allocation = AllocationSplit(
        A=(w.A / weight_sum) * buyback_pool,
        B=(w.B / weight_sum) * buyback_pool,
        C=(w.C / weight_sum) * buyback_pool,
    )

    burned_units = (buyback_pool / BURN_UNIT_USD) * params.lq_burn_rate_per_hundred_k

    logger.debug(
        "buyback pool %.2f from locked=%.2f apr=%.2f%%",
        buyback_pool,
        params.locked_value,
        params.apr_percent,
    )

    return CalculatorResult(
        annual_yield=annual_yield,
        monthly_yield=monthly_yield,
        yield_after_platform_fee=yield_after_fee,
        buyback_pool=buyback_pool,
        per_buyback=per_buyback,
        allocation=allocation,
        burned_units=burned_units,
    )
