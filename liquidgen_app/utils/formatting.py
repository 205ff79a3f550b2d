import math
from decimal import ROUND_HALF_UP, Decimal, localcontext


_TWO_PLACES = Decimal("0.01")
_SIX_PLACES = Decimal("0.000001")
# Enough digits to quantize any finite double without InvalidOperation
_DECIMAL_PREC = 350


def _non_finite(v: float) -> str:
    if math.isnan(v):
        return "NaN"
    return "∞" if v > 0 else "-Infinity"


def _fixed(v: float, places: Decimal, grouped: bool = False) -> str:
    with localcontext() as ctx:
        ctx.prec = _DECIMAL_PREC
        q = Decimal(v).quantize(places, rounding=ROUND_HALF_UP)
        return f"{q:,f}" if grouped else f"{q:f}"


def format_amount(value: float) -> str:
    """Render a number the way the landing page displays it.

    Values >= 1 get thousands separators and at most two decimals, with
    trailing zeros dropped (``147000.0`` → ``"147,000"``). Anything smaller,
    negatives included, is shown with exactly six decimals.
    """
    v = float(value)
    if not math.isfinite(v):
        return _non_finite(v)
    if v == 0:
        v = 0.0  # drop the sign of -0.0

    if v >= 1:
        return _fixed(v, _TWO_PLACES, grouped=True).rstrip("0").rstrip(".")
    return _fixed(v, _SIX_PLACES)


def format_whole_percent(fraction: float) -> str:
    """``0.125`` → ``"13%"``; the product is rounded half-up, never half-even."""
    v = float(fraction) * 100
    if not math.isfinite(v):
        return f"{_non_finite(v)}%"
    return f"{math.floor(v + 0.5)}%"


def format_percent(fraction: float) -> str:
    """Two-decimal percent with ties rounded up: ``0.03125`` → ``"3.13%"``."""
    v = float(fraction) * 100
    if not math.isfinite(v):
        return f"{_non_finite(v)}%"
    if v == 0:
        v = 0.0
    return f"{_fixed(v, _TWO_PLACES)}%"
