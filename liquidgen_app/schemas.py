from pydantic import BaseModel, Field, field_validator


class AllocationWeights(BaseModel):
    # Relative vote shares for the three launch projects; need not sum to 100
    A: float = 60
    B: float = 30
    C: float = 10


class CalculatorInput(BaseModel):
    # Defaults are the landing page example: $10M locked at 20% APR, 15 buybacks/month
    locked_value: float = 10_000_000
    apr_percent: float = 20
    buybacks_per_month: int = 15
    buyback_allocation_fraction: float = 0.9   # share of post-fee yield sent to buybacks
    platform_fee_fraction: float = 0.02        # platform operations fee (of yield)
    lq_burn_rate_per_hundred_k: float = 1      # LQ units burned per $100k of buybacks (demo metric)
    allocation_weights: AllocationWeights = Field(default_factory=AllocationWeights)


class AllocationSplit(BaseModel):
    A: float
    B: float
    C: float

    def total(self) -> float:
        return self.A + self.B + self.C


class CalculatorResult(BaseModel):
    annual_yield: float
    monthly_yield: float
    yield_after_platform_fee: float
    buyback_pool: float
    per_buyback: float
    allocation: AllocationSplit
    burned_units: float


class ScheduleEntry(BaseModel):
    day: int
    amount: float


class ScheduleRequest(CalculatorInput):
    # None → fresh entropy on every call
    random_seed: int = None

    @field_validator("random_seed")
    @classmethod
    def seed_non_negative(cls, v):
        if v is None:
            return v
        if v < 0:
            raise ValueError("random_seed must be >= 0")
        return v
