from __future__ import annotations

from dataclasses import asdict, dataclass

from ..core.constants import DEFAULT_BASE_VACATION_DAYS, DEFAULT_PROFIT_SHARE_DAYS
from ..core.enums import PeriodHalf


@dataclass(frozen=True)
class PayParameters:
    """Global pay configuration, read-only to the calculator."""

    exchange_rate: float
    meal_voucher_foreign: float
    minimum_wage: float
    base_vacation_days: float = DEFAULT_BASE_VACATION_DAYS
    annual_profit_share_days: float = DEFAULT_PROFIT_SHARE_DAYS


@dataclass(frozen=True)
class PayBreakdown:
    """Itemized pay for one employee and one period, in local currency.

    Amounts are unrounded; formatting belongs to whoever renders them.
    """

    exchange_rate: float
    monthly_local_pay: float
    daily_normal_pay: float
    period_days: float
    period_half: PeriodHalf
    period_pay: float

    seniority_years: int
    vacation_bonus_days: float
    vacation_accrual_daily: float
    profit_share_accrual_daily: float
    integral_daily_pay: float

    deduction_cap: float
    taxable_base: float
    ivss_deduction: float
    spf_deduction: float
    faov_deduction: float
    total_deductions: float

    meal_voucher_allowance: float
    net_pay: float

    def to_dict(self) -> dict:
        data = asdict(self)
        data["period_half"] = int(self.period_half)
        return data
