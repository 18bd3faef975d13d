"""Budget state model: income, forecast settings and the ordered categories."""

from dataclasses import dataclass, field
from typing import List

from models.category import Category

MONTHS = "months"
YEARS = "years"
FORECAST_PERIOD_UNITS = (MONTHS, YEARS)

DEFAULT_FORECAST_PERIOD_VALUE = 12.0


@dataclass
class BudgetState:
    """Complete snapshot of a budget.

    Attributes:
        income: Monthly income, >= 0.
        interest_rate: Annual interest rate in percent, >= 0.
        forecast_period_value: Length of the forecast horizon, >= 0.
        forecast_period_unit: Either "months" or "years".
        categories: Categories in display order.
    """

    income: float = 0.0
    interest_rate: float = 0.0
    forecast_period_value: float = DEFAULT_FORECAST_PERIOD_VALUE
    forecast_period_unit: str = MONTHS
    categories: List[Category] = field(default_factory=list)


@dataclass(frozen=True)
class AllocationStatus:
    """Transient signals produced by an allocation change.

    Attributes:
        allocation_clamped: The last percentage/amount write was reduced to
            fit under the 100% ceiling.
        needs_income_warning: An amount was entered while income is zero.
    """

    allocation_clamped: bool = False
    needs_income_warning: bool = False
