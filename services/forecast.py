"""Forecast service: compound-interest projections of savings contributions."""

import math
from dataclasses import dataclass
from typing import Dict, List

from models.budget_state import YEARS
from numeric import round2

# Rows listed by get_monthly_projection (100 years).
MAX_SCHEDULE_MONTHS = 1200


@dataclass(frozen=True)
class SavingsForecast:
    """Projection of one savings category.

    Attributes:
        name: Category label (positional default when blank).
        monthly_contribution: The category's monthly amount.
        future_value: Value of the contributions at the end of the horizon.
    """

    name: str
    monthly_contribution: float
    future_value: float


class ForecastService:
    """Projects savings as an ordinary annuity.

    A contribution is paid at the end of every month of the horizon and the
    balance compounds monthly at one twelfth of the annual rate. Rate and
    horizon are read from the allocation service's state on every call.

    Args:
        allocation: AllocationService whose state is projected.
    """

    def __init__(self, allocation):
        self.allocation = allocation

    @property
    def forecast_months(self) -> float:
        """Length of the horizon in months."""
        state = self.allocation.state
        if state.forecast_period_unit == YEARS:
            return state.forecast_period_value * 12
        return state.forecast_period_value

    @property
    def monthly_rate(self) -> float:
        return self.allocation.state.interest_rate / 100 / 12

    def future_value(self, monthly_contribution: float) -> float:
        """Value at the end of the horizon of a level monthly contribution.

        Args:
            monthly_contribution: Amount paid in at the end of each month.

        Returns:
            The rounded future value; 0 for a non-positive contribution or an
            empty horizon, and math.inf when the growth exceeds float range.
        """
        months = self.forecast_months
        if monthly_contribution <= 0 or months <= 0:
            return 0.0

        rate = self.monthly_rate
        if rate == 0:
            return round2(monthly_contribution * months)

        try:
            growth = math.pow(1 + rate, months)
        except OverflowError:
            return math.inf
        return round2(monthly_contribution * (growth - 1) / rate)

    @property
    def projected_savings_value(self) -> float:
        """Future value of the total monthly savings allocation."""
        return self.future_value(self.allocation.total_savings_allocation)

    @property
    def savings_forecasts(self) -> List[SavingsForecast]:
        """Per-category projections for every savings category, in order."""
        forecasts = []
        for index, category in enumerate(self.allocation.categories):
            if not category.is_savings:
                continue
            forecasts.append(
                SavingsForecast(
                    name=self.allocation.category_label(index),
                    monthly_contribution=category.amount,
                    future_value=self.future_value(category.amount),
                )
            )
        return forecasts

    def get_monthly_projection(self, monthly_contribution: float) -> List[Dict]:
        """Month-by-month growth of a level monthly contribution.

        Only whole months of the horizon are listed, at most
        MAX_SCHEDULE_MONTHS of them. Interest for a month is earned on the
        balance carried in from the previous month, then the month's
        contribution is added.

        Args:
            monthly_contribution: Amount paid in at the end of each month.

        Returns:
            [{month:int, contributed:float, interest:float, balance:float}]
            with month counted from 1. Empty for a non-positive contribution.

        Example:
            [
                {"month": 1, "contributed": 100.0, "interest": 0.0, "balance": 100.0},
                {"month": 2, "contributed": 200.0, "interest": 1.0, "balance": 201.0},
            ]
        """
        if monthly_contribution <= 0:
            return []

        rate = self.monthly_rate
        balance = 0.0
        interest_total = 0.0
        months = int(min(self.forecast_months, MAX_SCHEDULE_MONTHS))
        rows = []
        for month in range(1, months + 1):
            interest = balance * rate
            interest_total += interest
            balance += interest + monthly_contribution
            rows.append({
                "month": month,
                "contributed": round2(monthly_contribution * month),
                "interest": round2(interest_total),
                "balance": round2(balance),
            })
        return rows
