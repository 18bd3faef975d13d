"""Allocation service: keeps category percentages and amounts in step with income."""

import copy
from typing import Any, List, Optional

from logger import get_logger
from models.budget_state import AllocationStatus, BudgetState, MONTHS, YEARS
from models.category import Category
from numeric import clamp, parse_number, round2

logger = get_logger()


class CategoryIndexError(IndexError):
    """Raised when an operation addresses a category that doesn't exist."""


class AllocationService:
    """Service owning the budget state and reconciling every edit to it.

    Income changes never alter percentages. Percentage and amount edits are
    reconciled against each other and truncated so the categories never
    allocate more than 100% of income; truncation is reported through the
    ``allocation_clamped`` flag rather than an error.

    Args:
        state: Optional initial state. Defaults to an empty budget.
    """

    def __init__(self, state: Optional[BudgetState] = None):
        self.state = copy.deepcopy(state) if state is not None else BudgetState()
        self.allocation_clamped = False
        self.needs_income_warning = False

    # -- derived values -----------------------------------------------------

    @property
    def income(self) -> float:
        return self.state.income

    @property
    def categories(self) -> List[Category]:
        return self.state.categories

    @property
    def total_percentage(self) -> float:
        """Sum of all category percentages."""
        return sum(category.percentage for category in self.state.categories)

    @property
    def remaining_percentage(self) -> float:
        """Percentage of income not yet allocated."""
        return max(0.0, 100 - self.total_percentage)

    @property
    def total_savings_allocation(self) -> float:
        """Monthly amount flowing into savings categories."""
        return round2(
            sum(c.amount for c in self.state.categories if c.is_savings)
        )

    def status(self) -> AllocationStatus:
        """Get the current transient flags."""
        return AllocationStatus(
            allocation_clamped=self.allocation_clamped,
            needs_income_warning=self.needs_income_warning,
        )

    def snapshot(self) -> BudgetState:
        """Get a detached copy of the current state."""
        return copy.deepcopy(self.state)

    def category_label(self, index: int) -> str:
        """Get a category's display name, defaulting blank names by position."""
        name = self._get(index).name
        return name if name.strip() else f"Category {index + 1}"

    def max_percentage_for(self, index: int) -> float:
        """Get the headroom left for one category under the 100% ceiling.

        Args:
            index: Position of the category whose own share is excluded.

        Returns:
            100 minus the percentages of every other category, floored at 0.
        """
        allocated = sum(
            category.percentage
            for position, category in enumerate(self.state.categories)
            if position != index
        )
        return max(0.0, 100 - allocated)

    # -- budget-level settings ----------------------------------------------

    def set_income(self, raw: Any) -> AllocationStatus:
        """Set monthly income and recompute every category amount.

        Args:
            raw: User input; anything unparseable counts as 0.

        Returns:
            The transient flags after the change.
        """
        self.state.income = max(0.0, parse_number(raw))
        self.needs_income_warning = False
        for category in self.state.categories:
            category.amount = round2(self.state.income * (category.percentage / 100))
        logger.debug(f"Income set to {self.state.income}")
        return self.status()

    def set_interest_rate(self, raw: Any) -> float:
        """Set the annual interest rate (percent) used for forecasts."""
        self.state.interest_rate = max(0.0, parse_number(raw))
        return self.state.interest_rate

    def set_forecast_period(self, raw_value: Any, raw_unit: Optional[str] = None):
        """Set the forecast horizon.

        Args:
            raw_value: Length of the horizon; anything unparseable counts as 0.
            raw_unit: "years" for years, any other value for months. When
                omitted the current unit is kept.
        """
        self.state.forecast_period_value = max(0.0, parse_number(raw_value))
        if raw_unit is not None:
            self.state.forecast_period_unit = YEARS if raw_unit == YEARS else MONTHS

    # -- category structure -------------------------------------------------

    def add_category(self) -> AllocationStatus:
        """Append an empty category named after its position."""
        position = len(self.state.categories) + 1
        self.state.categories = [
            *self.state.categories,
            Category(name=f"Category {position}"),
        ]
        self.allocation_clamped = False
        return self.status()

    def remove_category(self, index: int) -> AllocationStatus:
        """Delete a category.

        Raises:
            CategoryIndexError: If no category exists at index.
        """
        self._get(index)
        del self.state.categories[index]
        self.allocation_clamped = False
        self.needs_income_warning = False
        return self.status()

    def set_category_name(self, index: int, text: str):
        self._get(index).name = text

    def set_category_savings(self, index: int, flag: bool):
        self._get(index).is_savings = flag

    # -- allocation edits ---------------------------------------------------

    def set_category_percentage(self, index: int, raw: Any) -> AllocationStatus:
        """Set a category's share of income.

        The requested percentage is limited to [0, 100] and then to whatever
        the other categories leave free. The amount follows the percentage.

        Args:
            index: Position of the category.
            raw: User input; anything unparseable counts as 0.

        Returns:
            The transient flags after the change.

        Raises:
            CategoryIndexError: If no category exists at index.
        """
        category = self._get(index)
        requested = clamp(parse_number(raw), 0, 100)
        max_allowed = self.max_percentage_for(index)
        self.allocation_clamped = requested > max_allowed
        if self.allocation_clamped:
            logger.info(
                f"Allocation for '{self.category_label(index)}' clamped "
                f"from {requested}% to {round2(max_allowed)}%"
            )
        category.percentage = round2(min(requested, max_allowed))
        category.amount = round2(self.state.income * (category.percentage / 100))
        return self.status()

    def set_category_amount(self, index: int, raw: Any) -> AllocationStatus:
        """Set a category's currency amount and derive its percentage.

        Without a positive income there is no percentage to derive: the
        percentage is forced to 0, the amount is kept as entered and
        ``needs_income_warning`` is raised for a non-zero amount. Otherwise
        the derived percentage is truncated to the available headroom; when
        that happens the amount is recomputed from the truncated percentage,
        else the entered amount is kept as the source of truth.

        Args:
            index: Position of the category.
            raw: User input; anything unparseable counts as 0.

        Returns:
            The transient flags after the change.

        Raises:
            CategoryIndexError: If no category exists at index.
        """
        category = self._get(index)
        amount = max(0.0, parse_number(raw))
        category.amount = round2(amount)

        if self.state.income <= 0:
            category.percentage = 0.0
            self.needs_income_warning = amount > 0
            if self.needs_income_warning:
                logger.warning(
                    f"Amount entered for '{self.category_label(index)}' "
                    "without an income to allocate from"
                )
            return self.status()

        raw_percentage = amount / self.state.income * 100
        max_allowed = self.max_percentage_for(index)
        self.allocation_clamped = raw_percentage > max_allowed
        category.percentage = round2(min(raw_percentage, max_allowed))
        if self.allocation_clamped:
            category.amount = round2(self.state.income * (category.percentage / 100))
            logger.info(
                f"Allocation for '{self.category_label(index)}' clamped "
                f"to {category.percentage}% ({category.amount})"
            )
        self.needs_income_warning = False
        return self.status()

    # -- whole-state replacement --------------------------------------------

    def apply_state(self, state: BudgetState) -> AllocationStatus:
        """Replace the whole budget, e.g. after an import or on startup."""
        self.state = copy.deepcopy(state)
        self.allocation_clamped = False
        self.needs_income_warning = False
        return self.status()

    def _get(self, index: int) -> Category:
        if not 0 <= index < len(self.state.categories):
            raise CategoryIndexError(
                f"Category index {index} out of range "
                f"(budget has {len(self.state.categories)} categories)"
            )
        return self.state.categories[index]
