"""Category model for a single budget line item."""

from dataclasses import dataclass


@dataclass
class Category:
    """Represents one budget allocation line.

    Attributes:
        name: Display label (may be empty; see AllocationService.category_label).
        percentage: Share of income in [0, 100], rounded to 0.01.
        amount: Currency amount >= 0, rounded to 0.01. Matches
            income * percentage / 100 after every completed mutation, except
            for an amount entered while income is zero.
        is_savings: Whether the category contributes to the savings forecast.
    """

    name: str
    percentage: float = 0.0
    amount: float = 0.0
    is_savings: bool = False

    def to_dict(self) -> dict:
        """Convert category to its exported JSON shape."""
        return {
            "name": self.name,
            "percentage": self.percentage,
            "amount": self.amount,
            "isSavings": self.is_savings,
        }
