"""Shared pytest fixtures for all tests."""

import pytest

from config import Config
from models.budget_state import BudgetState
from models.category import Category
from services.allocation import AllocationService
from services.base import Services
from services.forecast import ForecastService


@pytest.fixture
def test_config(tmp_path):
    """Create a test configuration pointing at a temporary directory.

    Args:
        tmp_path: pytest tmp_path fixture for temporary directory.

    Returns:
        Config: Test configuration object.
    """
    return Config(
        base_dir=tmp_path / "allot",
        data_dir=tmp_path / "allot" / "data",
        state_filename="test.json",
        log_level="DEBUG",
        log_dir=tmp_path / "allot" / "logs",
        export_dir=tmp_path / "allot" / "exports",
    )


@pytest.fixture
def services(test_config):
    """Create a Services container with an empty budget and temporary storage.

    Args:
        test_config: Test configuration fixture.

    Returns:
        Services: Services container for testing.
    """
    return Services(test_config)


@pytest.fixture
def allocation():
    """Create an empty allocation service."""
    return AllocationService()


@pytest.fixture
def forecast(allocation):
    """Create a forecast service over the allocation fixture."""
    return ForecastService(allocation)


@pytest.fixture
def sample_state():
    """A consistent budget: 4000 income, 85% allocated, two savings lines."""
    return BudgetState(
        income=4000.0,
        interest_rate=6.0,
        forecast_period_value=2.0,
        forecast_period_unit="years",
        categories=[
            Category(name="Rent", percentage=40.0, amount=1600.0),
            Category(name="Emergency fund", percentage=10.0, amount=400.0, is_savings=True),
            Category(name="Groceries", percentage=15.5, amount=620.0),
            Category(name="", percentage=19.5, amount=780.0, is_savings=True),
        ],
    )
