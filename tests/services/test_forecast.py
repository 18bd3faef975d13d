import math

import pytest

from numeric import round2
from services.allocation import AllocationService
from services.forecast import MAX_SCHEDULE_MONTHS, ForecastService, SavingsForecast


class TestForecastMonths:
    """Tests for ForecastService.forecast_months."""

    def test_months(self, allocation, forecast):
        allocation.set_forecast_period(18, "months")

        assert forecast.forecast_months == 18

    def test_years(self, allocation, forecast):
        allocation.set_forecast_period(1.5, "years")

        assert forecast.forecast_months == 18

    def test_default_is_twelve_months(self, forecast):
        assert forecast.forecast_months == 12


class TestFutureValue:
    """Tests for ForecastService.future_value."""

    def test_compound_growth(self, allocation, forecast):
        """Test 100/month for 12 months at 12% a year."""
        allocation.set_interest_rate(12)
        allocation.set_forecast_period(12, "months")

        assert forecast.monthly_rate == pytest.approx(0.01)
        assert forecast.future_value(100) == 1268.25

    def test_zero_rate_is_simple_accumulation(self, allocation, forecast):
        allocation.set_interest_rate(0)
        allocation.set_forecast_period(3, "years")

        assert forecast.future_value(123.45) == round2(123.45 * 36)

    @pytest.mark.parametrize("contribution", [0, -50])
    def test_non_positive_contribution(self, allocation, forecast, contribution):
        allocation.set_interest_rate(5)

        assert forecast.future_value(contribution) == 0.0

    def test_empty_horizon(self, allocation, forecast):
        allocation.set_interest_rate(5)
        allocation.set_forecast_period(0, "years")

        assert forecast.future_value(500) == 0.0

    def test_growth_beats_simple_accumulation(self, allocation, forecast):
        allocation.set_interest_rate(3)
        allocation.set_forecast_period(10, "years")

        assert forecast.future_value(200) > 200 * 120

    def test_growth_beyond_float_range_is_infinite(self, allocation, forecast):
        allocation.set_interest_rate(12)
        allocation.set_forecast_period("6000", "years")

        assert forecast.future_value(100) == math.inf

    def test_huge_rate_is_infinite(self, allocation, forecast):
        allocation.set_interest_rate("1e30")
        allocation.set_forecast_period(1, "years")

        assert forecast.future_value(100) == math.inf

    def test_reads_current_settings(self, allocation, forecast):
        allocation.set_forecast_period(12, "months")
        before = forecast.future_value(100)

        allocation.set_forecast_period(2, "years")

        assert forecast.future_value(100) == 2 * before


class TestSavingsProjections:
    """Tests for projections of savings categories."""

    def test_projected_savings_value(self, sample_state):
        allocation = AllocationService(sample_state)
        forecast = ForecastService(allocation)

        assert forecast.projected_savings_value == forecast.future_value(1180.0)

    def test_savings_forecasts(self, sample_state):
        allocation = AllocationService(sample_state)
        forecast = ForecastService(allocation)

        assert forecast.savings_forecasts == [
            SavingsForecast("Emergency fund", 400.0, forecast.future_value(400.0)),
            SavingsForecast("Category 4", 780.0, forecast.future_value(780.0)),
        ]

    def test_per_category_projections_add_up(self, sample_state):
        """Test that the projection is linear in the contribution."""
        allocation = AllocationService(sample_state)
        forecast = ForecastService(allocation)

        total = sum(item.future_value for item in forecast.savings_forecasts)

        assert total == pytest.approx(forecast.projected_savings_value, abs=0.01)

    def test_no_savings_categories(self, allocation, forecast):
        allocation.set_income(1000)
        allocation.add_category()
        allocation.set_category_percentage(0, 50)

        assert forecast.savings_forecasts == []

    def test_savings_follow_edits(self, allocation, forecast):
        allocation.set_income(2000)
        allocation.add_category()
        allocation.set_category_savings(0, True)
        allocation.set_category_percentage(0, 10)

        assert forecast.projected_savings_value == forecast.future_value(200)


class TestMonthlyProjection:
    """Tests for ForecastService.get_monthly_projection."""

    def test_schedule_rows(self, allocation, forecast):
        allocation.set_interest_rate(12)
        allocation.set_forecast_period(3, "months")

        rows = forecast.get_monthly_projection(100)

        assert rows == [
            {"month": 1, "contributed": 100.0, "interest": 0.0, "balance": 100.0},
            {"month": 2, "contributed": 200.0, "interest": 1.0, "balance": 201.0},
            {"month": 3, "contributed": 300.0, "interest": 3.01, "balance": 303.01},
        ]

    def test_final_balance_matches_future_value(self, allocation, forecast):
        allocation.set_interest_rate(7.25)
        allocation.set_forecast_period(4, "years")

        rows = forecast.get_monthly_projection(350)

        assert len(rows) == 48
        assert rows[-1]["balance"] == pytest.approx(forecast.future_value(350), abs=0.01)

    def test_no_contribution(self, forecast):
        assert forecast.get_monthly_projection(0) == []

    def test_schedule_length_is_capped(self, allocation, forecast):
        allocation.set_forecast_period("1e10", "months")

        rows = forecast.get_monthly_projection(1)

        assert len(rows) == MAX_SCHEDULE_MONTHS
        assert rows[-1] == {
            "month": MAX_SCHEDULE_MONTHS,
            "contributed": float(MAX_SCHEDULE_MONTHS),
            "interest": 0.0,
            "balance": float(MAX_SCHEDULE_MONTHS),
        }
