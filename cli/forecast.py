#!/usr/bin/env python3

from logger import get_logger

logger = get_logger()


def cmd_show(args, services):
    """Show the savings forecast."""
    budget = services.budget
    forecast = services.forecast
    state = budget.state

    logger.info(
        f"\nForecast: {state.forecast_period_value:g} {state.forecast_period_unit} "
        f"({forecast.forecast_months:g} months) at {state.interest_rate:g}% per year"
    )
    logger.info("=" * 80)

    forecasts = forecast.savings_forecasts
    if not forecasts:
        logger.info("No savings categories. Use 'python -m cli categories savings'.")
        return

    for item in forecasts:
        logger.info(
            f"{item.name:<30} {item.monthly_contribution:>12,.2f}/month"
            f"  -> {item.future_value:>14,.2f}"
        )
    logger.info("-" * 80)
    logger.info(
        f"{'Total':<30} {budget.total_savings_allocation:>12,.2f}/month"
        f"  -> {forecast.projected_savings_value:>14,.2f}"
    )


def cmd_rate(args, services):
    """Set the annual interest rate."""
    rate = services.budget.set_interest_rate(args.value)
    services.persist()
    logger.info(f"✓ Interest rate set to {rate:g}%")


def cmd_period(args, services):
    """Set the forecast horizon."""
    services.budget.set_forecast_period(args.value, args.unit)
    services.persist()
    logger.info(
        f"✓ Forecast period set to {services.forecast.forecast_months:g} months"
    )


def cmd_schedule(args, services):
    """Show month-by-month growth of the total savings allocation."""
    contribution = services.budget.total_savings_allocation
    rows = services.forecast.get_monthly_projection(contribution)
    if not rows:
        logger.info("Nothing to project.")
        return

    logger.info(f"\n{'Month':>5} {'Contributed':>14} {'Interest':>12} {'Balance':>14}")
    logger.info("=" * 48)
    for row in rows:
        logger.info(
            f"{row['month']:>5} {row['contributed']:>14,.2f} "
            f"{row['interest']:>12,.2f} {row['balance']:>14,.2f}"
        )


def setup_parser(subparsers):
    """Setup forecast subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "forecast",
        help="Savings forecast",
        description="Configure and show the compound-interest savings forecast",
    )

    forecast_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available forecast commands",
        dest="subcommand",
        required=True,
    )

    show_parser = forecast_subparsers.add_parser("show", help="Show the forecast")
    show_parser.set_defaults(func=cmd_show)

    rate_parser = forecast_subparsers.add_parser(
        "rate", help="Set the annual interest rate"
    )
    rate_parser.add_argument("value", help="Annual interest rate in percent")
    rate_parser.set_defaults(func=cmd_rate)

    period_parser = forecast_subparsers.add_parser(
        "period", help="Set the forecast horizon"
    )
    period_parser.add_argument("value", help="Length of the horizon")
    period_parser.add_argument(
        "--unit",
        choices=["months", "years"],
        help="Unit of the horizon (default: keep the current unit)",
    )
    period_parser.set_defaults(func=cmd_period)

    schedule_parser = forecast_subparsers.add_parser(
        "schedule", help="Show month-by-month savings growth"
    )
    schedule_parser.set_defaults(func=cmd_schedule)
