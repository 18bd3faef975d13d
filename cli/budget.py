#!/usr/bin/env python3

import sys
from pathlib import Path
from logger import get_logger

logger = get_logger()


def report_status(status):
    """Log the transient allocation flags after an edit."""
    if status.allocation_clamped:
        logger.warning(
            "Allocation was reduced so the categories stay within 100% of income."
        )
    if status.needs_income_warning:
        logger.warning("Enter an income before allocating amounts.")


def cmd_show(args, services):
    """Show income, allocations and totals."""
    budget = services.budget

    logger.info(f"\nIncome: {budget.income:,.2f}")
    logger.info("=" * 80)
    if not budget.categories:
        logger.info("No categories yet. Use 'python -m cli categories add'.")
    for index, category in enumerate(budget.categories):
        savings = " [savings]" if category.is_savings else ""
        logger.info(
            f"{index:>3}  {budget.category_label(index):<30} "
            f"{category.percentage:>7.2f}%  {category.amount:>12,.2f}{savings}"
        )
    logger.info("-" * 80)
    logger.info(f"Allocated: {budget.total_percentage:.2f}%")
    logger.info(f"Remaining: {budget.remaining_percentage:.2f}%")
    logger.info(f"Monthly savings: {budget.total_savings_allocation:,.2f}")


def cmd_income(args, services):
    """Set the monthly income."""
    status = services.budget.set_income(args.value)
    services.persist()
    logger.info(f"✓ Income set to {services.budget.income:,.2f}")
    report_status(status)


def cmd_export(args, services):
    """Export the budget to a JSON file."""
    try:
        path = services.export_file(Path(args.file) if args.file else None)
    except OSError as e:
        logger.error(f"Error exporting budget: {e}")
        sys.exit(1)
    logger.info(f"✓ Budget exported to {path}")


def cmd_import(args, services):
    """Replace the budget with the contents of an exported JSON file."""
    error = services.import_file(Path(args.file))
    if error:
        logger.error(error)
        sys.exit(1)
    services.persist()
    logger.info(
        f"✓ Imported budget with {len(services.budget.categories)} categories"
    )


def cmd_reset(args, services):
    """Delete the saved budget."""
    confirm = (
        input("\nAre you sure you want to delete the saved budget? (yes/no): ")
        .strip()
        .lower()
    )
    if confirm != "yes":
        logger.info("Reset cancelled.")
        return

    if services.store.clear():
        logger.info("✓ Saved budget deleted.")
    else:
        logger.info("No saved budget to delete.")


def setup_parser(subparsers):
    """Setup budget subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "budget",
        help="Income, summary, import and export",
        description="Show the budget, set income, and move budgets in and out",
    )

    budget_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available budget commands",
        dest="subcommand",
        required=True,
    )

    show_parser = budget_subparsers.add_parser("show", help="Show the budget")
    show_parser.set_defaults(func=cmd_show)

    income_parser = budget_subparsers.add_parser("income", help="Set monthly income")
    income_parser.add_argument("value", help="Monthly income")
    income_parser.set_defaults(func=cmd_income)

    export_parser = budget_subparsers.add_parser(
        "export", help="Export the budget as JSON"
    )
    export_parser.add_argument(
        "file",
        nargs="?",
        help="Destination file (default: dated file in the export directory)",
    )
    export_parser.set_defaults(func=cmd_export)

    import_parser = budget_subparsers.add_parser(
        "import", help="Import a budget exported as JSON"
    )
    import_parser.add_argument("file", help="File to import")
    import_parser.set_defaults(func=cmd_import)

    reset_parser = budget_subparsers.add_parser(
        "reset", help="Delete the saved budget"
    )
    reset_parser.set_defaults(func=cmd_reset)
