#!/usr/bin/env python3

import sys
from cli.budget import report_status
from services.allocation import CategoryIndexError
from logger import get_logger

logger = get_logger()


def _edit(services, action):
    """Run one category edit, persist it, and report the outcome."""
    try:
        status = action()
    except CategoryIndexError as e:
        logger.error(str(e))
        logger.info("Use 'python -m cli categories list' to see category indexes.")
        sys.exit(1)
    services.persist()
    if status is not None:
        report_status(status)


def cmd_list(args, services):
    """List all categories with their allocations."""
    budget = services.budget

    if not budget.categories:
        logger.info("No categories found.")
        return

    logger.info("\nCategories:")
    logger.info("=" * 80)
    for index, category in enumerate(budget.categories):
        logger.info(f"Index: {index}")
        logger.info(f"Name: {budget.category_label(index)}")
        logger.info(f"Percentage: {category.percentage:.2f}%")
        logger.info(f"Amount: {category.amount:,.2f}")
        if category.is_savings:
            logger.info("Savings: yes")
        logger.info("-" * 80)

    logger.info(f"\nTotal categories: {len(budget.categories)}")
    logger.info(f"Remaining: {budget.remaining_percentage:.2f}%")


def cmd_add(args, services):
    """Append a new empty category."""
    budget = services.budget
    _edit(services, budget.add_category)
    index = len(budget.categories) - 1
    if args.name:
        budget.set_category_name(index, args.name)
        services.persist()
    logger.info(f"✓ Added '{budget.category_label(index)}' at index {index}")


def cmd_remove(args, services):
    """Remove a category by index."""
    _edit(services, lambda: services.budget.remove_category(args.index))
    logger.info(f"✓ Category {args.index} removed")


def cmd_rename(args, services):
    """Rename a category."""
    _edit(services, lambda: services.budget.set_category_name(args.index, args.name))
    logger.info(f"✓ Category {args.index} renamed to '{args.name}'")


def cmd_savings(args, services):
    """Mark or unmark a category as savings."""
    flag = args.flag == "on"
    _edit(services, lambda: services.budget.set_category_savings(args.index, flag))
    logger.info(
        f"✓ Category {args.index} {'counts' if flag else 'no longer counts'} as savings"
    )


def cmd_percent(args, services):
    """Set a category's percentage of income."""
    budget = services.budget
    _edit(services, lambda: budget.set_category_percentage(args.index, args.value))
    category = budget.categories[args.index]
    logger.info(
        f"✓ {budget.category_label(args.index)}: "
        f"{category.percentage:.2f}% = {category.amount:,.2f}"
    )


def cmd_amount(args, services):
    """Set a category's amount."""
    budget = services.budget
    _edit(services, lambda: budget.set_category_amount(args.index, args.value))
    category = budget.categories[args.index]
    logger.info(
        f"✓ {budget.category_label(args.index)}: "
        f"{category.amount:,.2f} = {category.percentage:.2f}%"
    )


def setup_parser(subparsers):
    """Setup categories subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "categories",
        help="Manage categories",
        description="Add, remove and allocate budget categories",
    )

    categories_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available category commands",
        dest="subcommand",
        required=True,
    )

    list_parser = categories_subparsers.add_parser("list", help="List all categories")
    list_parser.set_defaults(func=cmd_list)

    add_parser = categories_subparsers.add_parser("add", help="Add a category")
    add_parser.add_argument("--name", help="Name (default: 'Category N')")
    add_parser.set_defaults(func=cmd_add)

    remove_parser = categories_subparsers.add_parser(
        "remove", help="Remove a category by index"
    )
    remove_parser.add_argument("index", type=int, help="Index of the category")
    remove_parser.set_defaults(func=cmd_remove)

    rename_parser = categories_subparsers.add_parser("rename", help="Rename a category")
    rename_parser.add_argument("index", type=int, help="Index of the category")
    rename_parser.add_argument("name", help="New name")
    rename_parser.set_defaults(func=cmd_rename)

    savings_parser = categories_subparsers.add_parser(
        "savings", help="Mark a category as savings"
    )
    savings_parser.add_argument("index", type=int, help="Index of the category")
    savings_parser.add_argument("flag", choices=["on", "off"])
    savings_parser.set_defaults(func=cmd_savings)

    percent_parser = categories_subparsers.add_parser(
        "percent", help="Set a category's percentage of income"
    )
    percent_parser.add_argument("index", type=int, help="Index of the category")
    percent_parser.add_argument("value", help="Percentage of income (0-100)")
    percent_parser.set_defaults(func=cmd_percent)

    amount_parser = categories_subparsers.add_parser(
        "amount", help="Set a category's monthly amount"
    )
    amount_parser.add_argument("index", type=int, help="Index of the category")
    amount_parser.add_argument("value", help="Monthly amount")
    amount_parser.set_defaults(func=cmd_amount)
