#!/usr/bin/env python3
"""
Allot CLI - Budget allocation calculator.

Usage:
    python -m cli <command> <subcommand> [options]

Commands:
    budget      Income, summary, import and export
    categories  Manage categories and their allocations
    forecast    Savings forecast settings and projections
    chart       Allocation chart data

Examples:
    python -m cli budget income 4200
    python -m cli categories add
    python -m cli categories percent 0 35
    python -m cli categories amount 1 500
    python -m cli forecast rate 4.5
    python -m cli forecast period 5 --unit years
    python -m cli budget export ~/budget.json
"""

import sys
import argparse
from cli import budget, categories, forecast, chart
from config import load_config
from services.base import Services
from logger import setup_logging


def main():
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="cli",
        description="Allot - Personal budget allocation calculator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
    )

    # Register each command's subparser
    budget.setup_parser(subparsers)
    categories.setup_parser(subparsers)
    forecast.setup_parser(subparsers)
    chart.setup_parser(subparsers)

    args = parser.parse_args()

    if hasattr(args, "func"):
        try:
            config = load_config()
            setup_logging(config)

            # Every command starts from the saved budget
            services = Services(config)
            services.load_persisted()

            args.func(args, services)
        except Exception as e:
            print(f"Error: {e}")
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
