# jsmigrate/main.py
# AI-Mind (C) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
CLI entry point for jsmigrate.

Usage:
    python -m jsmigrate list
    python -m jsmigrate run pos-api-smartgrid-to-action src/
    python -m jsmigrate test app-bridge-react/remove-provider tests/fixtures/remove-provider
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .config import load_config
from .exceptions import ConfigError, UnknownRecipeError
from .recipes import RecipeRegistry
from .runner import run_fixtures, run_recipe

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsmigrate",
        description="Apply JavaScript/TypeScript codemod recipes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Show available recipes
    jsmigrate list

    # Preview a migration as a diff
    jsmigrate run pos-api-smartgrid-to-action src/ --dry-run

    # Apply with recipe overrides from YAML
    jsmigrate run app-bridge-react/remove-provider app/ --config jsmigrate.yaml
        """,
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to run configuration YAML file",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose (debug) logging",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List available recipes")

    run = sub.add_parser("run", help="Apply a recipe to files and directories")
    run.add_argument("recipe", help="Recipe name")
    run.add_argument("paths", nargs="+", type=Path, help="Files or directories")
    run.add_argument(
        "--dry-run",
        action="store_true",
        help="Print a unified diff instead of writing files",
    )

    test = sub.add_parser("test", help="Run a recipe against fixture cases")
    test.add_argument("recipe", help="Recipe name")
    test.add_argument("fixtures", type=Path, help="Directory of fixture cases")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the jsmigrate CLI.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    args = build_parser().parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = load_config(args.config)
        registry = RecipeRegistry(config.recipes)
    except ConfigError as e:
        logger.error(str(e))
        return 1

    if args.command == "list":
        for name in registry.list_recipes():
            print(f"{name:40} {registry.describe(name)}")
        return 0

    try:
        codemod = registry.get(args.recipe)
    except UnknownRecipeError as e:
        logger.error(str(e))
        return 1

    if args.command == "run":
        summary = run_recipe(codemod, args.paths, config, dry_run=args.dry_run)
        for result in summary.changed:
            if result.diff:
                print(result.diff, end="")
        print(f"Done. {summary}")
        return 0 if summary.ok else 1

    if not args.fixtures.is_dir():
        logger.error(f"Fixtures directory not found: {args.fixtures}")
        return 1

    results = run_fixtures(codemod, args.fixtures)
    for result in results:
        print(f"{'PASS' if result.passed else 'FAIL'} {result.name}")
        if result.error:
            print(f"  {result.error}")
        elif not result.passed:
            print(result.diff(), end="")
    passed = sum(r.passed for r in results)
    print(f"{passed}/{len(results)} fixtures passed")
    return 0 if passed == len(results) else 1


if __name__ == "__main__":
    sys.exit(main())
