#!/usr/bin/env python3
"""CLI for Paddock API management tasks.

Usage:
    python -m cli <command>

Commands:
    migrate        Run database migrations
    create-tables  Create missing tables straight from the models
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

API_DIR = Path(__file__).resolve().parent


def _get_alembic_config():
    from alembic.config import Config

    cfg = Config(str(API_DIR / "alembic.ini"))
    # Make script_location absolute so it works from any working directory.
    cfg.set_main_option("script_location", str(API_DIR / "alembic"))
    return cfg


def cmd_migrate(target: str = "head") -> int:
    """Run database migrations."""
    from alembic import command

    logger.info("Running database migrations...")
    command.upgrade(_get_alembic_config(), target)
    logger.info("Migrations complete")
    return 0


async def _create_tables() -> None:
    from core.database import create_engine, create_tables, dispose_engine

    engine = create_engine()
    try:
        await create_tables(engine)
    finally:
        await dispose_engine(engine)


def cmd_create_tables() -> int:
    """Create missing tables without going through migrations."""
    logger.info("Creating tables...")
    asyncio.run(_create_tables())
    logger.info("Tables ready")
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Paddock API CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    migrate = subparsers.add_parser(
        "migrate",
        help="Run database migrations",
    )
    migrate.add_argument(
        "target",
        nargs="?",
        default="head",
        help="Target revision (default: head)",
    )
    subparsers.add_parser(
        "create-tables",
        help="Create missing tables straight from the models",
    )

    args = parser.parse_args()

    if args.command == "migrate":
        return cmd_migrate(args.target)
    elif args.command == "create-tables":
        return cmd_create_tables()
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
