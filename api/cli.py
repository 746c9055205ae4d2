#!/usr/bin/env python3
"""CLI for Worksite Registry API management tasks.

Usage:
    python -m cli <command>

Commands:
    migrate [target]         Run database migrations (default: head)
    create-token <subject>   Print a bearer token for local testing
"""

import argparse
import logging
import sys
from pathlib import Path

from alembic.config import Config

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def get_alembic_config() -> Config:
    """Alembic config usable from any working directory."""
    api_dir = Path(__file__).resolve().parent
    if str(api_dir) not in sys.path:
        sys.path.insert(0, str(api_dir))

    cfg = Config(str(api_dir / "alembic.ini"))
    cfg.set_main_option("script_location", str(api_dir / "alembic"))
    return cfg


def cmd_migrate(target: str) -> int:
    """Run database migrations."""
    from alembic import command

    logger.info("Running database migrations to %s...", target)
    command.upgrade(get_alembic_config(), target)
    logger.info("Migrations complete")
    return 0


def cmd_create_token(subject: str, ttl_seconds: int | None) -> int:
    """Issue an access token signed with the configured JWT secret."""
    from core.auth import create_access_token

    print(create_access_token(subject, ttl_seconds=ttl_seconds))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Worksite Registry API CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    migrate = subparsers.add_parser("migrate", help="Run database migrations")
    migrate.add_argument(
        "target",
        nargs="?",
        default="head",
        help="Target revision (default: head)",
    )

    token = subparsers.add_parser(
        "create-token",
        help="Print a bearer token for local testing",
    )
    token.add_argument("subject", help="Value of the token's 'sub' claim")
    token.add_argument(
        "--ttl",
        type=int,
        default=None,
        help="Lifetime in seconds (default: JWT_TTL_SECONDS)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    match args.command:
        case "migrate":
            return cmd_migrate(args.target)
        case "create-token":
            return cmd_create_token(args.subject, args.ttl)
        case _:
            parser.print_help()
            return 1


if __name__ == "__main__":
    sys.exit(main())
