"""
vibetune-admin: account maintenance commands.

Usage:
    vibetune-admin make-admin alice@example.com
    vibetune-admin check-admin alice@example.com

Reads DATABASE_URL and SECRET_KEY the same way the server does.
"""

import argparse
import asyncio
import sys
from typing import Optional, Sequence

from vibetune.core.config import Settings, get_settings
from vibetune.core.database import Database
from vibetune.core.logging_config import configure_logging
from vibetune.services import users as user_service


async def make_admin(database: Database, email: str) -> int:
    """Grant admin rights to the user with this email. Returns an exit status."""
    status = 0
    async with database.session() as session:
        user = await user_service.set_admin(session, email, is_admin=True)
        if user is None:
            print(f"User not found with email: {email}", file=sys.stderr)
            status = 1
        else:
            print(f"Successfully made {user.username} ({user.email}) an admin")
    return status


async def check_admin(database: Database, email: str) -> int:
    """Print the account details for this email. Returns an exit status."""
    status = 0
    async with database.session() as session:
        user = await user_service.get_user_by_email(session, email)
        if user is None:
            print(f"User not found with email: {email}", file=sys.stderr)
            status = 1
        else:
            print("User details:")
            print(f"Username: {user.username}")
            print(f"Email: {user.email}")
            print(f"Is Admin: {user.is_admin}")
            print(f"Created At: {user.created_at.isoformat()}")
    return status


COMMANDS = {
    "make-admin": make_admin,
    "check-admin": check_admin,
}


async def run(command: str, email: str, settings: Settings) -> int:
    database = Database.from_settings(settings)
    try:
        await database.create_all_tables()
        return await COMMANDS[command](database, email)
    finally:
        await database.dispose()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vibetune-admin", description="VibeTune account maintenance"
    )
    sub = parser.add_subparsers(dest="command", required=True)
    for name, help_text in (
        ("make-admin", "Grant admin privileges to a user"),
        ("check-admin", "Show a user's account details and admin flag"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("email", help="Email address of the account")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings)
    sys.exit(asyncio.run(run(args.command, args.email, settings)))


if __name__ == "__main__":
    main()
