"""
User management helper for the portfolio backend.

Usage:
    python manage_users.py create <username> <password> [--role ADMIN|USER]
    python manage_users.py list
    python manage_users.py set-role <username> ADMIN|USER
    python manage_users.py set-password <username> <password>
    python manage_users.py delete <username>
"""
import argparse
import asyncio
import os
import sys

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from sqlalchemy import select

from portfolio.core.database import AsyncSessionLocal, dispose_engine, init_db
from portfolio.models.user import Role, User
from portfolio.services.auth_service import create_user, get_password_hash, get_user_by_username


async def cmd_create(args) -> int:
    async with AsyncSessionLocal() as session:
        if await get_user_by_username(session, args.username):
            print(f"User '{args.username}' already exists")
            return 1
        user = await create_user(session, args.username, args.password, Role(args.role))
        print(f"Created {user.role.value} user '{user.username}' (id {user.id})")
    return 0


async def cmd_list(args) -> int:
    async with AsyncSessionLocal() as session:
        result = await session.execute(select(User).order_by(User.id))
        users = result.scalars().all()
    if not users:
        print("No users found.")
        return 0
    print(f"{'Id':<6} {'Username':<24} {'Role':<8} {'Created':<20}")
    print("-" * 60)
    for u in users:
        print(f"{u.id:<6} {u.username:<24} {u.role.value:<8} {u.created_at:%Y-%m-%d %H:%M}")
    return 0


async def _update(username: str, **fields) -> bool:
    async with AsyncSessionLocal() as session:
        user = await get_user_by_username(session, username)
        if not user:
            print(f"User '{username}' not found")
            return False
        for k, v in fields.items():
            setattr(user, k, v)
        session.add(user)
        await session.commit()
    return True


async def cmd_set_role(args) -> int:
    if not await _update(args.username, role=Role(args.role)):
        return 1
    print(f"'{args.username}' is now {args.role}")
    return 0


async def cmd_set_password(args) -> int:
    if not await _update(args.username, hashed_password=get_password_hash(args.password)):
        return 1
    print(f"Password updated for '{args.username}'")
    return 0


async def cmd_delete(args) -> int:
    async with AsyncSessionLocal() as session:
        user = await get_user_by_username(session, args.username)
        if not user:
            print(f"User '{args.username}' not found")
            return 1
        await session.delete(user)
        await session.commit()
    print(f"Deleted '{args.username}'")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Manage portfolio backend users")
    parser.add_argument("--init-db", action="store_true", help="create missing tables first")
    sub = parser.add_subparsers(dest="command", required=True)

    create = sub.add_parser("create", help="create a user")
    create.add_argument("username")
    create.add_argument("password")
    create.add_argument("--role", choices=[r.value for r in Role], default=Role.ADMIN.value)
    create.set_defaults(func=cmd_create)

    sub.add_parser("list", help="list users").set_defaults(func=cmd_list)

    set_role = sub.add_parser("set-role", help="change a user's role")
    set_role.add_argument("username")
    set_role.add_argument("role", choices=[r.value for r in Role])
    set_role.set_defaults(func=cmd_set_role)

    set_password = sub.add_parser("set-password", help="reset a user's password")
    set_password.add_argument("username")
    set_password.add_argument("password")
    set_password.set_defaults(func=cmd_set_password)

    delete = sub.add_parser("delete", help="delete a user")
    delete.add_argument("username")
    delete.set_defaults(func=cmd_delete)
    return parser


async def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        if args.init_db:
            await init_db()
        return await args.func(args)
    finally:
        await dispose_engine()


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
