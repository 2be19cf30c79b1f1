"""Create an admin account (Postgres only).

Usage:
    uv run python -m scripts.create_admin_user <email> [password] [full_name]
If password is omitted, a random one is printed.
"""

import asyncio
import secrets
import sys

from dotenv import load_dotenv

from app.core.config import get_settings
from app.domain.enums import UserRole
from app.domain.exceptions import DuplicateResourceException
from app.infrastructure.persistence import database
from app.infrastructure.persistence.repositories import UserRepository


async def main() -> None:
    if len(sys.argv) < 2:
        print(
            "Usage: uv run python -m scripts.create_admin_user <email> [password] [full_name]",
            file=sys.stderr,
        )
        sys.exit(1)
    email = sys.argv[1]
    password = sys.argv[2] if len(sys.argv) > 2 else secrets.token_urlsafe(12)
    full_name = sys.argv[3] if len(sys.argv) > 3 else None

    load_dotenv()
    get_settings()
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        print("AsyncSessionLocal not configured. Set DATABASE_URL.", file=sys.stderr)
        sys.exit(1)

    async with database.AsyncSessionLocal() as session:
        async with session.begin():
            user_repo = UserRepository(session)
            try:
                user = await user_repo.create_user(
                    email=email,
                    password=password,
                    full_name=full_name,
                    role=UserRole.ADMIN.value,
                )
            except DuplicateResourceException:
                print(f"User already exists: {email}", file=sys.stderr)
                sys.exit(1)
            print(f"Created admin: {user.id} ({user.email})")
            if len(sys.argv) <= 2:
                print(f"Password: {password}")
    await database.dispose_engine()


if __name__ == "__main__":
    asyncio.run(main())
