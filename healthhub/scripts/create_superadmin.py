"""Bootstrap the first superadmin account.

    python -m healthhub.scripts.create_superadmin --email ops@example.com --password 'S3cret!' --name Ops
"""
import argparse
import asyncio

from healthhub.config import get_settings
from healthhub.constants import Role
from healthhub.database import close_db, init_db
from healthhub.models import Admin
from healthhub.security import hash_password


async def create_or_get_superadmin(*, email: str, password: str, name: str) -> Admin:
    """Create the superadmin if it doesn't already exist; return the existing one otherwise."""
    email = email.strip().lower()
    existing = await Admin.find_one(Admin.email == email)
    if existing:
        print(f"[SKIP] Admin '{email}' already exists with id={existing.id}")
        return existing

    admin = Admin(
        name=name,
        email=email,
        password=hash_password(password),
        role=Role.SUPERADMIN,
        isActive=True,
    )
    await admin.insert()
    print(f"[OK] Created superadmin '{email}' with id={admin.id}")
    return admin


async def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Create the HealthHub superadmin account")
    parser.add_argument("--email", required=True)
    parser.add_argument("--password", required=True)
    parser.add_argument("--name", default="Super Admin")
    args = parser.parse_args(argv)

    settings = get_settings()
    print(f"Using MongoDB URI: {settings.MONGODB_URI}")
    await init_db()
    try:
        await create_or_get_superadmin(email=args.email, password=args.password, name=args.name)
    finally:
        await close_db()


if __name__ == "__main__":
    asyncio.run(main())
