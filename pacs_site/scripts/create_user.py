"""
Create a login account (e.g. a second admin). Run from project root:
  python -m pacs_site.scripts.create_user USERNAME PASSWORD [role]
Example:
  python -m pacs_site.scripts.create_user claire a-long-passphrase staff
"""
import argparse
import sys

from pacs_site.core.database import SessionLocal
from pacs_site.core.security import (
    PASSWORD_MAX_LEN,
    USERNAME_MAX_LEN,
    hash_password,
)
from pacs_site.models import Role, User
from pacs_site.models.role import ROLE_NAMES, ROLE_VOLUNTEER

# Stricter than the login check: the seeded admin/admin must still be accepted there.
NEW_PASSWORD_MIN_LEN = 8


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a PACS/SIMPA user (no registration UI).")
    parser.add_argument("username", help=f"Username (1-{USERNAME_MAX_LEN} chars)")
    parser.add_argument("password", help=f"Password ({NEW_PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument("role", nargs="?", default=ROLE_VOLUNTEER, choices=list(ROLE_NAMES))
    parser.add_argument("--email", default=None, help="Optional contact email")
    args = parser.parse_args(argv)

    username = args.username.strip()
    if not username or len(username) > USERNAME_MAX_LEN:
        print("Invalid username length.", file=sys.stderr)
        return 1
    if not (NEW_PASSWORD_MIN_LEN <= len(args.password) <= PASSWORD_MAX_LEN):
        print(
            f"Password must be {NEW_PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} characters.",
            file=sys.stderr,
        )
        return 1

    db = SessionLocal()
    try:
        existing = db.query(User).filter(User.username == username).first()
        if existing:
            print(f"User '{username}' already exists.", file=sys.stderr)
            return 1
        role = db.query(Role).filter(Role.name == args.role).first()
        if role is None:
            print(f"Role '{args.role}' is missing; start the site once to seed roles.", file=sys.stderr)
            return 1
        user = User(
            username=username,
            email=args.email,
            password=hash_password(args.password),
            role_id=role.id,
        )
        db.add(user)
        db.commit()
        print(f"Created user '{username}' with role '{args.role}'.")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
