"""
Create a user (e.g. the first admin). Run from project root:
  python -m bulletin.scripts.create_user EMAIL PASSWORD FIRST_NAME LAST_NAME [role]
Example:
  python -m bulletin.scripts.create_user admin@example.edu your-secure-password Ada Admin admin
"""
import argparse
import logging
import sys

from pydantic import ValidationError

from bulletin.core.config import LOG_DATEFMT, LOG_FORMAT, get_settings
from bulletin.core.database import SessionLocal
from bulletin.core.enums import UserRole
from bulletin.core.errors import ConflictError
from bulletin.repositories import UserRepository
from bulletin.schemas.user import UserCreate
from bulletin.services.users import register_user

logging.basicConfig(
    level=logging.INFO,
    format=LOG_FORMAT,
    datefmt=LOG_DATEFMT,
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a bulletin board user (including admins).")
    parser.add_argument("email", help="Email address (unique)")
    parser.add_argument("password", help="Password (8-200 chars)")
    parser.add_argument("first_name", help="First name")
    parser.add_argument("last_name", help="Last name")
    parser.add_argument(
        "role",
        nargs="?",
        default=UserRole.PARTICIPANT.value,
        choices=[r.value for r in UserRole],
    )
    args = parser.parse_args(argv)

    try:
        data = UserCreate(
            email=args.email.strip(),
            password=args.password,
            first_name=args.first_name.strip(),
            last_name=args.last_name.strip(),
            role=UserRole(args.role),
        )
    except ValidationError as e:
        for err in e.errors():
            field = ".".join(str(p) for p in err["loc"])
            print(f"Invalid {field}: {err['msg']}", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        user = register_user(
            UserRepository(db),
            data,
            bcrypt_rounds=get_settings().BCRYPT_ROUNDS,
            allow_admin=True,
        )
    except ConflictError as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()
    logger.info("Created user %s with role %s", user.email, user.role)
    print(f"Created user '{data.email}' with role '{args.role}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
