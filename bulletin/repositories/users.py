"""User persistence. Email uniqueness is enforced by the unique index, not a pre-check."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from bulletin.core.errors import ConflictError
from bulletin.models import User

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL_MESSAGE = "A user with this email already exists"


class UserRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> User | None:
        return self.session.get(User, user_id)

    def get_by_email(self, email: str) -> User | None:
        return self.session.query(User).filter(User.email == email).first()

    def list(self) -> list[User]:
        return self.session.query(User).order_by(User.id).all()

    def add(self, user: User) -> User:
        self.session.add(user)
        self._commit()
        self.session.refresh(user)
        return user

    def save(self, user: User) -> User:
        self._commit()
        self.session.refresh(user)
        return user

    def delete(self, user: User) -> None:
        self.session.delete(user)
        self.session.commit()

    def _commit(self) -> None:
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            logger.info("User write rejected by unique constraint", extra={"reason": "duplicate_email"})
            raise ConflictError(DUPLICATE_EMAIL_MESSAGE) from e
