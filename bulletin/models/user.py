"""ORM model for application users (auth and RBAC)."""

from sqlalchemy import Column, DateTime, Integer, String, func

from bulletin.core.enums import UserRole
from bulletin.models.base import Base


class User(Base):
    """
    User account for JWT authentication and role-based access control.

    role: 'participant', 'organizer' or 'admin'. password_hash is always a
    bcrypt hash produced by the user service before the row is written.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(150), nullable=False, unique=True, index=True)
    password_hash = Column(String(200), nullable=False)
    role = Column(String(50), nullable=False, default=UserRole.PARTICIPANT.value)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
