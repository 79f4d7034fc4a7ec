"""ORM model for post categories."""

from sqlalchemy import Column, Integer, String, Text

from bulletin.models.base import Base


class Category(Base):
    """Category a post belongs to. `name` is unique at the database level."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, unique=True)
    description = Column(Text, nullable=True)
