"""Bookmark model."""

from sqlalchemy import Column, ForeignKey, Integer, String, Text

from src.database import Base
from src.models.mixins import TimestampMixin


class Bookmark(Base, TimestampMixin):
    """Bookmark owned by exactly one user."""

    __tablename__ = "bookmarks"

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = Column(String(255), nullable=False)
    link = Column(String(2048), nullable=False)
    description = Column(Text, nullable=True)
