"""
Singleton status row describing the most recent completion call.
"""

from sqlalchemy import CheckConstraint, Column, Integer, String, Text

from .base import Base

STATUS_ROW_ID = 1


class Status(Base):
    """
    Process-wide status snapshot.

    Exactly one row (``id = 1``) exists; it is inserted when the store is
    bootstrapped and only ever updated in place afterwards.
    """

    __tablename__ = "status"
    __table_args__ = (CheckConstraint(f"id = {STATUS_ROW_ID}", name="ck_status_singleton"),)

    id = Column(Integer, primary_key=True, autoincrement=False)
    active_model = Column(String(128), nullable=True)
    active_agent = Column(String(128), nullable=False)
    last_response_ms = Column(Integer, nullable=True)
    last_error = Column(Text, nullable=True)
