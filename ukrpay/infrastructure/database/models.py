"""SQLAlchemy ORM models"""

from sqlalchemy import Column, DateTime, Text
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class FormState(Base):
    """Last saved payment form, serialised as JSON under a fixed key"""

    __tablename__ = "form_state"

    key = Column(Text, primary_key=True)
    payload = Column(Text, nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
