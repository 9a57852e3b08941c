# /tutorhub/db/base_class.py

from sqlalchemy import Column, DateTime
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

# Every ORM model in the project inherits from this Base.
Base = declarative_base()


class TimestampMixin:
    """Adds the `created_at` / `updated_at` bookkeeping columns every table carries."""
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
