import re

from sqlalchemy import Column, DateTime
from sqlalchemy.ext.declarative import declared_attr
from sqlalchemy.orm import DeclarativeBase

from songskip.utils.datetime_helper import utc_now

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


class Base(DeclarativeBase):
    """Base class for all models."""

    @declared_attr
    def __tablename__(cls):
        # SkippedSection -> skipped_sections
        return _CAMEL_BOUNDARY.sub("_", cls.__name__).lower() + "s"


class CreatedAtMixin:
    """Mixin to add a created_at timestamp assigned on insert."""

    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)
