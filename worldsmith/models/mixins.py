# worldsmith/models/mixins.py
from sqlalchemy import Column, DateTime, Enum as SAEnum
from sqlalchemy.sql import func


def value_enum(enum_class):
    """Store a str Enum by its value rather than its member name"""
    return SAEnum(
        enum_class,
        values_callable=lambda members: [member.value for member in members],
        native_enum=False,
        validate_strings=True,
    )


class TimestampMixin:
    """Mixin to add created_at and updated_at columns to models"""
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
