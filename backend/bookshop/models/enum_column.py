"""Enum column helper — stores str-Enum *values* ("Confirmed"), not member names."""

from enum import Enum

from sqlalchemy import Enum as SAEnum


def enum_column_type(enum_cls: type[Enum], length: int = 20) -> SAEnum:
    return SAEnum(
        enum_cls,
        native_enum=False,
        length=length,
        values_callable=lambda members: [m.value for m in members],
        validate_strings=True,
    )
