"""Wire-format annotated types shared by every view schema."""

from datetime import datetime
from decimal import Decimal
from typing import Annotated

from pydantic import PlainSerializer

from bookshop.core.wire_format import format_price, format_timestamp

Price = Annotated[Decimal, PlainSerializer(format_price, return_type=str)]
Timestamp = Annotated[datetime, PlainSerializer(format_timestamp, return_type=str)]
