"""Shared pydantic base: camelCase on the wire, snake_case in Python."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def _one_decimal(value: Decimal) -> str:
    return str(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


# Stored as NUMERIC(3,2); rendered as "8.5", not "8.50"
RiskScore = Annotated[Decimal, PlainSerializer(_one_decimal, return_type=str, when_used="json")]
