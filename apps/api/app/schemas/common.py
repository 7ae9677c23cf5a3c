from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Wire models: snake_case in Python, camelCase in JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        use_enum_values=True,
    )


def id_to_str(value: Any) -> Any:
    # Database ids can exceed the 53-bit range JavaScript clients parse safely.
    if isinstance(value, int):
        return str(value)
    return value


def decimal_to_float(value: Any) -> Any:
    if isinstance(value, Decimal):
        return float(value)
    return value


class SuccessResponse(ApiModel):
    success: bool = True
