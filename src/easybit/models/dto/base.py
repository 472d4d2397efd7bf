# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

from decimal import Decimal
from typing import Annotated, Any, Self

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel


class RequestDTO(BaseModel):
    """
    Base for all request parameters.

    Fields are dumped with their camelCase wire names. Decimal amounts are
    dumped as strings in plain notation.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_params(self: Self) -> dict[str, str]:
        """
        Query parameters for GET requests.

        Unset and empty values are left out, since the API rejects empty
        parameters like ``network=``.
        """
        return {
            key: str(value)
            for key, value in self.model_dump(mode="json", by_alias=True).items()
            if value is not None and value != ""
        }

    def to_body(self: Self) -> dict[str, Any]:
        """JSON body for POST requests, without unset fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def _float_to_decimal(value: Any) -> Any:  # noqa: ANN401
    # Decimal(0.1) would keep the binary representation error
    if isinstance(value, float):
        return Decimal(str(value))
    return value


def _to_plain_string(value: Decimal) -> str:
    # str(Decimal("0.0000001")) is "1E-7"
    return format(value, "f")


#: Amount accepting Decimal, int, float and numeric strings
DecimalAmount = Annotated[
    Decimal,
    BeforeValidator(_float_to_decimal),
    PlainSerializer(_to_plain_string, return_type=str, when_used="json"),
]
