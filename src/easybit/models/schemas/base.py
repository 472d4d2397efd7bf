# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel


def _float_to_plain_string(value: Any) -> Any:  # noqa: ANN401
    # 1e-05 would otherwise become "1e-05"
    if isinstance(value, float):
        return format(Decimal(str(value)), "f")
    return value


#: Amount kept as string, JSON numbers in plain notation
Amount = Annotated[str, BeforeValidator(_float_to_plain_string)]


class EasybitSchema(BaseModel):
    """
    Base for all response schemas.

    The API uses camelCase keys, the models expose snake_case attributes.
    Amounts are kept as strings; numeric JSON values are converted to their
    string form, since the API has delivered both over time.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        coerce_numbers_to_str=True,
    )
