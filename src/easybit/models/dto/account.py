# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

from decimal import Decimal

from pydantic import Field, field_serializer

from easybit.models.dto.base import DecimalAmount, RequestDTO

#: Allowed range and step size of the API extra fee
MIN_EXTRA_FEE = Decimal("0")
MAX_EXTRA_FEE = Decimal("0.1")
EXTRA_FEE_STEP = Decimal("0.0001")


class ExtraFeeDTO(RequestDTO):
    """
    Body of ``/setExtraFee``. An API fee of 0.4 % is passed as ``0.004``.
    """

    extra_fee: DecimalAmount = Field(
        ...,
        ge=MIN_EXTRA_FEE,
        le=MAX_EXTRA_FEE,
        multiple_of=EXTRA_FEE_STEP,
    )

    @field_serializer("extra_fee")
    def serialize_extra_fee(self, value: Decimal) -> float:
        return float(value)
