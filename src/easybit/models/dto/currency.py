# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

"""Query parameters of the currency, pair and rate endpoints."""

from pydantic import Field

from easybit.models.domain import AmountType
from easybit.models.dto.account import EXTRA_FEE_STEP, MAX_EXTRA_FEE, MIN_EXTRA_FEE
from easybit.models.dto.base import DecimalAmount, RequestDTO


class CurrencyListQueryDTO(RequestDTO):
    currency: str | None = None


class SingleCurrencyQueryDTO(RequestDTO):
    currency: str = Field(..., min_length=1)


class PairInfoQueryDTO(RequestDTO):
    send: str = Field(..., min_length=1)
    receive: str = Field(..., min_length=1)
    send_network: str | None = None
    receive_network: str | None = None
    amount_type: AmountType | None = None


class ExchangeRateQueryDTO(PairInfoQueryDTO):
    amount: DecimalAmount = Field(..., gt=0)
    # Overrides the account extra fee for this quote, e.g. for promotions
    extra_fee_override: DecimalAmount | None = Field(
        None,
        ge=MIN_EXTRA_FEE,
        le=MAX_EXTRA_FEE,
        multiple_of=EXTRA_FEE_STEP,
    )


class AddressValidationQueryDTO(RequestDTO):
    currency: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
    network: str | None = None
    tag: str | None = None
