# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#
# Response schemas

from easybit.models.schemas.account import AccountSchema
from easybit.models.schemas.currency import (
    CurrencySchema,
    ExchangeRateSchema,
    NetworkSchema,
    PairInfoSchema,
)
from easybit.models.schemas.envelope import ErrorEnvelopeSchema
from easybit.models.schemas.order import (
    OrderSchema,
    OrderStatusSchema,
    OrderSummarySchema,
)

__all__ = [
    "AccountSchema",
    "CurrencySchema",
    "ErrorEnvelopeSchema",
    "ExchangeRateSchema",
    "NetworkSchema",
    "OrderSchema",
    "OrderStatusSchema",
    "OrderSummarySchema",
    "PairInfoSchema",
]
