# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#
# Data Transfer objects

from easybit.models.dto.account import ExtraFeeDTO
from easybit.models.dto.configuration import ClientConfigDTO
from easybit.models.dto.currency import (
    AddressValidationQueryDTO,
    CurrencyListQueryDTO,
    ExchangeRateQueryDTO,
    PairInfoQueryDTO,
    SingleCurrencyQueryDTO,
)
from easybit.models.dto.kyc import DocumentDTO, KYCProofDTO, ValidationDataDTO
from easybit.models.dto.order import (
    CreateOrderDTO,
    OrdersQueryDTO,
    OrderStatusQueryDTO,
    RefundOrderDTO,
)

__all__ = [
    "AddressValidationQueryDTO",
    "ClientConfigDTO",
    "CreateOrderDTO",
    "CurrencyListQueryDTO",
    "DocumentDTO",
    "ExchangeRateQueryDTO",
    "ExtraFeeDTO",
    "KYCProofDTO",
    "OrderStatusQueryDTO",
    "OrdersQueryDTO",
    "PairInfoQueryDTO",
    "RefundOrderDTO",
    "SingleCurrencyQueryDTO",
    "ValidationDataDTO",
]
