# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#
# Domain models

from easybit.models.domain.enums import (
    AmountType,
    DocumentSide,
    DocumentType,
    OrderStatus,
    SortDirection,
    ValidationStatus,
    VolatilityProtection,
)
from easybit.models.domain.pair import PairIdentifier

__all__ = [
    "AmountType",
    "DocumentSide",
    "DocumentType",
    "OrderStatus",
    "PairIdentifier",
    "SortDirection",
    "ValidationStatus",
    "VolatilityProtection",
]
