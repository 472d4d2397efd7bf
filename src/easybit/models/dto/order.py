# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import Field, field_serializer, field_validator

from easybit.models.domain import OrderStatus, SortDirection, VolatilityProtection
from easybit.models.dto.account import EXTRA_FEE_STEP, MAX_EXTRA_FEE, MIN_EXTRA_FEE
from easybit.models.dto.base import DecimalAmount, RequestDTO


class CreateOrderDTO(RequestDTO):
    """
    Body of ``/order``.

    The user identity fields are forwarded to easybit for KYC/AML purposes:
    ``user_device_id`` is required if ``payload`` is not set, ``user_id``
    must be left out for guest users and ``payload`` is the hash generated
    by the easybit identification script.
    """

    send: str = Field(..., min_length=1)
    receive: str = Field(..., min_length=1)
    amount: DecimalAmount = Field(..., gt=0)
    receive_address: str = Field(..., min_length=1)
    send_network: str | None = None
    receive_network: str | None = None
    receive_tag: str | None = None
    extra_fee_override: DecimalAmount | None = Field(
        None,
        ge=MIN_EXTRA_FEE,
        le=MAX_EXTRA_FEE,
        multiple_of=EXTRA_FEE_STEP,
    )
    vpm: VolatilityProtection | None = None
    refund_address: str | None = None
    refund_tag: str | None = None
    user_id: str | None = None
    user_device_id: str | None = None
    payload: str | None = None

    @field_serializer("extra_fee_override")
    def serialize_extra_fee_override(self, value: Decimal | None) -> float | None:
        return None if value is None else float(value)


class OrderStatusQueryDTO(RequestDTO):
    id: str = Field(..., min_length=1)


class OrdersQueryDTO(RequestDTO):
    """Filters of ``/orders``; dates are milliseconds since epoch."""

    id: str | None = None
    limit: int | None = Field(None, gt=0)
    date_from: int | None = Field(None, ge=0)
    date_to: int | None = Field(None, ge=0)
    sort_direction: SortDirection | None = None
    status: OrderStatus | None = None

    @field_validator("date_from", "date_to", mode="before")
    @classmethod
    def datetime_to_milliseconds(cls, value: Any) -> Any:  # noqa: ANN401
        if isinstance(value, datetime):
            return int(value.timestamp() * 1000)
        return value


class RefundOrderDTO(RequestDTO):
    """
    Body of ``/refundOrder``. Only accepted while the order is in
    "Action Request" and its validation failed or is still open.
    """

    id: str = Field(..., min_length=1)
    refund_address: str = Field(..., min_length=1)
    refund_tag: str | None = None
