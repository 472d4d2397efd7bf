# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

"""
Schemas for order related responses.

Timestamps (``created_at``, ``updated_at``) are milliseconds since epoch.
"""

from typing import Any, Self

from pydantic import field_validator

from easybit.models.domain import OrderStatus, ValidationStatus
from easybit.models.schemas.base import Amount, EasybitSchema

#: Validation states in which an order that requires action can be refunded
REFUNDABLE_VALIDATION_STATES: frozenset[ValidationStatus | None] = frozenset(
    {
        None,
        ValidationStatus.AWAITING,
        ValidationStatus.FAILED_ALLOW_RETRY,
        ValidationStatus.FAILED_DENY_RETRY,
    },
)


class OrderSchema(EasybitSchema):
    """Model for the ``/order`` response of a newly created order"""

    id: str
    send: str
    receive: str
    send_network: str
    receive_network: str
    send_amount: Amount
    receive_amount: Amount
    send_address: str  # Deposit address the user has to send to
    send_tag: str | None = None
    receive_address: str
    receive_tag: str | None = None
    refund_address: str | None = None
    refund_tag: str | None = None
    vpm: str  # "off" if not set
    created_at: int


class TrackedOrderSchema(EasybitSchema):
    """Fields shared by all responses reporting the state of an order"""

    id: str
    status: OrderStatus
    receive_amount: Amount
    hash_in: str | None = None
    hash_out: str | None = None
    validation_status: ValidationStatus | None = None
    created_at: int
    updated_at: int

    @field_validator("validation_status", mode="before")
    @classmethod
    def null_validation_status(cls, value: Any) -> Any:  # noqa: ANN401
        """The API reports a missing validation as ``"null"`` or ``""``."""
        if isinstance(value, str) and value in {"null", ""}:
            return None
        return value

    @property
    def is_refundable(self: Self) -> bool:
        """Whether ``refund_order`` is accepted for this order right now."""
        return (
            self.status == OrderStatus.ACTION_REQUEST
            and self.validation_status in REFUNDABLE_VALIDATION_STATES
        )


class OrderStatusSchema(TrackedOrderSchema):
    """Model for the ``/orderStatus`` response"""


class OrderSummarySchema(TrackedOrderSchema):
    """Model for an entry of the ``/orders`` response"""

    send: str
    receive: str
    send_network: str
    receive_network: str
    send_amount: Amount  # Finalized amounts
    # Estimations at the time the order was created
    estimated_send_amount: Amount
    estimated_receive_amount: Amount
    send_address: str
    send_tag: str | None = None
    receive_address: str
    receive_tag: str | None = None
    refund_address: str | None = None
    refund_tag: str | None = None
    vpm: str
    network_fee: Amount
    earned: Amount  # Earnings of the API user from this order
