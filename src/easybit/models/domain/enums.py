# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

"""Closed sets of values used by the easybit API."""

from enum import StrEnum


class OrderStatus(StrEnum):
    """Lifecycle of an order as tracked by easybit."""

    AWAITING_DEPOSIT = "Awaiting Deposit"
    CONFIRMING_DEPOSIT = "Confirming Deposit"
    EXCHANGING = "Exchanging"
    SENDING = "Sending"
    COMPLETE = "Complete"
    REFUND = "Refund"
    FAILED = "Failed"
    # The VPM was triggered, leading to a refund
    VOLATILITY_PROTECTION = "Volatility Protection"
    # KYC/AML action required
    ACTION_REQUEST = "Action Request"
    REQUEST_OVERDUE = "Request Overdue"


class ValidationStatus(StrEnum):
    """
    KYC validation outcome of an order. A missing value (``None``) means that
    no validation has been requested.
    """

    AWAITING = "awaiting"
    PENDING = "pending"
    FAILED_ALLOW_RETRY = "failed_allow_retry"
    # Refund within 48 hours
    FAILED_DENY_RETRY = "failed_deny_retry"
    COMPLETE = "complete"
    FAILED = "failed"


class AmountType(StrEnum):
    """Whether ``amount`` refers to the sent or to the received currency."""

    SEND = "send"
    RECEIVE = "receive"


class SortDirection(StrEnum):
    ASC = "ASC"
    DESC = "DESC"


class VolatilityProtection(StrEnum):
    """Volatility Protection Mode (VPM) of an order."""

    OFF = "off"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class DocumentType(StrEnum):
    PASSPORT = "PASSPORT"
    ID_CARD = "ID_CARD"
    DRIVER_LICENSE = "DRIVERS"
    RESIDENCE_PERMIT = "RESIDENCE_PERMIT"


class DocumentSide(StrEnum):
    FRONT = "FRONT_SIDE"
    BACK = "BACK_SIDE"
    SINGLE = "SINGLE_PAGE"
