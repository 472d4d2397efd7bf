# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

"""
Interface of the easybit REST service

Implementations translate the request DTOs into HTTP calls and the responses
into schemas. Failures are reported by raising one of the errors of
:mod:`easybit.exceptions`.
"""

from abc import ABC, abstractmethod
from typing import Self

from easybit.models.dto import (
    AddressValidationQueryDTO,
    CreateOrderDTO,
    CurrencyListQueryDTO,
    ExchangeRateQueryDTO,
    ExtraFeeDTO,
    KYCProofDTO,
    OrdersQueryDTO,
    OrderStatusQueryDTO,
    PairInfoQueryDTO,
    RefundOrderDTO,
    SingleCurrencyQueryDTO,
)
from easybit.models.schemas import (
    AccountSchema,
    CurrencySchema,
    ExchangeRateSchema,
    OrderSchema,
    OrderStatusSchema,
    OrderSummarySchema,
    PairInfoSchema,
)


class IEasybitRESTService(ABC):
    """Interface for the easybit REST operations."""

    @property
    @abstractmethod
    def url(self: Self) -> str:
        """The base URL all paths are relative to."""

    @property
    @abstractmethod
    def api_key(self: Self) -> str:
        """The API key sent with every request."""

    @abstractmethod
    def close(self: Self) -> None:
        """Forget the credentials. No request can be made afterwards."""

    # == Account ===============================================================
    @abstractmethod
    def get_account(self: Self) -> AccountSchema:
        """Get fee tier, volume and fees of the account."""
        raise NotImplementedError(
            "This method should be implemented in the concrete service class.",
        )

    @abstractmethod
    def set_extra_fee(self: Self, extra_fee: ExtraFeeDTO) -> None:
        """Set the extra fee charged on top of the easybit fee."""
        raise NotImplementedError(
            "This method should be implemented in the concrete service class.",
        )

    # == Currencies and pairs ==================================================
    @abstractmethod
    def get_currency_list(
        self: Self,
        query: CurrencyListQueryDTO,
    ) -> list[CurrencySchema]:
        """Get all supported currencies, optionally filtered by code."""
        raise NotImplementedError(
            "This method should be implemented in the concrete service class.",
        )

    @abstractmethod
    def get_single_currency(
        self: Self,
        query: SingleCurrencyQueryDTO,
    ) -> CurrencySchema:
        """
        Get a single currency.

        Raises an ApiError with code 404 if the API does not return the
        requested currency.
        """
        raise NotImplementedError(
            "This method should be implemented in the concrete service class.",
        )

    @abstractmethod
    def get_pair_list(self: Self) -> list[str]:
        """Get all supported pairs, e.g. ``"BTC_BTC_ETH_ETH"``."""
        raise NotImplementedError(
            "This method should be implemented in the concrete service class.",
        )

    @abstractmethod
    def get_pair_info(self: Self, query: PairInfoQueryDTO) -> PairInfoSchema:
        """Get the bounds and fees of a pair."""
        raise NotImplementedError(
            "This method should be implemented in the concrete service class.",
        )

    @abstractmethod
    def get_exchange_rate(
        self: Self,
        query: ExchangeRateQueryDTO,
    ) -> ExchangeRateSchema:
        """Get a quote for exchanging a given amount."""
        raise NotImplementedError(
            "This method should be implemented in the concrete service class.",
        )

    @abstractmethod
    def validate_address(self: Self, query: AddressValidationQueryDTO) -> None:
        """Validate a receive address. Raises an ApiError if it is invalid."""
        raise NotImplementedError(
            "This method should be implemented in the concrete service class.",
        )

    # == Orders ================================================================
    @abstractmethod
    def create_order(self: Self, order: CreateOrderDTO) -> OrderSchema:
        """Create a new exchange order."""
        raise NotImplementedError(
            "This method should be implemented in the concrete service class.",
        )

    @abstractmethod
    def get_order_status(self: Self, query: OrderStatusQueryDTO) -> OrderStatusSchema:
        """Get the current status of an order."""
        raise NotImplementedError(
            "This method should be implemented in the concrete service class.",
        )

    @abstractmethod
    def get_orders(self: Self, query: OrdersQueryDTO) -> list[OrderSummarySchema]:
        """Get the orders of the account matching the given filters."""
        raise NotImplementedError(
            "This method should be implemented in the concrete service class.",
        )

    # == KYC ===================================================================
    @abstractmethod
    def update_kyc(self: Self, proof: KYCProofDTO) -> None:
        """Submit KYC documents for an order in "Action Request"."""
        raise NotImplementedError(
            "This method should be implemented in the concrete service class.",
        )

    @abstractmethod
    def refund_order(self: Self, refund: RefundOrderDTO) -> None:
        """Request the refund of an order in "Action Request"."""
        raise NotImplementedError(
            "This method should be implemented in the concrete service class.",
        )
