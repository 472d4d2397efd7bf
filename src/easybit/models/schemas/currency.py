# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

"""Schemas for currency, pair and rate related responses."""

from pydantic import Field

from easybit.models.schemas.base import Amount, EasybitSchema


class NetworkSchema(EasybitSchema):
    """Model for a single network a currency can be sent or received on"""

    network: str  # Network code, e.g. "ETH"
    name: str
    is_default: bool
    send_status: bool  # The system can send through this network
    receive_status: bool  # The system can receive through this network
    receive_decimals: int
    confirmations_minimum: int
    confirmations_maximum: int
    explorer: str
    explorer_hash: str  # Explorer URL template for transaction hashes
    explorer_address: str  # Explorer URL template for addresses
    has_tag: bool  # The network requires a tag/memo
    tag_name: str | None = None
    contract_address: str | None = None
    explorer_contract: str | None = None


class CurrencySchema(EasybitSchema):
    """Model for an entry of the ``/currencyList`` response"""

    currency: str  # Currency code, e.g. "BTC"
    name: str
    # Send/receive possible through at least one network
    send_status_all: bool
    receive_status_all: bool
    network_list: list[NetworkSchema] = Field(default_factory=list)

    def get_network(self, network: str) -> NetworkSchema | None:
        """Return the network with the given code, if supported."""
        return next((n for n in self.network_list if n.network == network), None)

    @property
    def default_network(self) -> NetworkSchema | None:
        return next((n for n in self.network_list if n.is_default), None)


class PairInfoSchema(EasybitSchema):
    """Model for the ``/pairInfo`` response"""

    minimum_amount: Amount
    maximum_amount: Amount
    network_fee: Amount
    confirmations: int
    processing_time: str  # e.g. "3-5"


class ExchangeRateSchema(EasybitSchema):
    """Model for the ``/rate`` response"""

    rate: Amount
    send_amount: Amount
    receive_amount: Amount
    network_fee: Amount
    confirmations: int
    processing_time: str
