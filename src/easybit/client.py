# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

"""
Client for the easybit.io API

Example::

    import os
    from easybit import EasybitClient

    with EasybitClient(os.environ["EASYBIT_URL"], os.environ["EASYBIT_API_KEY"]) as client:
        print(client.get_account())

Every method raises one of :class:`~easybit.exceptions.NetworkError`,
:class:`~easybit.exceptions.DeserializeError` or
:class:`~easybit.exceptions.ApiError` on failure, all subclasses of
:class:`~easybit.exceptions.EasybitError`.
Calls on a closed client raise ``RuntimeError``.
"""

from decimal import Decimal
from logging import getLogger
from types import TracebackType
from typing import Self

from easybit.adapters.rest import EasybitRESTServiceAdapter
from easybit.interfaces import IEasybitRESTService
from easybit.models.domain import (
    AmountType,
    OrderStatus,
    SortDirection,
    VolatilityProtection,
)
from easybit.models.dto import (
    AddressValidationQueryDTO,
    ClientConfigDTO,
    CreateOrderDTO,
    CurrencyListQueryDTO,
    DocumentDTO,
    ExchangeRateQueryDTO,
    ExtraFeeDTO,
    KYCProofDTO,
    OrdersQueryDTO,
    OrderStatusQueryDTO,
    PairInfoQueryDTO,
    RefundOrderDTO,
    SingleCurrencyQueryDTO,
    ValidationDataDTO,
)
from easybit.models.dto.configuration import DEFAULT_URL
from easybit.models.schemas import (
    AccountSchema,
    CurrencySchema,
    ExchangeRateSchema,
    OrderSchema,
    OrderStatusSchema,
    OrderSummarySchema,
    PairInfoSchema,
)

LOG = getLogger(__name__)

Amount = Decimal | float | int | str


class EasybitClient:
    """
    Entry point for all easybit operations.

    The client only holds the base URL and the API key and can be shared
    between threads. Used as a context manager, the API key is cleared when
    leaving the block.
    """

    def __init__(
        self: Self,
        url: str = DEFAULT_URL,
        api_key: str = "",
        timeout: float | None = None,
        rest_service: IEasybitRESTService | None = None,
    ) -> None:
        if rest_service is None:
            config = ClientConfigDTO(url=url, api_key=api_key, timeout=timeout)
            rest_service = EasybitRESTServiceAdapter(
                url=config.url,
                api_key=config.api_key,
                timeout=config.timeout,
            )
        self.__rest_service: IEasybitRESTService = rest_service

    @classmethod
    def from_config(cls: type[Self], config: ClientConfigDTO) -> Self:
        return cls(url=config.url, api_key=config.api_key, timeout=config.timeout)

    @property
    def url(self: Self) -> str:
        return self.__rest_service.url

    @property
    def api_key(self: Self) -> str:
        return self.__rest_service.api_key

    def close(self: Self) -> None:
        """Clear the credentials."""
        self.__rest_service.close()

    def __enter__(self: Self) -> Self:
        return self

    def __exit__(
        self: Self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self: Self) -> str:
        return f"EasybitClient(url={self.url!r})"

    # == Account ===============================================================

    def get_account(self: Self) -> AccountSchema:
        """
        Retrieve the account information.

        - ``level``: Account level
        - ``volume``: Volume traded in USDT during the last month
        - ``fee``: easybit.io fee
        - ``extra_fee``: Extra fee set via :meth:`set_fee`
        - ``total_fee``: Total fee charged to your users
        """
        LOG.info("Getting account info")
        return self.__rest_service.get_account()

    def set_fee(self: Self, fee: Amount) -> None:
        """
        Set the extra fee of the account.

        The allowed range is 0-0.1 with a step size of 0.0001, e.g. an extra
        fee of 0.4 % is set by passing ``0.004``. Values outside of this range
        raise a ``pydantic.ValidationError`` before any request is made.
        """
        LOG.info("Setting extra fee to %s", fee)
        self.__rest_service.set_extra_fee(ExtraFeeDTO(extra_fee=fee))

    # == Currencies and pairs ==================================================

    def get_currency_list(self: Self, currency: str | None = None) -> list[CurrencySchema]:
        """Retrieve all supported currencies including their networks."""
        LOG.info("Getting currency list")
        return self.__rest_service.get_currency_list(
            CurrencyListQueryDTO(currency=currency),
        )

    def get_single_currency(self: Self, currency: str) -> CurrencySchema:
        """
        Retrieve a single currency, e.g. ``"BTC"``.

        An unknown currency raises ``ApiError`` with code 404 and the message
        "Currency not found". An empty code raises a ``ValidationError``
        before any request is sent.
        """
        LOG.info("Getting currency '%s'", currency)
        return self.__rest_service.get_single_currency(
            SingleCurrencyQueryDTO(currency=currency),
        )

    def get_pair_list(self: Self) -> list[str]:
        """
        Retrieve all supported pairs.

        The entries look like ``"BTC_BTC_ETH_ETH"``
        (sendCurrency_sendNetwork_receiveCurrency_receiveNetwork) and can be
        split with :meth:`easybit.models.domain.PairIdentifier.parse`.
        """
        LOG.info("Getting pair list")
        return self.__rest_service.get_pair_list()

    def get_pair_info(
        self: Self,
        send: str,
        receive: str,
        send_network: str | None = None,
        receive_network: str | None = None,
        amount_type: AmountType | str | None = None,
    ) -> PairInfoSchema:
        """
        Retrieve minimum/maximum amount, network fee, confirmations and
        processing time of a pair.

        Pass ``amount_type="receive"`` to get the bounds in terms of the
        received currency.
        """
        LOG.info("Getting pair info for %s -> %s", send, receive)
        return self.__rest_service.get_pair_info(
            PairInfoQueryDTO(
                send=send,
                receive=receive,
                send_network=send_network,
                receive_network=receive_network,
                amount_type=amount_type,
            ),
        )

    def get_exchange_rate(  # noqa: PLR0913
        self: Self,
        send: str,
        receive: str,
        amount: Amount,
        send_network: str | None = None,
        receive_network: str | None = None,
        amount_type: AmountType | str | None = None,
        extra_fee_override: Amount | None = None,
    ) -> ExchangeRateSchema:
        """
        Retrieve a quote for exchanging ``amount``.

        ``extra_fee_override`` replaces the account extra fee for this quote,
        useful for discounts or promotions.
        """
        LOG.info("Getting exchange rate for %s %s -> %s", amount, send, receive)
        return self.__rest_service.get_exchange_rate(
            ExchangeRateQueryDTO(
                send=send,
                receive=receive,
                amount=amount,
                send_network=send_network,
                receive_network=receive_network,
                amount_type=amount_type,
                extra_fee_override=extra_fee_override,
            ),
        )

    def validate_address(
        self: Self,
        currency: str,
        address: str,
        network: str | None = None,
        tag: str | None = None,
    ) -> None:
        """Validate an address. Invalid addresses raise an ``ApiError``."""
        LOG.info("Validating %s address '%s'", currency, address)
        self.__rest_service.validate_address(
            AddressValidationQueryDTO(
                currency=currency,
                address=address,
                network=network,
                tag=tag,
            ),
        )

    # == Orders ================================================================

    def create_order(  # noqa: PLR0913
        self: Self,
        send: str,
        receive: str,
        amount: Amount,
        receive_address: str,
        *,
        send_network: str | None = None,
        receive_network: str | None = None,
        receive_tag: str | None = None,
        extra_fee_override: Amount | None = None,
        vpm: VolatilityProtection | str | None = None,
        refund_address: str | None = None,
        refund_tag: str | None = None,
        user_id: str | None = None,
        user_device_id: str | None = None,
        payload: str | None = None,
    ) -> OrderSchema:
        """
        Create an order exchanging ``amount`` of ``send`` into ``receive``.

        The returned order holds the deposit address (``send_address``) the
        user has to send the funds to. ``user_device_id`` is required by the
        API if no ``payload`` from the easybit identification script is
        passed; ``user_id`` should be left out for guest users.
        """
        LOG.info("Creating order for %s %s -> %s", amount, send, receive)
        order = self.__rest_service.create_order(
            CreateOrderDTO(
                send=send,
                receive=receive,
                amount=amount,
                receive_address=receive_address,
                send_network=send_network,
                receive_network=receive_network,
                receive_tag=receive_tag,
                extra_fee_override=extra_fee_override,
                vpm=vpm,
                refund_address=refund_address,
                refund_tag=refund_tag,
                user_id=user_id,
                user_device_id=user_device_id,
                payload=payload,
            ),
        )
        LOG.info("Created order '%s'", order.id)
        return order

    def get_order_status(self: Self, order_id: str) -> OrderStatusSchema:
        LOG.info("Getting status of order '%s'", order_id)
        return self.__rest_service.get_order_status(OrderStatusQueryDTO(id=order_id))

    def get_orders(  # noqa: PLR0913
        self: Self,
        order_id: str | None = None,
        limit: int | None = None,
        date_from: int | None = None,
        date_to: int | None = None,
        sort_direction: SortDirection | str | None = None,
        status: OrderStatus | str | None = None,
    ) -> list[OrderSummarySchema]:
        """
        Retrieve the orders of the account.

        ``date_from`` and ``date_to`` are milliseconds since epoch; datetime
        objects are accepted as well.
        """
        LOG.info("Getting orders")
        return self.__rest_service.get_orders(
            OrdersQueryDTO(
                id=order_id,
                limit=limit,
                date_from=date_from,
                date_to=date_to,
                sort_direction=sort_direction,
                status=status,
            ),
        )

    # == KYC ===================================================================

    def update_kyc(
        self: Self,
        order_id: str,
        documents: list[DocumentDTO],
        user_id: str | None = None,
        country: str | None = None,
    ) -> None:
        """
        Submit KYC proofs for an order in "Action Request".

        ``country`` is the ISO 3166-1 alpha-3 code of the user's country.
        """
        LOG.info("Submitting %d KYC document(s) for order '%s'", len(documents), order_id)
        self.__rest_service.update_kyc(
            KYCProofDTO(
                id=order_id,
                user_id=user_id,
                validation_data=ValidationDataDTO(country=country, documents=documents),
            ),
        )

    def refund_order(
        self: Self,
        order_id: str,
        refund_address: str,
        refund_tag: str | None = None,
    ) -> None:
        """
        Request the refund of an order.

        Only accepted while the order is in "Action Request" and its
        validation status is unset, "awaiting", "failed_allow_retry" or
        "failed_deny_retry", see ``OrderStatusSchema.is_refundable``.
        """
        LOG.info("Requesting refund of order '%s'", order_id)
        self.__rest_service.refund_order(
            RefundOrderDTO(
                id=order_id,
                refund_address=refund_address,
                refund_tag=refund_tag,
            ),
        )
