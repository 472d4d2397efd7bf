# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

"""
Adapter for the easybit REST API using requests.

All endpoints answer with one of two envelopes::

    {"data": ...}                                  # success
    {"errorMessage": "...", "errorCode": 401}      # failure

Each request is a fresh round trip without retries.
"""

from logging import getLogger
from typing import Any, Self, TypeVar

import requests
from pydantic import TypeAdapter, ValidationError

from easybit.exceptions import ApiError, DeserializeError, NetworkError
from easybit.interfaces.exchange import IEasybitRESTService
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
    ErrorEnvelopeSchema,
    ExchangeRateSchema,
    OrderSchema,
    OrderStatusSchema,
    OrderSummarySchema,
    PairInfoSchema,
)

LOG = getLogger(__name__)

T = TypeVar("T")

API_KEY_HEADER = "API-KEY"  # noqa: S105

_ACCOUNT = TypeAdapter(AccountSchema)
_CURRENCY = TypeAdapter(CurrencySchema)
_CURRENCY_LIST = TypeAdapter(list[CurrencySchema])
_PAIR_LIST = TypeAdapter(list[str])
_PAIR_INFO = TypeAdapter(PairInfoSchema)
_EXCHANGE_RATE = TypeAdapter(ExchangeRateSchema)
_ORDER = TypeAdapter(OrderSchema)
_ORDER_STATUS = TypeAdapter(OrderStatusSchema)
_ORDER_SUMMARY_LIST = TypeAdapter(list[OrderSummarySchema])


class EasybitRESTServiceAdapter(IEasybitRESTService):
    """Adapter for the easybit REST API."""

    def __init__(
        self: Self,
        url: str,
        api_key: str,
        timeout: float | None = None,
    ) -> None:
        self.__url = url.rstrip("/")
        self.__api_key = api_key
        self.__timeout = timeout

    @property
    def url(self: Self) -> str:
        return self.__url

    @property
    def api_key(self: Self) -> str:
        return self.__api_key

    def close(self: Self) -> None:
        self.__api_key = ""

    # == Transport =============================================================

    def _request(
        self: Self,
        method: str,
        path: str,
        params: dict[str, str] | None = None,
        body: dict[str, Any] | None = None,
    ) -> requests.Response:
        """Send a request with the API key header attached."""
        if not self.__api_key:
            raise RuntimeError("The client has been closed.")

        LOG.debug("%s %s params=%s body=%s", method, path, params, body)
        try:
            response = requests.request(
                method=method,
                url=f"{self.__url}{path}",
                headers={API_KEY_HEADER: self.__api_key},
                params=params,
                json=body,
                timeout=self.__timeout,
            )
        except requests.exceptions.RequestException as exc:
            LOG.error("Request %s %s failed: %s", method, path, exc)
            raise NetworkError(f"Request {method} {path} failed: {exc}") from exc

        LOG.debug("%s %s -> %s", method, path, response.status_code)
        return response

    def _unwrap(self: Self, response: requests.Response, path: str) -> Any:  # noqa: ANN401
        """
        Return the ``data`` member of the response envelope.

        Raises an ApiError for error envelopes and a DeserializeError for
        anything else.
        """
        try:
            payload = response.json()
        except ValueError as exc:
            LOG.error(
                "Response of %s is not valid JSON (status %s)",
                path,
                response.status_code,
            )
            raise DeserializeError(
                f"Response of {path} is not valid JSON: {exc}",
            ) from exc

        if isinstance(payload, dict) and "data" in payload:
            return payload["data"]

        try:
            error = ErrorEnvelopeSchema.model_validate(payload)
        except ValidationError as exc:
            LOG.error("Unexpected response of %s: %s", path, payload)
            raise DeserializeError(
                f"Response of {path} matches neither envelope: {exc}",
            ) from exc

        LOG.error("EasyBit error %d: %s", error.error_code, error.error_message)
        raise ApiError(error.error_message, error.error_code)

    def _get(self: Self, path: str, adapter: TypeAdapter[T], **kwargs: Any) -> T:
        return self._validate(
            adapter,
            self._unwrap(self._request("GET", path, **kwargs), path),
            path,
        )

    def _execute(self: Self, method: str, path: str, **kwargs: Any) -> None:
        """
        Call an endpoint that has no result.

        An empty 2xx body counts as success as well as a ``data`` envelope.
        """
        response = self._request(method, path, **kwargs)
        if response.ok and not response.content:
            return
        self._unwrap(response, path)

    @staticmethod
    def _validate(adapter: TypeAdapter[T], data: Any, path: str) -> T:  # noqa: ANN401
        try:
            return adapter.validate_python(data)
        except ValidationError as exc:
            LOG.error("Could not deserialize the data of %s: %s", path, exc)
            raise DeserializeError(
                f"Data of {path} does not match the expected schema: {exc}",
            ) from exc

    # == Account ===============================================================

    def get_account(self: Self) -> AccountSchema:
        return self._get("/account", _ACCOUNT)

    def set_extra_fee(self: Self, extra_fee: ExtraFeeDTO) -> None:
        self._execute("POST", "/setExtraFee", body=extra_fee.to_body())

    # == Currencies and pairs ==================================================

    def get_currency_list(
        self: Self,
        query: CurrencyListQueryDTO,
    ) -> list[CurrencySchema]:
        return self._get("/currencyList", _CURRENCY_LIST, params=query.to_params())

    def get_single_currency(
        self: Self,
        query: SingleCurrencyQueryDTO,
    ) -> CurrencySchema:
        path = "/currencyList"
        data = self._unwrap(
            self._request("GET", path, params=query.to_params()),
            path,
        )
        # The filtered list usually holds one entry, some deployments return
        # the object itself.
        currencies = (
            [self._validate(_CURRENCY, data, path)]
            if isinstance(data, dict)
            else self._validate(_CURRENCY_LIST, data, path)
        )
        for currency in currencies:
            if currency.currency.upper() == query.currency.upper():
                return currency

        LOG.error("Currency '%s' not found", query.currency)
        raise ApiError("Currency not found", 404)

    def get_pair_list(self: Self) -> list[str]:
        return self._get("/pairList", _PAIR_LIST)

    def get_pair_info(self: Self, query: PairInfoQueryDTO) -> PairInfoSchema:
        return self._get("/pairInfo", _PAIR_INFO, params=query.to_params())

    def get_exchange_rate(
        self: Self,
        query: ExchangeRateQueryDTO,
    ) -> ExchangeRateSchema:
        return self._get("/rate", _EXCHANGE_RATE, params=query.to_params())

    def validate_address(self: Self, query: AddressValidationQueryDTO) -> None:
        self._execute("GET", "/validateAddress", params=query.to_params())

    # == Orders ================================================================

    def create_order(self: Self, order: CreateOrderDTO) -> OrderSchema:
        path = "/order"
        return self._validate(
            _ORDER,
            self._unwrap(self._request("POST", path, body=order.to_body()), path),
            path,
        )

    def get_order_status(self: Self, query: OrderStatusQueryDTO) -> OrderStatusSchema:
        return self._get("/orderStatus", _ORDER_STATUS, params=query.to_params())

    def get_orders(self: Self, query: OrdersQueryDTO) -> list[OrderSummarySchema]:
        return self._get("/orders", _ORDER_SUMMARY_LIST, params=query.to_params())

    # == KYC ===================================================================

    def update_kyc(self: Self, proof: KYCProofDTO) -> None:
        self._execute("POST", "/updateOrder", body=proof.to_body())

    def refund_order(self: Self, refund: RefundOrderDTO) -> None:
        self._execute("POST", "/refundOrder", body=refund.to_body())
