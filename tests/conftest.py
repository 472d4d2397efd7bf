# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

import json
from collections.abc import Callable
from typing import Any

import pytest
import requests

from easybit.adapters.rest import EasybitRESTServiceAdapter

URL = "https://api.easybit.test"
API_KEY = "test_api_key"  # noqa: S105


def make_response(payload: Any = None, status_code: int = 200, raw: bytes | None = None) -> requests.Response:  # noqa: ANN401
    """Build a real requests.Response with the given JSON payload or raw body."""
    response = requests.Response()
    response.status_code = status_code
    if raw is not None:
        response._content = raw  # noqa: SLF001
    elif payload is None:
        response._content = b""  # noqa: SLF001
    else:
        response._content = json.dumps(payload).encode()  # noqa: SLF001
    response.headers["Content-Type"] = "application/json"
    return response


@pytest.fixture
def response_factory() -> Callable[..., requests.Response]:
    return make_response


@pytest.fixture
def adapter() -> EasybitRESTServiceAdapter:
    return EasybitRESTServiceAdapter(url=URL, api_key=API_KEY)


@pytest.fixture
def network_data() -> dict:
    return {
        "network": "BTC",
        "name": "Bitcoin",
        "isDefault": True,
        "sendStatus": True,
        "receiveStatus": True,
        "receiveDecimals": 8,
        "confirmationsMinimum": 1,
        "confirmationsMaximum": 2,
        "explorer": "https://blockchair.com/bitcoin",
        "explorerHash": "https://blockchair.com/bitcoin/transaction/{{txid}}",
        "explorerAddress": "https://blockchair.com/bitcoin/address/{{address}}",
        "hasTag": False,
        "tagName": None,
        "contractAddress": None,
        "explorerContract": None,
    }


@pytest.fixture
def currency_data(network_data: dict) -> dict:
    return {
        "currency": "BTC",
        "name": "Bitcoin",
        "sendStatusAll": True,
        "receiveStatusAll": True,
        "networkList": [network_data],
    }


@pytest.fixture
def account_data() -> dict:
    return {
        "level": 1,
        "volume": "12345.67",
        "fee": "0.004",
        "extraFee": "0.002",
        "totalFee": "0.006",
    }


@pytest.fixture
def pair_info_data() -> dict:
    return {
        "minimumAmount": "0.0012",
        "maximumAmount": "12.5",
        "networkFee": "0.0015",
        "confirmations": 1,
        "processingTime": "3-5",
    }


@pytest.fixture
def exchange_rate_data() -> dict:
    return {
        "rate": "17.0954",
        "sendAmount": "0.1",
        "receiveAmount": "1.70954",
        "networkFee": "0.0015",
        "confirmations": 1,
        "processingTime": "3-5",
    }


@pytest.fixture
def order_data() -> dict:
    return {
        "id": "a1b2c3d4",
        "send": "BTC",
        "receive": "ETH",
        "sendNetwork": "BTC",
        "receiveNetwork": "ETH",
        "sendAmount": "0.1",
        "receiveAmount": "1.70954",
        "sendAddress": "bc1qxy2kgdygjrsqtzq2n0yrf2493p83kkfjhx0wlh",
        "sendTag": None,
        "receiveAddress": "0xeB2629a2734e272Bcc07BDA959863f316F4bD4Cf",
        "receiveTag": None,
        "refundAddress": None,
        "refundTag": None,
        "vpm": "off",
        "createdAt": 1700000000000,
    }


@pytest.fixture
def order_status_data() -> dict:
    return {
        "id": "a1b2c3d4",
        "status": "Awaiting Deposit",
        "receiveAmount": "1.70954",
        "hashIn": None,
        "hashOut": None,
        "validationStatus": None,
        "createdAt": 1700000000000,
        "updatedAt": 1700000005000,
    }


@pytest.fixture
def order_summary_data(order_data: dict) -> dict:
    return {
        **order_data,
        "estimatedSendAmount": "0.1",
        "estimatedReceiveAmount": "1.7",
        "status": "Complete",
        "hashIn": "f4184fc596403b9d638783cf57adfe4c75c605f6356fbc91338530e9831e9e16",
        "hashOut": "0x5c504ed432cb51138bcf09aa5e8a410dd4a1e204ef84bfed1be16dfba1b22060",
        "networkFee": "0.0015",
        "earned": "0.0002",
        "validationStatus": "null",
        "updatedAt": 1700000900000,
    }
