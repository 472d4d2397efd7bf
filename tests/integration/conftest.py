# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

import os
from collections.abc import Generator

import pytest

from easybit import EasybitClient


@pytest.fixture(scope="session")
def live_credentials() -> tuple[str, str]:
    url = os.getenv("EASYBIT_URL")
    api_key = os.getenv("EASYBIT_API_KEY")
    if not url or not api_key:
        pytest.skip("EASYBIT_URL and EASYBIT_API_KEY are not set")
    return url, api_key


@pytest.fixture
def live_client(live_credentials: tuple[str, str]) -> Generator[EasybitClient, None, None]:
    url, api_key = live_credentials
    with EasybitClient(url=url, api_key=api_key, timeout=30) as client:
        yield client
