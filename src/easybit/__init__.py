# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

"""Python client for the easybit.io exchange API."""

from easybit.client import EasybitClient
from easybit.exceptions import ApiError, DeserializeError, EasybitError, NetworkError

__all__ = [
    "ApiError",
    "DeserializeError",
    "EasybitClient",
    "EasybitError",
    "NetworkError",
]
