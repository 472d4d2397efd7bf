# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

"""
Errors raised by the easybit client.

Every failing call raises exactly one of the three members of
:class:`EasybitError`:

* :class:`NetworkError` - the HTTP request could not be completed
* :class:`DeserializeError` - the response does not match any known shape
* :class:`ApiError` - the service answered with an error envelope

None of them is handled inside the library.

Using a client after it has been closed is a programming error and raises a
plain ``RuntimeError`` instead, outside of this hierarchy.
"""

from typing import Self


class EasybitError(Exception):
    """Base class for all errors raised by the easybit client."""


class NetworkError(EasybitError):
    """Transport-level failure (DNS, TLS, connection reset, timeout)."""


class DeserializeError(EasybitError):
    """
    The response body could not be parsed into the expected structure.

    This usually means that the remote API changed.
    """


class ApiError(EasybitError):
    """The easybit API returned ``{"errorMessage": ..., "errorCode": ...}``."""

    def __init__(self: Self, message: str, code: int) -> None:
        super().__init__(f"EasyBit {code}: {message}")
        self.message = message
        self.code = code

    def __repr__(self: Self) -> str:
        return f"ApiError(message={self.message!r}, code={self.code})"
