# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

from typing import Self

from pydantic import BaseModel, ConfigDict


class PairIdentifier(BaseModel):
    """
    Parsed entry of the ``/pairList`` response.

    The API returns pairs as ``"<send>_<sendNetwork>_<receive>_<receiveNetwork>"``,
    e.g. ``"BTC_BTC_ETH_ETH"``.
    """

    model_config = ConfigDict(frozen=True)

    send: str
    send_network: str
    receive: str
    receive_network: str

    @classmethod
    def parse(cls: type[Self], value: str) -> Self:
        """Split a raw pair-list entry into its four components."""
        parts = value.split("_")
        if len(parts) != 4 or not all(parts):
            raise ValueError(f"Invalid pair identifier: '{value}'")
        send, send_network, receive, receive_network = parts
        return cls(
            send=send,
            send_network=send_network,
            receive=receive,
            receive_network=receive_network,
        )

    def __str__(self: Self) -> str:
        return f"{self.send}_{self.send_network}_{self.receive}_{self.receive_network}"
