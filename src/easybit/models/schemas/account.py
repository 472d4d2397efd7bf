# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

from easybit.models.schemas.base import Amount, EasybitSchema


class AccountSchema(EasybitSchema):
    """Model for the ``/account`` response"""

    level: int  # Account level
    volume: Amount  # Volume traded in USDT during the last month
    fee: Amount  # easybit.io fee
    extra_fee: Amount  # Extra fee set by the API user, e.g. "0.004"
    total_fee: Amount  # Total fee charged to end users
