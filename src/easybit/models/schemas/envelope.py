# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

from easybit.models.schemas.base import EasybitSchema


class ErrorEnvelopeSchema(EasybitSchema):
    """Model for a failed response: ``{"errorMessage": ..., "errorCode": ...}``"""

    error_message: str
    error_code: int
