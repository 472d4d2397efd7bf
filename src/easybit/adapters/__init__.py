# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

from easybit.adapters.rest import EasybitRESTServiceAdapter

__all__ = ["EasybitRESTServiceAdapter"]
