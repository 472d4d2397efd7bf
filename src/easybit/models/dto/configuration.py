# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_URL = "https://api.easybit.com"


class ClientConfigDTO(BaseModel):
    """
    Data transfer object for the client configuration. These values are
    passed via CLI or environment variables.
    """

    model_config = ConfigDict(frozen=True)

    url: str = DEFAULT_URL
    api_key: str = Field(..., min_length=1, repr=False)
    # None means no timeout, the requests default
    timeout: float | None = Field(None, gt=0)

    @field_validator("url")
    @classmethod
    def validate_url(cls, value: str) -> str:
        """Validate the scheme and strip trailing slashes."""
        if not value.startswith(("https://", "http://")):
            raise ValueError("URL must start with 'https://' or 'http://'")
        return value.rstrip("/")
