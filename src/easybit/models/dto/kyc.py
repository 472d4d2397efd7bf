# -*- mode: python; coding: utf-8 -*-
#
# Copyright (C) 2025 Benjamin Thomas Schwertfeger
# All rights reserved.
# https://github.com/btschwertfeger
#

"""Body of ``/updateOrder``, used to submit KYC proofs for an order."""

from pydantic import Field

from easybit.models.domain import DocumentSide, DocumentType
from easybit.models.dto.base import RequestDTO


class DocumentDTO(RequestDTO):
    """
    A single identity document.

    ``uri`` and the entries of ``selfie`` are data URIs of the media, either
    a URL or BASE64 encoded. Selfies show the user and the document, both
    clearly visible on the same image.
    """

    document_type: DocumentType | None = None
    side: DocumentSide | None = None
    uri: str | None = None
    selfie: list[str] | None = None


class ValidationDataDTO(RequestDTO):
    # ISO 3166-1 alpha-3, e.g. "DEU"
    country: str | None = Field(None, pattern=r"^[A-Z]{3}$")
    documents: list[DocumentDTO] = Field(..., min_length=1)


class KYCProofDTO(RequestDTO):
    id: str = Field(..., min_length=1)  # Order ID
    user_id: str | None = None  # Leave out for guest users
    validation_data: ValidationDataDTO
