"""Decoding of API payloads into record models.

``decode`` is the one place decode failures are normalised: every shape
mismatch or malformed document becomes a ``ParseFailureError`` carrying the
raw payload.
"""

from __future__ import annotations

import logging
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from iheart_radio_extension.domain.shared.exceptions import ParseFailureError
from iheart_radio_extension.domain.shared.messages import LogTemplates

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def decode(model: type[ModelT], text: str) -> ModelT:
    try:
        return model.model_validate_json(text)
    except ValidationError as e:
        logger.error(LogTemplates.DECODE_FAILED, model.__name__, e.error_count())
        raise ParseFailureError(text, e) from e
