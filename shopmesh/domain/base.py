"""Pydantic base schema utilities for domain models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """
    Base Pydantic model for all domain aggregates.

    Configures common Pydantic behaviors:
    - ``populate_by_name=True``: Allow initialization by alias or field name.
    - ``extra="forbid"``: Prevent unknown fields from slipping into the model, ensuring strict validation.
    - ``validate_assignment=True``: Behaviour methods mutate fields, so assignments are re-validated.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="forbid",
        validate_assignment=True,
    )
