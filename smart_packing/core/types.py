"""Shared type aliases used across the packing engine modules."""
from __future__ import annotations

from typing import Annotated

from pydantic import Field, StringConstraints

Confidence = Annotated[float, Field(ge=0, le=1)]
ConditionWeight = Annotated[float, Field(ge=0, le=1)]
Quantity = Annotated[int, Field(ge=1, le=20)]
BaseQuantity = Annotated[int, Field(ge=1)]
QuantityBound = Annotated[int, Field(ge=0)]
ItemId = Annotated[
    str,
    StringConstraints(
        min_length=1,
        strip_whitespace=True,
    ),
]
NameKey = Annotated[
    str,
    StringConstraints(
        pattern=r"^[a-z0-9_]+$",
        strip_whitespace=True,
    ),
]
LocaleCode = Annotated[
    str,
    StringConstraints(
        pattern=r"^[a-z]{2}(?:[-_][A-Za-z]{2})?$",
        strip_whitespace=True,
    ),
]
