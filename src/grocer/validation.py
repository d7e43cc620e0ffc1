"""Input checks applied before user data reaches the stores."""

from __future__ import annotations

from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from grocer.models import GroceryItem

MIN_CART_QUANTITY = 1
MAX_CART_QUANTITY = 100


class InvalidInputError(ValueError):
    """Raised when user-supplied values are rejected."""


class NewItemInput(BaseModel):
    """Validated fields for a new item."""

    name: str
    quantity: int = Field(gt=0)
    weight_amount: float = Field(gt=0)
    unit: str
    price_per_kg: float = Field(ge=0)

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @field_validator("name", "unit")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value:
            raise ValueError("must not be empty")
        return value


def _describe(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors(include_url=False):
        field = ".".join(str(part) for part in error["loc"]) or "input"
        parts.append(f"{field}: {error['msg']}")
    return "; ".join(parts)


def validate_new_item(**raw: Any) -> NewItemInput:
    try:
        return NewItemInput.model_validate(raw)
    except ValidationError as exc:
        raise InvalidInputError(_describe(exc)) from exc


def validate_cart_quantity(value: int) -> int:
    if not MIN_CART_QUANTITY <= value <= MAX_CART_QUANTITY:
        raise InvalidInputError(
            f"Quantity must be between {MIN_CART_QUANTITY} and {MAX_CART_QUANTITY}."
        )
    return value


def ensure_cart_quantities(items: Iterable[GroceryItem]) -> None:
    """Reject checkout when any cart line is outside the allowed quantity range."""

    invalid = [
        item.name
        for item in items
        if not MIN_CART_QUANTITY <= item.cart_quantity <= MAX_CART_QUANTITY
    ]
    if invalid:
        raise InvalidInputError(
            "One or more items in your cart have invalid quantities "
            f"({', '.join(invalid)}). Quantities must be between "
            f"{MIN_CART_QUANTITY} and {MAX_CART_QUANTITY}."
        )


__all__ = [
    "MIN_CART_QUANTITY",
    "MAX_CART_QUANTITY",
    "InvalidInputError",
    "NewItemInput",
    "validate_new_item",
    "validate_cart_quantity",
    "ensure_cart_quantities",
]
