"""Cart line items, their persisted shape and the rendered drawer view."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CartProduct(BaseModel):
    """Product as sent by an "add to cart" button (data attributes of the card)."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str = Field(..., min_length=1)
    name: str = ""
    price: float = Field(..., ge=0)
    img: str = ""
    variant: str | None = None

    @field_validator("variant", mode="before")
    @classmethod
    def blank_variant_to_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v


class CartLine(CartProduct):
    """Persisted line; key is id or id:variant and unique within the cart."""

    key: str = Field(..., min_length=1)
    qty: int = Field(default=1, ge=1)


class CartLineView(BaseModel):
    key: str
    label: str
    img: str
    unit_price: str
    qty: int


class CartView(BaseModel):
    """Projection of cart state for the drawer: count badge, lines and total."""

    count: int
    lines: list[CartLineView]
    empty_message: str | None = None
    total: str


class CheckoutDraft(BaseModel):
    """Result of checkout: either a mailto URL to open, or a warning to show."""

    mailto: str | None = None
    warning: str | None = None
