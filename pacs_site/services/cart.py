"""
Shopping cart state machine: line items keyed by product id and variant.

The browser runs the same operations in static/js/site.js against
window.localStorage; this module is the reference model and renders the
drawer's first paint on the server. Both persist the JSON array of lines
under CART_STORAGE_KEY.
"""

import logging
from collections.abc import Mapping
from typing import Any, Protocol
from urllib.parse import quote

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from pacs_site.schemas.cart import CartLine, CartLineView, CartProduct, CartView, CheckoutDraft

logger = logging.getLogger(__name__)

CART_STORAGE_KEY = "pacs_cart"
EMPTY_CART_MESSAGE = "Votre panier est vide."
CHECKOUT_SUBJECT = "Commande Shop Solidaire"

_LINES = TypeAdapter(list[CartLine])


class CartStorage(Protocol):
    """Key/value string store with the shape of browser localStorage."""

    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...


class MemoryStorage:
    """Dict-backed CartStorage (server-side rendering, tests)."""

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value


def format_eur(amount: float) -> str:
    """Format like fr-FR currency EUR: '1 234,50 €' (narrow nbsp grouping, nbsp before €)."""
    grouped = f"{round(amount, 2) + 0.0:,.2f}"
    return grouped.replace(",", "\u202f").replace(".", ",") + "\u00a0€"


def line_key(product: CartProduct) -> str:
    return f"{product.id}:{product.variant}" if product.variant else product.id


class Cart:
    """
    Ordered cart lines persisted in storage under storage_key.

    Every mutation saves the whole list synchronously and then re-renders;
    quantities never drop below 1 (decrementing a single item removes the line).
    """

    def __init__(self, storage: CartStorage, storage_key: str = CART_STORAGE_KEY) -> None:
        self.storage = storage
        self.storage_key = storage_key
        self.items: list[CartLine] = []
        self.view: CartView | None = None
        self.load()

    def load(self) -> None:
        """Reload from storage; missing or corrupt data gives an empty cart."""
        try:
            raw = self.storage.get_item(self.storage_key)
            items = _LINES.validate_json(raw or "[]")
            if len({line.key for line in items}) != len(items):
                raise ValueError("duplicate cart keys")
        except (PydanticValidationError, ValueError) as e:
            logger.debug("Discarding unreadable cart data: %s", e)
            items = []
        except Exception:
            logger.warning("Cart storage unavailable; starting empty", exc_info=True)
            items = []
        self.items = items
        self.render()

    def save(self) -> None:
        self.storage.set_item(self.storage_key, _LINES.dump_json(self.items).decode("utf-8"))
        self.render()

    def find(self, key: str) -> CartLine | None:
        return next((line for line in self.items if line.key == key), None)

    def add(self, product: CartProduct | Mapping[str, Any]) -> CartLine:
        """Add one unit; merges into an existing line with the same id and variant."""
        if not isinstance(product, CartProduct):
            product = CartProduct.model_validate(product)
        key = line_key(product)
        line = self.find(key)
        if line is not None:
            line.qty += 1
        else:
            line = CartLine(key=key, qty=1, **product.model_dump())
            self.items.append(line)
        self.save()
        return line

    def increment(self, key: str) -> None:
        line = self.find(key)
        if line is not None:
            line.qty += 1
            self.save()

    def decrement(self, key: str) -> None:
        line = self.find(key)
        if line is not None and line.qty > 1:
            line.qty -= 1
            self.save()
        else:
            self.remove(key)

    def remove(self, key: str) -> None:
        self.items = [line for line in self.items if line.key != key]
        self.save()

    def clear(self) -> None:
        self.items = []
        self.save()

    def count(self) -> int:
        return sum(line.qty for line in self.items)

    def total(self) -> float:
        return sum(line.price * line.qty for line in self.items)

    def render(self) -> CartView:
        """Project the current lines into the drawer view. Idempotent."""
        lines = [
            CartLineView(
                key=line.key,
                label=f"{line.name} · {line.variant}" if line.variant else line.name,
                img=line.img,
                unit_price=format_eur(line.price),
                qty=line.qty,
            )
            for line in self.items
        ]
        self.view = CartView(
            count=self.count(),
            lines=lines,
            empty_message=None if lines else EMPTY_CART_MESSAGE,
            total=format_eur(self.total()),
        )
        return self.view

    def order_lines(self) -> list[str]:
        return [
            f"- {line.name}{f' ({line.variant})' if line.variant else ''} x{line.qty}"
            f" — {format_eur(line.price * line.qty)}"
            for line in self.items
        ]

    def checkout(self, recipient: str, subject: str = CHECKOUT_SUBJECT) -> CheckoutDraft:
        """
        Compose the order email as a mailto: URL. Nothing is sent or stored;
        an empty cart only yields the warning to display.
        """
        if not self.items:
            return CheckoutDraft(warning=EMPTY_CART_MESSAGE)
        body = "\r\n".join(
            [
                "Bonjour,",
                "",
                "Je souhaite commander les articles suivants :",
                *self.order_lines(),
                "",
                f"Total : {format_eur(self.total())}",
                "",
                "Nom : ",
                "Adresse de livraison : ",
                "Téléphone : ",
                "Mode de paiement préféré : ",
                "",
                "Merci !",
            ]
        )
        mailto = f"mailto:{recipient}?subject={quote(subject)}&body={quote(body, safe='')}"
        return CheckoutDraft(mailto=mailto)
