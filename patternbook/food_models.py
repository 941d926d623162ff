"""Restaurants, carts, users, payments and orders for a food-ordering app."""

from __future__ import annotations

import itertools
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar, Iterator

_restaurant_ids: Iterator[int] = itertools.count(1)
_order_ids: Iterator[int] = itertools.count(1)


def current_time() -> str:
    """The local time in ``ctime`` form, without a trailing newline."""
    return time.ctime().rstrip("\n")


@dataclass
class MenuItem:
    """A dish on a restaurant's menu."""

    code: str
    name: str
    price: int


@dataclass
class Restaurant:
    """A restaurant at a location, with its menu."""

    name: str
    location: str
    menu: list[MenuItem] = field(default_factory=list)
    restaurant_id: int = field(default_factory=lambda: next(_restaurant_ids))

    def add_menu_item(self, item: MenuItem) -> None:
        self.menu.append(item)


class Cart:
    """Items chosen from a single restaurant."""

    def __init__(self) -> None:
        self.restaurant: Restaurant | None = None
        self.items: list[MenuItem] = []

    def add_item(self, item: MenuItem) -> None:
        if self.restaurant is None:
            raise ValueError("Cart: Set a restaurant before adding items.")
        self.items.append(item)

    def total_cost(self) -> float:
        return float(sum(item.price for item in self.items))

    def is_empty(self) -> bool:
        return self.restaurant is None or not self.items

    def clear(self) -> None:
        self.items.clear()
        self.restaurant = None


@dataclass
class User:
    """A customer with an address and a cart of their own."""

    user_id: int
    name: str
    address: str
    cart: Cart = field(default_factory=Cart)


class PaymentStrategy(ABC):
    """A way of paying for an order."""

    @abstractmethod
    def pay(self, amount: float) -> str:
        """Pay ``amount`` and return a description of the payment."""


class CreditCardPaymentStrategy(PaymentStrategy):
    def __init__(self, card_number: str) -> None:
        self.card_number = card_number

    def pay(self, amount):
        text = f"Paid ₹{amount:g} using Credit Card ({self.card_number})"
        print(text)
        return text


class UpiPaymentStrategy(PaymentStrategy):
    def __init__(self, mobile: str) -> None:
        self.mobile = mobile

    def pay(self, amount):
        text = f"Paid ₹{amount:g} using UPI ({self.mobile})"
        print(text)
        return text


@dataclass(kw_only=True)
class Order(ABC):
    """An order for items from one restaurant; the total defaults to their sum."""

    user: User | None = None
    restaurant: Restaurant | None = None
    items: list[MenuItem] = field(default_factory=list)
    payment_strategy: PaymentStrategy | None = None
    total: float | None = None
    scheduled: str = ""
    order_id: int = field(default_factory=lambda: next(_order_ids))

    order_type: ClassVar[str]

    def __post_init__(self) -> None:
        if type(self) is Order:
            raise TypeError("Order is abstract; use DeliveryOrder or PickupOrder")
        self.items = list(self.items)
        if self.total is None:
            self.total = float(sum(item.price for item in self.items))

    def process_payment(self) -> bool:
        """Pay the total with the chosen strategy; False if none was chosen."""
        if self.payment_strategy is None:
            print("Please choose a payment mode first")
            return False
        self.payment_strategy.pay(self.total)
        return True


@dataclass(kw_only=True)
class DeliveryOrder(Order):
    order_type: ClassVar[str] = "Delivery"
    user_address: str = ""


@dataclass(kw_only=True)
class PickupOrder(Order):
    order_type: ClassVar[str] = "Pickup"
    restaurant_address: str = ""