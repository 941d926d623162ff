"""A pared-down quick-commerce flow: stock that never goes negative, simple orders."""

from __future__ import annotations

import itertools
import math
from dataclasses import dataclass, field
from typing import ClassVar, Iterator

from patternbook.quickcommerce import (
    DbInventoryStore,
    InventoryManager,
    Product,
    ReplenishStrategy,
    ThresholdReplenishStrategy,
    User,
    create_product,
)


class ClampingInventoryStore(DbInventoryStore):
    """Inventory whose stock is clamped at zero instead of being dropped."""

    def remove_product(self, sku: int, quantity: int) -> None:
        if sku not in self._stock:
            return
        self._stock[sku] = max(0, self._stock[sku] - quantity)


class _QuietInventoryManager(InventoryManager):
    def add_stock(self, sku: int, quantity: int) -> None:
        self.store.add_product(create_product(sku), quantity)


class SimpleDarkStore:
    """A dark store with a location, an inventory and an optional top-up policy."""

    def __init__(
        self,
        name: str,
        x: float,
        y: float,
        replenish_strategy: ReplenishStrategy | None = None,
    ) -> None:
        self.name = name
        self.x = x
        self.y = y
        self.inventory_manager = _QuietInventoryManager(ClampingInventoryStore())
        self.replenish_strategy = replenish_strategy

    def add_stock(self, sku: int, quantity: int) -> None:
        self.inventory_manager.add_stock(sku, quantity)

    def check_stock(self, sku: int) -> int:
        return self.inventory_manager.check_stock(sku)

    def products(self) -> list[Product]:
        return self.inventory_manager.available_products()

    def distance_to(self, x: float, y: float) -> float:
        return math.hypot(self.x - x, self.y - y)

    def run_replenishment(self, items: dict[int, int]) -> None:
        if self.replenish_strategy is not None:
            self.replenish_strategy.replenish(self.inventory_manager, items)

    def __repr__(self) -> str:
        return f"SimpleDarkStore({self.name!r}, {self.x}, {self.y})"


class SimpleDarkStoreManager:
    """Registry of dark stores, searched in registration order."""

    def __init__(self) -> None:
        self.stores: list[SimpleDarkStore] = []

    def register(self, store: SimpleDarkStore) -> None:
        self.stores.append(store)

    def nearby_stores(self, x: float, y: float, max_distance: float) -> list[SimpleDarkStore]:
        """Stores within ``max_distance``, in the order they were registered."""
        return [s for s in self.stores if s.distance_to(x, y) <= max_distance]


@dataclass
class SimpleOrder:
    """An order whose total is the user's cart total when it is created."""

    _ids: ClassVar[Iterator[int]] = itertools.count(1)

    user: User
    total: float = field(init=False)
    order_id: int = field(init=False)

    def __post_init__(self) -> None:
        self.total = self.user.cart.total()
        self.order_id = next(SimpleOrder._ids)


class SimpleOrderManager:
    """Keeps the orders placed."""

    def __init__(self) -> None:
        self.orders: list[SimpleOrder] = []

    def place_order(self, user: User) -> SimpleOrder:
        order = SimpleOrder(user)
        self.orders.append(order)
        print(f"Order Placed! ID: {order.order_id}, Amount: Rs. {order.total:g}")
        return order


def initialize(store_manager: SimpleDarkStoreManager) -> list[SimpleDarkStore]:
    """Set up and register the two sample stores."""
    layout = [
        ("DS-A", 0.0, 0.0, [(101, 10), (102, 2)]),
        ("DS-B", 2.0, 2.0, [(102, 5), (103, 7)]),
    ]
    stores = []
    for name, x, y, stock in layout:
        store = SimpleDarkStore(name, x, y, ThresholdReplenishStrategy(5))
        for sku, quantity in stock:
            store.add_stock(sku, quantity)
        stores.append(store)
    for store in stores:
        store_manager.register(store)
    return stores


def main(argv=None) -> int:
    """Set up the stores, fill a cart and place an order."""
    store_manager = SimpleDarkStoreManager()
    initialize(store_manager)
    user = User("Aditya", 1.5, 1.5)
    user.cart.add_item(101, 2)
    user.cart.add_item(102, 3)
    print(f"\nCart Total: Rs. {user.cart.total():g}")
    SimpleOrderManager().place_order(user)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())